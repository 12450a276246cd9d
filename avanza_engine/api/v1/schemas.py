"""Pydantic schemas for snapshot payloads and report responses"""

from datetime import date, datetime
from typing import Annotated, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from avanza_engine.domain.categories import DEFAULT_BUDGETS
from avanza_engine.domain.models import Debt, ExpenseTransaction, Goal, IncomeTransaction
from avanza_engine.domain.state import Snapshot
from avanza_engine.utils.date_utils import as_utc


class _Payload(BaseModel):
    """Accepts the UI's camelCase keys as well as the field names; rejects NaN and infinity"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", allow_inf_nan=False)


class IncomeIn(_Payload):
    kind: Literal["income"]
    id: str
    timestamp: datetime = Field(..., alias="ts")
    description: str = Field(default="", alias="desc")
    amount: float

    def to_domain(self) -> IncomeTransaction:
        return IncomeTransaction(
            id=self.id,
            timestamp=as_utc(self.timestamp),
            description=self.description,
            amount=abs(self.amount),
        )


class ExpenseIn(_Payload):
    kind: Literal["expense"]
    id: str
    timestamp: datetime = Field(..., alias="ts")
    description: str = Field(default="", alias="desc")
    amount: float
    fixed: Optional[Literal["fijo", "variable"]] = None
    need: Optional[Literal["necesario", "prescindible"]] = None
    category: Optional[str] = None

    def to_domain(self) -> ExpenseTransaction:
        return ExpenseTransaction(
            id=self.id,
            timestamp=as_utc(self.timestamp),
            description=self.description,
            amount=abs(self.amount),
            fixed=self.fixed == "fijo",
            necessary=self.need == "necesario",
            category=self.category or None,
        )


TransactionIn = Annotated[Union[IncomeIn, ExpenseIn], Field(discriminator="kind")]


class DebtIn(_Payload):
    id: str
    name: str
    principal: float
    apr: float = 0.0
    term_months: Optional[int] = Field(default=None, alias="termMonths")
    min_payment: Optional[float] = Field(default=None, alias="minPayment")
    start_timestamp: datetime = Field(..., alias="startTs")

    def to_domain(self) -> Debt:
        return Debt(
            id=self.id,
            name=self.name,
            principal=self.principal,
            apr=self.apr,
            start_timestamp=as_utc(self.start_timestamp),
            term_months=self.term_months,
            min_payment=self.min_payment,
        )


class GoalIn(_Payload):
    name: str
    cost: float
    months: int = 0


class SnapshotIn(_Payload):
    """Whole application state as stored by the UI"""

    balance: float = 0.0
    transactions: List[TransactionIn] = Field(default_factory=list, alias="txs")
    goal: Optional[GoalIn] = None
    monthly_income: float = Field(default=0.0, alias="monthlyIncome")
    budgets: Dict[str, float] = Field(default_factory=lambda: dict(DEFAULT_BUDGETS))
    debts: List[DebtIn] = Field(default_factory=list)

    def to_domain(self) -> Snapshot:
        return Snapshot(
            balance=self.balance,
            transactions=tuple(t.to_domain() for t in self.transactions),
            goal=Goal(name=self.goal.name, cost=self.goal.cost, months=self.goal.months) if self.goal else None,
            monthly_income=self.monthly_income,
            budgets=dict(self.budgets),
            debts=tuple(d.to_domain() for d in self.debts),
        )


class AmortizationEntrySchema(BaseModel):
    """Single month in a payoff schedule"""

    model_config = ConfigDict(from_attributes=True)

    month: int
    payment: float
    interest: float
    principal: float
    balance: float


class DebtReport(BaseModel):
    """Payment, payoff and schedule of one debt"""

    debt_id: str
    name: str
    principal: float
    payment: float
    amortizing: bool
    total_months: int
    total_interest: float
    remaining_balance: float
    paid_off: bool
    ceiling_reached: bool
    payoff_date: Optional[date] = None
    schedule: List[AmortizationEntrySchema]


class DebtTotalsSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    balance: float
    payment: float
    interest: float


class CapacitySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    capacity: float
    dti: float
    band: str


class BudgetUsageSchema(BaseModel):
    category_id: str
    category_name: str
    fraction: float
    budget: float
    used: float
    ratio: float
    status: str


class BreakdownSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    fixed: float
    variable: float
    necessary: float
    discretionary: float


class ProjectionSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    current: float
    monthly_net: float
    points: List[float]
    alert: Optional[str] = None


class GoalStatusSchema(BaseModel):
    name: str
    cost: float
    months: int
    remaining: float
    eta_months: Optional[int] = None
    required_monthly: Optional[float] = None
    on_track: Optional[bool] = None


class ReportResponse(BaseModel):
    """Every derived figure for one snapshot"""

    report_id: str
    balance: float
    income_total: float
    expense_total: float
    monthly_savings: float
    spent_by_category: Dict[str, float]
    envelopes: Dict[str, float]
    budget_usage: List[BudgetUsageSchema]
    exceeded_categories: List[str]
    allocation_total: float
    allocation_offset_points: int
    breakdown: BreakdownSchema
    debts: List[DebtReport]
    debt_totals: DebtTotalsSchema
    capacity: CapacitySchema
    projection: ProjectionSchema
    goal: Optional[GoalStatusSchema] = None
    badge: Optional[str] = None
