"""Domain models - pure Python dataclasses representing budgeting entities"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Tuple, Union


@dataclass(frozen=True)
class Category:
    """Budget bucket (envelope)"""

    id: str
    name: str


@dataclass(frozen=True)
class IncomeTransaction:
    """Money coming in; distributed across every envelope"""

    id: str
    timestamp: datetime
    description: str
    amount: float  # always a non-negative magnitude

    @property
    def kind(self) -> str:
        return "income"


@dataclass(frozen=True)
class ExpenseTransaction:
    """Money going out of a single envelope"""

    id: str
    timestamp: datetime
    description: str
    amount: float  # always a non-negative magnitude
    fixed: bool = False  # fijo vs variable
    necessary: bool = False  # necesario vs prescindible
    category: Optional[str] = None

    @property
    def kind(self) -> str:
        return "expense"


Transaction = Union[IncomeTransaction, ExpenseTransaction]

# category id -> fraction of every income routed to that envelope
BudgetAllocation = Dict[str, float]


@dataclass(frozen=True)
class Debt:
    """Loan or credit line being paid down monthly"""

    id: str
    name: str
    principal: float
    apr: float  # annual rate as a fraction, e.g. 0.24
    start_timestamp: datetime
    term_months: Optional[int] = None
    min_payment: Optional[float] = None


@dataclass(frozen=True)
class AmortizationEntry:
    """Single month in a payoff schedule"""

    month: int
    payment: float
    interest: float
    principal: float
    balance: float


@dataclass(frozen=True)
class AmortizationSchedule:
    """Month-by-month payoff simulation for one debt"""

    entries: Tuple[AmortizationEntry, ...]
    total_months: int
    total_interest: float
    paid_off: bool
    ceiling_reached: bool  # stopped by the iteration cap, balance may remain

    @property
    def remaining_balance(self) -> float:
        return self.entries[-1].balance if self.entries else 0.0


@dataclass(frozen=True)
class DebtTotals:
    """Aggregate figures across every debt"""

    balance: float
    payment: float
    interest: float


@dataclass(frozen=True)
class CapacityResult:
    """Output of the capacity / debt-to-income analysis"""

    capacity: float
    dti: float
    band: str  # Excelente | Sano | Atención | Riesgo


@dataclass(frozen=True)
class BudgetUsage:
    """How much of a category's monthly budget has been used"""

    category: Category
    fraction: float
    budget: float
    used: float
    ratio: float
    status: str  # ok | warning | exceeded


@dataclass(frozen=True)
class ExpenseBreakdown:
    """Expense totals split by the fixed and necessity flags"""

    fixed: float
    variable: float
    necessary: float
    discretionary: float


@dataclass(frozen=True)
class Goal:
    """Savings target, optionally with a deadline in months"""

    name: str
    cost: float
    months: int = 0


@dataclass(frozen=True)
class GoalStatus:
    remaining: float
    eta_months: Optional[int]
    required_monthly: Optional[float]
    on_track: Optional[bool]


@dataclass(frozen=True)
class BalanceProjection:
    """Linear balance forecast from average income and expense amounts"""

    current: float
    monthly_net: float
    points: List[float] = field(default_factory=list)
    alert: Optional[str] = None  # deficit | surplus
