"""Immutable application snapshot and the pure transitions that produce new ones"""

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from typing import Dict, Optional, Tuple, Union
from avanza_engine.domain.categories import DEFAULT_BUDGETS
from avanza_engine.domain.models import (
    Debt,
    ExpenseTransaction,
    Goal,
    IncomeTransaction,
    Transaction,
)
from avanza_engine.utils.date_utils import as_utc, utc_now


@dataclass(frozen=True)
class Snapshot:
    """Everything the engines need, newest transactions and debts first"""

    balance: float = 0.0
    transactions: Tuple[Transaction, ...] = ()
    goal: Optional[Goal] = None
    monthly_income: float = 0.0
    budgets: Dict[str, float] = field(default_factory=lambda: dict(DEFAULT_BUDGETS))
    debts: Tuple[Debt, ...] = ()


@dataclass(frozen=True)
class AddTransaction:
    transaction: Transaction


@dataclass(frozen=True)
class DeleteTransaction:
    transaction_id: str


@dataclass(frozen=True)
class SetGoal:
    goal: Optional[Goal]


@dataclass(frozen=True)
class SetMonthlyIncome:
    income: float


@dataclass(frozen=True)
class SetBudget:
    category_id: str
    fraction: float


@dataclass(frozen=True)
class AddDebt:
    debt: Debt


@dataclass(frozen=True)
class DeleteDebt:
    debt_id: str


@dataclass(frozen=True)
class ResetSnapshot:
    pass


@dataclass(frozen=True)
class SeedSnapshot:
    """Replace the given fields wholesale (used to load example data)"""

    balance: Optional[float] = None
    transactions: Optional[Tuple[Transaction, ...]] = None
    monthly_income: Optional[float] = None
    budgets: Optional[Dict[str, float]] = None
    debts: Optional[Tuple[Debt, ...]] = None


Action = Union[
    AddTransaction,
    DeleteTransaction,
    SetGoal,
    SetMonthlyIncome,
    SetBudget,
    AddDebt,
    DeleteDebt,
    ResetSnapshot,
    SeedSnapshot,
]


def signed_amount(txn: Transaction) -> float:
    """Effect of a transaction on the running balance"""
    amount = abs(txn.amount)
    return amount if isinstance(txn, IncomeTransaction) else -amount


def reduce(snapshot: Snapshot, action: Action) -> Snapshot:
    """
    Apply one action and return the resulting snapshot.

    The input snapshot is never modified. Deleting an id that is not present
    and unknown actions both return the snapshot unchanged.
    """
    if isinstance(action, AddTransaction):
        txn = action.transaction
        return replace(
            snapshot,
            balance=snapshot.balance + signed_amount(txn),
            transactions=(txn,) + snapshot.transactions,
        )

    if isinstance(action, DeleteTransaction):
        removed = next((t for t in snapshot.transactions if t.id == action.transaction_id), None)
        if removed is None:
            return snapshot
        return replace(
            snapshot,
            balance=snapshot.balance - signed_amount(removed),
            transactions=tuple(t for t in snapshot.transactions if t.id != action.transaction_id),
        )

    if isinstance(action, SetGoal):
        return replace(snapshot, goal=action.goal)

    if isinstance(action, SetMonthlyIncome):
        return replace(snapshot, monthly_income=action.income)

    if isinstance(action, SetBudget):
        budgets = dict(snapshot.budgets)
        budgets[action.category_id] = action.fraction
        return replace(snapshot, budgets=budgets)

    if isinstance(action, AddDebt):
        return replace(snapshot, debts=(action.debt,) + snapshot.debts)

    if isinstance(action, DeleteDebt):
        return replace(snapshot, debts=tuple(d for d in snapshot.debts if d.id != action.debt_id))

    if isinstance(action, ResetSnapshot):
        return Snapshot()

    if isinstance(action, SeedSnapshot):
        updates = {
            name: value
            for name, value in (
                ("balance", action.balance),
                ("transactions", action.transactions),
                ("monthly_income", action.monthly_income),
                ("budgets", action.budgets),
                ("debts", action.debts),
            )
            if value is not None
        }
        return replace(snapshot, **updates)

    return snapshot


def make_transaction(
    kind: str,
    amount: float,
    description: str = "",
    fixed: bool = False,
    necessary: bool = False,
    category: Optional[str] = None,
    timestamp: Optional[datetime] = None,
    transaction_id: Optional[str] = None,
) -> Transaction:
    """
    Build a transaction the way the entry form does.

    The amount is stored as a magnitude. Expense-only fields (fixed,
    necessary, category) are dropped for income.
    """
    description = description.strip() or ("Ingreso" if kind == "income" else "Gasto")
    common = dict(
        id=transaction_id or str(uuid.uuid4()),
        timestamp=as_utc(timestamp) if timestamp else utc_now(),
        description=description,
        amount=abs(amount or 0.0),
    )

    if kind == "income":
        return IncomeTransaction(**common)
    return ExpenseTransaction(**common, fixed=fixed, necessary=necessary, category=category)


def example_seed(now: datetime) -> SeedSnapshot:
    """Sample month: one salary and four expenses, one hour apart going back"""
    rows = [
        ("income", "Nómina", 2500, False, True, None),
        ("expense", "Alquiler", 900, True, True, "obligatorios"),
        ("expense", "Supermercado", 260, False, True, "obligatorios"),
        ("expense", "Restaurante", 120, False, False, "diversion"),
        ("expense", "Transporte", 60, False, True, "obligatorios"),
    ]

    transactions = tuple(
        make_transaction(
            kind,
            amount,
            description,
            fixed=fixed,
            necessary=necessary,
            category=category,
            timestamp=now - timedelta(hours=i),
        )
        for i, (kind, description, amount, fixed, necessary, category) in enumerate(rows)
    )

    return SeedSnapshot(
        balance=sum((signed_amount(t) for t in transactions), 0.0),
        transactions=transactions,
        monthly_income=2500.0,
        budgets=dict(DEFAULT_BUDGETS),
    )
