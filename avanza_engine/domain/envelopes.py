"""Envelope allocation - replay income and expenses into per-category funds"""

from typing import Dict, Iterable, List, Mapping
from avanza_engine.domain.categories import CATEGORIES, is_known_category, zeroed
from avanza_engine.domain.models import (
    BudgetUsage,
    ExpenseTransaction,
    IncomeTransaction,
    Transaction,
)
from avanza_engine.utils.date_utils import as_utc

USAGE_WARNING_RATIO = 0.8


def replay_order(transactions: Iterable[Transaction]) -> List[Transaction]:
    """Oldest first; equal timestamps keep their input order"""
    return sorted(transactions, key=lambda t: as_utc(t.timestamp))


def derive_envelopes(
    budgets: Mapping[str, float],
    transactions: Iterable[Transaction],
) -> Dict[str, float]:
    """
    Compute the running fund balance of every category.

    Rules:
    - Transactions are replayed oldest first. sorted() is stable, so
      transactions sharing a timestamp keep their input order. Naive
      timestamps are read as UTC.
    - Each income adds amount * fraction to every category. Fractions are
      used as given: if they sum to 0.5, only half the income is allocated.
    - Each expense with a known category is subtracted from that category.
    - Balances are not floored; overspending shows as a negative envelope.
    """
    envelopes = zeroed()

    for txn in replay_order(transactions):
        if isinstance(txn, IncomeTransaction):
            for category in CATEGORIES:
                envelopes[category.id] += txn.amount * budgets.get(category.id, 0.0)
        elif isinstance(txn, ExpenseTransaction) and is_known_category(txn.category):
            envelopes[txn.category] -= txn.amount

    return envelopes


def budget_usage(
    budgets: Mapping[str, float],
    monthly_income: float,
    spent: Mapping[str, float],
) -> List[BudgetUsage]:
    """
    Compare each category's spend against its share of monthly income.

    Status bands:
    - ratio >= 1.0: exceeded
    - ratio >= 0.8: warning
    - otherwise:    ok
    """
    rows = []
    for category in CATEGORIES:
        fraction = budgets.get(category.id, 0.0)
        budget = fraction * monthly_income
        used = spent.get(category.id, 0.0)
        ratio = min(1.0, used / budget) if budget else 0.0

        if ratio >= 1.0:
            status = "exceeded"
        elif ratio >= USAGE_WARNING_RATIO:
            status = "warning"
        else:
            status = "ok"

        rows.append(
            BudgetUsage(
                category=category,
                fraction=fraction,
                budget=budget,
                used=used,
                ratio=ratio,
                status=status,
            )
        )
    return rows


def exceeded_categories(rows: Iterable[BudgetUsage]) -> List[str]:
    return [row.category.id for row in rows if row.status == "exceeded"]


def allocation_total(budgets: Mapping[str, float]) -> float:
    return sum(budgets.values(), 0.0)


def allocation_offset_points(budgets: Mapping[str, float]) -> int:
    """
    Percentage points the allocation is away from 100%.

    Positive means over-allocated. Only a hint for the caller: the envelope
    engine never normalizes on its own.
    """
    return round((allocation_total(budgets) - 1) * 100)
