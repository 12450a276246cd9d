"""Expense aggregation per category and overall income/spend totals"""

from typing import Dict, Iterable
from avanza_engine.domain.categories import is_known_category, zeroed
from avanza_engine.domain.models import (
    ExpenseBreakdown,
    ExpenseTransaction,
    IncomeTransaction,
    Transaction,
)


def spent_by_category(transactions: Iterable[Transaction]) -> Dict[str, float]:
    """
    Sum expense amounts per category.

    Every known category starts at 0. Expenses without a category, or with
    an id outside the registry, are ignored rather than rejected.
    """
    spent = zeroed()
    for txn in transactions:
        if isinstance(txn, ExpenseTransaction) and is_known_category(txn.category):
            spent[txn.category] += txn.amount
    return spent


def total_income(transactions: Iterable[Transaction]) -> float:
    return sum((t.amount for t in transactions if isinstance(t, IncomeTransaction)), 0.0)


def total_expense(transactions: Iterable[Transaction]) -> float:
    """All expenses, categorized or not"""
    return sum((t.amount for t in transactions if isinstance(t, ExpenseTransaction)), 0.0)


def expense_breakdown(transactions: Iterable[Transaction]) -> ExpenseBreakdown:
    """
    Split expenses into fixed/variable and necessary/discretionary.

    The variable and discretionary sides are the remainder of the total,
    so both splits always add back up to total_expense.
    """
    expenses = [t for t in transactions if isinstance(t, ExpenseTransaction)]
    total = sum((t.amount for t in expenses), 0.0)
    fixed = sum((t.amount for t in expenses if t.fixed), 0.0)
    necessary = sum((t.amount for t in expenses if t.necessary), 0.0)

    return ExpenseBreakdown(
        fixed=fixed,
        variable=total - fixed,
        necessary=necessary,
        discretionary=total - necessary,
    )
