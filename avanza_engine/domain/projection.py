"""Balance projection, savings goals and spending badges"""

import math
from typing import Optional, Sequence
from avanza_engine.domain.models import (
    BalanceProjection,
    ExpenseTransaction,
    Goal,
    GoalStatus,
    IncomeTransaction,
    Transaction,
)


def project_balance(
    transactions: Sequence[Transaction],
    months: int,
    monthly_income: float = 0.0,
) -> BalanceProjection:
    """
    Extrapolate the current balance linearly.

    Monthly net is the average income amount minus the average expense
    amount (each count floored at 1 so empty histories project flat).
    points[0] is the current balance, points[i] the balance after i months.
    """
    incomes = [t.amount for t in transactions if isinstance(t, IncomeTransaction)]
    expenses = [t.amount for t in transactions if isinstance(t, ExpenseTransaction)]

    income_total = sum(incomes, 0.0)
    expense_total = sum(expenses, 0.0)
    current = income_total - expense_total
    monthly_net = income_total / (len(incomes) or 1) - expense_total / (len(expenses) or 1)

    points = [current + monthly_net * i for i in range(max(0, months) + 1)]

    alert = None
    if months > 0:
        projected = points[-1]
        if projected < 0:
            alert = "deficit"
        elif projected > monthly_income:
            alert = "surplus"

    return BalanceProjection(current=current, monthly_net=monthly_net, points=points, alert=alert)


def goal_status(goal: Goal, balance: float, monthly_savings: float) -> GoalStatus:
    """Progress towards a savings goal at the current saving rhythm"""
    remaining = max(0.0, goal.cost - balance)
    eta_months = math.ceil(remaining / monthly_savings) if monthly_savings > 0 else None

    required_monthly = None
    on_track = None
    if goal.months > 0:
        required_monthly = remaining / goal.months
        on_track = monthly_savings >= required_monthly

    return GoalStatus(
        remaining=remaining,
        eta_months=eta_months,
        required_monthly=required_monthly,
        on_track=on_track,
    )


def spending_badge(total_expense: float, monthly_income: float) -> Optional[str]:
    """Badge earned by the share of monthly income spent so far"""
    ratio = total_expense / monthly_income if monthly_income > 0 else 0.0
    if ratio == 0:
        return None
    elif ratio < 0.6:
        return "Maestro del 60%"
    elif ratio < 0.8:
        return "Guardián del Saldo"
    else:
        return "Ajuste recomendado"
