"""Debt amortization - level payments and month-by-month payoff schedules"""

from datetime import date, datetime
from typing import Iterable, List, Union
from avanza_engine.domain.models import AmortizationEntry, AmortizationSchedule, Debt, DebtTotals
from avanza_engine.utils.date_utils import add_months

# Payoff is declared once the balance drops to half a cent
BALANCE_EPSILON = 0.005

# 300 years of months; bounds the work for payments that never amortize
MAX_MONTHS = 3600

# Principal forced through each month when the payment does not cover interest
MIN_PRINCIPAL_STEP = 0.01


def monthly_rate(apr: float) -> float:
    return (apr or 0.0) / 12


def calc_payment(debt: Debt) -> float:
    """
    Monthly payment for a debt.

    Precedence:
    - An explicit min_payment > 0 always wins, even when a term is set.
    - Without a positive rate and term there is nothing to compute: 0.
    - Otherwise the standard annuity (PMT) formula over term_months.
    """
    if debt.min_payment and debt.min_payment > 0:
        return debt.min_payment

    rate = monthly_rate(debt.apr)
    term = debt.term_months or 0
    if rate <= 0 or term <= 0:
        return 0.0

    return rate * debt.principal / (1 - (1 + rate) ** (-term))


def is_amortizing(principal: float, apr: float, payment: float) -> bool:
    """True when the payment covers more than the first month's interest"""
    if principal <= 0 or payment <= 0:
        return False
    return payment - monthly_rate(apr) * principal > 0


def build_schedule(principal: float, apr: float, payment: float) -> AmortizationSchedule:
    """
    Simulate paying down a debt one month at a time.

    Requirements:
    - principal <= 0 or payment <= 0 yields an empty schedule (no error)
    - Stops once the balance is within BALANCE_EPSILON of zero
    - Never runs past MAX_MONTHS, so the last balance can stay above zero

    Underfunded payments (payment <= monthly interest) would never finish.
    They still move MIN_PRINCIPAL_STEP of principal per month, which keeps
    the balance shrinking until MAX_MONTHS; treat such schedules as an
    approximation and check ceiling_reached / remaining_balance.

    Example:
        1000 at 24% APR paying 1/month: interest is 20/month, so each month
        retires 0.01 and the schedule stops at 3600 months owing 964.
    """
    if principal <= 0 or payment <= 0:
        return AmortizationSchedule(
            entries=(),
            total_months=0,
            total_interest=0.0,
            paid_off=principal <= 0,
            ceiling_reached=False,
        )

    rate = monthly_rate(apr)
    balance = principal
    total_interest = 0.0
    entries: List[AmortizationEntry] = []

    while balance > BALANCE_EPSILON and len(entries) < MAX_MONTHS:
        interest = rate * balance
        principal_paid = payment - interest

        if principal_paid <= 0:
            principal_paid = MIN_PRINCIPAL_STEP

        # Final month: never pay more principal than is owed
        if principal_paid > balance:
            principal_paid = balance

        balance -= principal_paid
        total_interest += interest

        entries.append(
            AmortizationEntry(
                month=len(entries) + 1,
                payment=principal_paid + interest,
                interest=interest,
                principal=principal_paid,
                balance=max(0.0, balance),
            )
        )

    return AmortizationSchedule(
        entries=tuple(entries),
        total_months=len(entries),
        total_interest=total_interest,
        paid_off=balance <= BALANCE_EPSILON,
        ceiling_reached=len(entries) >= MAX_MONTHS,
    )


def schedule_for_debt(debt: Debt) -> AmortizationSchedule:
    return build_schedule(debt.principal, debt.apr, calc_payment(debt))


def payoff_date(start: Union[date, datetime], months: int) -> date:
    """Calendar date the last payment falls on, counted from the debt start"""
    if isinstance(start, datetime):
        start = start.date()
    return add_months(start, months)


def summarize_debts(debts: Iterable[Debt]) -> DebtTotals:
    """Total outstanding principal, monthly payment and lifetime interest"""
    balance = 0.0
    payment = 0.0
    interest = 0.0

    for debt in debts:
        debt_payment = calc_payment(debt)
        balance += debt.principal
        payment += debt_payment
        interest += build_schedule(debt.principal, debt.apr, debt_payment).total_interest

    return DebtTotals(balance=balance, payment=payment, interest=interest)
