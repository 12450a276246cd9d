"""Snapshot report - parse UI state and run every engine over it"""

import time
import uuid
import logging
from typing import Any, Dict, Optional
from pydantic import ValidationError

from avanza_engine.api.v1.schemas import (
    AmortizationEntrySchema,
    BreakdownSchema,
    BudgetUsageSchema,
    CapacitySchema,
    DebtReport,
    DebtTotalsSchema,
    GoalStatusSchema,
    ProjectionSchema,
    ReportResponse,
    SnapshotIn,
)
from avanza_engine.config import settings
from avanza_engine.domain.amortization import (
    build_schedule,
    calc_payment,
    is_amortizing,
    payoff_date,
)
from avanza_engine.domain.capacity import compute_capacity
from avanza_engine.domain.envelopes import (
    allocation_offset_points,
    allocation_total,
    budget_usage,
    derive_envelopes,
    exceeded_categories,
)
from avanza_engine.domain.exceptions import InvalidSnapshotError
from avanza_engine.domain.models import Debt, DebtTotals
from avanza_engine.domain.projection import goal_status, project_balance, spending_badge
from avanza_engine.domain.spending import expense_breakdown, spent_by_category, total_expense, total_income
from avanza_engine.domain.state import Snapshot
from avanza_engine.infrastructure.observability.logging import log_ceiling_reached, log_report
from avanza_engine.infrastructure.observability.metrics import record_report, record_schedule

logger = logging.getLogger(__name__)


def parse_snapshot(payload: Dict[str, Any]) -> Snapshot:
    """
    Validate a plain-data snapshot and convert it to domain values.

    Raises:
        InvalidSnapshotError: payload does not match the snapshot schema
    """
    try:
        snapshot_in = SnapshotIn.model_validate(payload)
    except ValidationError as e:
        logger.warning(f"Invalid snapshot payload: {e.error_count()} error(s)")
        raise InvalidSnapshotError(
            f"Invalid snapshot payload: {e.error_count()} error(s)",
            errors=e.errors(include_url=False),
        ) from e

    return snapshot_in.to_domain()


def build_debt_report(debt: Debt, report_id: str) -> DebtReport:
    """Payment, full schedule and payoff date for one debt"""
    payment = calc_payment(debt)
    schedule = build_schedule(debt.principal, debt.apr, payment)
    record_schedule(schedule)

    if schedule.ceiling_reached and not schedule.paid_off:
        log_ceiling_reached(report_id, debt.id, schedule.remaining_balance)

    return DebtReport(
        debt_id=debt.id,
        name=debt.name,
        principal=debt.principal,
        payment=payment,
        amortizing=is_amortizing(debt.principal, debt.apr, payment),
        total_months=schedule.total_months,
        total_interest=schedule.total_interest,
        remaining_balance=schedule.remaining_balance,
        paid_off=schedule.paid_off,
        ceiling_reached=schedule.ceiling_reached,
        payoff_date=payoff_date(debt.start_timestamp, schedule.total_months) if schedule.entries else None,
        schedule=[
            AmortizationEntrySchema.model_validate(entry)
            for entry in schedule.entries[: settings.schedule_display_limit]
        ],
    )


def build_report(
    snapshot: Snapshot,
    projection_months: Optional[int] = None,
    report_id: Optional[str] = None,
) -> ReportResponse:
    """
    Derive every financial figure for a snapshot.

    Flow:
    1. Totals, spend per category and expense breakdown
    2. Envelopes and budget usage against monthly income
    3. Payment and schedule per debt, totals summed from those schedules
    4. Capacity / DTI from essential spend and total debt payment
    5. Balance projection, goal status and spending badge
    6. Record metrics and logs
    """
    start_time = time.time()
    report_id = report_id or str(uuid.uuid4())
    months = settings.projection_months if projection_months is None else projection_months
    txs = snapshot.transactions

    # 1. Totals
    income_total = total_income(txs)
    expense_total = total_expense(txs)
    monthly_savings = income_total - expense_total
    spent = spent_by_category(txs)

    # 2. Envelopes and usage
    envelopes = derive_envelopes(snapshot.budgets, txs)
    usage = budget_usage(snapshot.budgets, snapshot.monthly_income, spent)

    # 3. Debts
    debt_reports = [build_debt_report(debt, report_id) for debt in snapshot.debts]
    debt_totals = DebtTotals(
        balance=sum((d.principal for d in debt_reports), 0.0),
        payment=sum((d.payment for d in debt_reports), 0.0),
        interest=sum((d.total_interest for d in debt_reports), 0.0),
    )

    # 4. Capacity
    capacity = compute_capacity(
        snapshot.monthly_income,
        spent.get(settings.essential_category, 0.0),
        debt_totals.payment,
    )

    # 5. Projection and goal
    projection = project_balance(txs, months, snapshot.monthly_income)
    goal = None
    if snapshot.goal is not None:
        status = goal_status(snapshot.goal, snapshot.balance, monthly_savings)
        goal = GoalStatusSchema(
            name=snapshot.goal.name,
            cost=snapshot.goal.cost,
            months=snapshot.goal.months,
            remaining=status.remaining,
            eta_months=status.eta_months,
            required_monthly=status.required_monthly,
            on_track=status.on_track,
        )

    response = ReportResponse(
        report_id=report_id,
        balance=snapshot.balance,
        income_total=income_total,
        expense_total=expense_total,
        monthly_savings=monthly_savings,
        spent_by_category=spent,
        envelopes=envelopes,
        budget_usage=[
            BudgetUsageSchema(
                category_id=row.category.id,
                category_name=row.category.name,
                fraction=row.fraction,
                budget=row.budget,
                used=row.used,
                ratio=row.ratio,
                status=row.status,
            )
            for row in usage
        ],
        exceeded_categories=exceeded_categories(usage),
        allocation_total=allocation_total(snapshot.budgets),
        allocation_offset_points=allocation_offset_points(snapshot.budgets),
        breakdown=BreakdownSchema.model_validate(expense_breakdown(txs)),
        debts=debt_reports,
        debt_totals=DebtTotalsSchema.model_validate(debt_totals),
        capacity=CapacitySchema.model_validate(capacity),
        projection=ProjectionSchema.model_validate(projection),
        goal=goal,
        badge=spending_badge(expense_total, snapshot.monthly_income),
    )

    # 6. Record metrics and logs
    duration = time.time() - start_time
    record_report(capacity.band, duration)
    log_report(report_id, len(txs), len(snapshot.debts), capacity.band, duration * 1000)

    return response
