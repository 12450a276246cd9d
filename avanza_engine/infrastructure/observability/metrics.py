"""Prometheus metrics for report volume, payoff outcomes and risk bands"""

from prometheus_client import Counter, Histogram

from avanza_engine.domain.models import AmortizationSchedule

# Report metrics
report_counter = Counter(
    "avanza_reports_total",
    "Total snapshot reports built",
)

report_duration_histogram = Histogram(
    "avanza_report_duration_seconds",
    "Time spent building a snapshot report",
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
)

capacity_band_counter = Counter(
    "avanza_capacity_band_total",
    "Capacity analyses by DTI band",
    ["band"],  # Excelente | Sano | Atención | Riesgo
)

# Amortization metrics
schedule_counter = Counter(
    "avanza_schedules_total",
    "Amortization schedules built",
    ["outcome"],  # paid_off | ceiling | empty
)

schedule_months_histogram = Histogram(
    "avanza_schedule_months",
    "Length of amortization schedules in months",
    buckets=[6, 12, 24, 36, 60, 120, 240, 360, 3600],
)


def record_schedule(schedule: AmortizationSchedule) -> None:
    """Record payoff outcome and schedule length"""
    if not schedule.entries:
        outcome = "empty"
    elif schedule.ceiling_reached and not schedule.paid_off:
        outcome = "ceiling"
    else:
        outcome = "paid_off"

    schedule_counter.labels(outcome=outcome).inc()
    if schedule.entries:
        schedule_months_histogram.observe(schedule.total_months)


def record_report(band: str, duration_seconds: float) -> None:
    report_counter.inc()
    report_duration_histogram.observe(duration_seconds)
    capacity_band_counter.labels(band=band).inc()
