"""Borrowing capacity and debt-to-income (DTI) analysis"""

from avanza_engine.domain.models import CapacityResult


def classify_dti(dti: float) -> str:
    """
    Map a DTI ratio to a risk band.

    Bands (upper bounds are exclusive, compared exactly):
    - < 0.20: Excelente
    - < 0.36: Sano
    - < 0.43: Atención
    - else:   Riesgo

    A DTI of exactly 0.20 is therefore Sano, not Excelente.
    """
    if dti < 0.20:
        return "Excelente"
    elif dti < 0.36:
        return "Sano"
    elif dti < 0.43:
        return "Atención"
    else:
        return "Riesgo"


def compute_capacity(
    monthly_income: float,
    essential_spend: float,
    monthly_debt_payment: float,
) -> CapacityResult:
    """
    Disposable monthly capacity after essentials and debt payments.

    essential_spend is whatever the caller passes in; the engine uses the
    lifetime spend of the essentials category, so callers wanting a true
    monthly figure must filter transactions to one month first.
    """
    monthly_income = monthly_income or 0.0
    essential_spend = essential_spend or 0.0
    monthly_debt_payment = monthly_debt_payment or 0.0

    capacity = max(0.0, monthly_income - essential_spend - monthly_debt_payment)
    dti = monthly_debt_payment / monthly_income if monthly_income > 0 else 0.0

    return CapacityResult(capacity=capacity, dti=dti, band=classify_dti(dti))
