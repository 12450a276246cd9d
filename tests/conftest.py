"""Pytest fixtures for testing"""

import pytest
from datetime import datetime, timedelta, timezone
from avanza_engine.api.main import BudgetEngine, create_engine
from avanza_engine.domain.models import Debt, ExpenseTransaction, IncomeTransaction


BASE_TS = datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc)


def _income(txn_id: str, amount: float, hours: int = 0) -> IncomeTransaction:
    return IncomeTransaction(
        id=txn_id,
        timestamp=BASE_TS + timedelta(hours=hours),
        description="Nómina",
        amount=amount,
    )


def _expense(
    txn_id: str,
    amount: float,
    category: str | None = "obligatorios",
    hours: int = 0,
    fixed: bool = False,
    necessary: bool = True,
) -> ExpenseTransaction:
    return ExpenseTransaction(
        id=txn_id,
        timestamp=BASE_TS + timedelta(hours=hours),
        description="Gasto",
        amount=amount,
        fixed=fixed,
        necessary=necessary,
        category=category,
    )


@pytest.fixture
def engine() -> BudgetEngine:
    """Engine facade without touching the root logger"""
    return create_engine(configure_logging=False)


@pytest.fixture
def sample_transactions():
    """One salary followed by a month of typical spending"""
    return [
        _income("inc_1", 2500, hours=0),
        _expense("exp_rent", 900, "obligatorios", hours=1, fixed=True),
        _expense("exp_food", 260, "obligatorios", hours=2),
        _expense("exp_dinner", 120, "diversion", hours=3, necessary=False),
        _expense("exp_bus", 60, "obligatorios", hours=4),
    ]


@pytest.fixture
def sample_debt() -> Debt:
    """Personal loan paid over a year"""
    return Debt(
        id="debt_1",
        name="Préstamo personal",
        principal=1000,
        apr=0.24,
        start_timestamp=BASE_TS,
        term_months=12,
    )


@pytest.fixture
def sample_payload():
    """Snapshot as the UI stores it"""
    return {
        "balance": 1160,
        "monthlyIncome": 2500,
        "budgets": {
            "obligatorios": 0.6,
            "emergencias": 0.1,
            "ahorro": 0.1,
            "inversion": 0.1,
            "educacion": 0.05,
            "diversion": 0.05,
        },
        "txs": [
            {"id": "t5", "ts": "2025-01-01T13:00:00Z", "desc": "Transporte", "amount": 60, "kind": "expense",
             "fixed": "variable", "need": "necesario", "category": "obligatorios"},
            {"id": "t4", "ts": "2025-01-01T12:00:00Z", "desc": "Restaurante", "amount": 120, "kind": "expense",
             "fixed": "variable", "need": "prescindible", "category": "diversion"},
            {"id": "t3", "ts": "2025-01-01T11:00:00Z", "desc": "Supermercado", "amount": 260, "kind": "expense",
             "fixed": "variable", "need": "necesario", "category": "obligatorios"},
            {"id": "t2", "ts": "2025-01-01T10:00:00Z", "desc": "Alquiler", "amount": 900, "kind": "expense",
             "fixed": "fijo", "need": "necesario", "category": "obligatorios"},
            {"id": "t1", "ts": "2025-01-01T09:00:00Z", "desc": "Nómina", "amount": 2500, "kind": "income"},
        ],
        "debts": [
            {"id": "d1", "name": "Tarjeta", "principal": 1000, "apr": 0.24, "termMonths": 12,
             "startTs": "2025-01-15T00:00:00Z"},
        ],
        "goal": {"name": "Viaje", "cost": 3000, "months": 6},
    }


@pytest.fixture
def income():
    """Factory for income transactions at BASE_TS + hours"""
    return _income


@pytest.fixture
def expense():
    """Factory for expense transactions at BASE_TS + hours"""
    return _expense
