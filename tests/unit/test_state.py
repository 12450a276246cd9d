"""Unit tests for snapshot transitions and the transaction factory"""

import pytest
from datetime import datetime, timezone
from avanza_engine.domain.models import Debt, ExpenseTransaction, Goal, IncomeTransaction
from avanza_engine.domain.spending import spent_by_category
from avanza_engine.domain.state import (
    AddDebt,
    AddTransaction,
    DeleteDebt,
    DeleteTransaction,
    ResetSnapshot,
    SetBudget,
    SetGoal,
    SetMonthlyIncome,
    Snapshot,
    example_seed,
    make_transaction,
    reduce,
)

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


def test_add_expense_then_income():
    """Expense lowers the balance, income raises it; newest first"""
    rent = make_transaction("expense", 800, "alquiler", fixed=True, necessary=True, category="obligatorios")
    salary = make_transaction("income", 2000, "nomina")

    s1 = reduce(Snapshot(), AddTransaction(rent))
    s2 = reduce(s1, AddTransaction(salary))

    assert s1.balance == -800
    assert len(s1.transactions) == 1
    assert s2.balance == 1200
    assert s2.transactions == (salary, rent)
    assert spent_by_category(s2.transactions)["obligatorios"] == 800


def test_delete_reverts_balance():
    rent = make_transaction("expense", 800, category="obligatorios")
    salary = make_transaction("income", 2000)
    snapshot = reduce(reduce(Snapshot(), AddTransaction(rent)), AddTransaction(salary))

    after = reduce(snapshot, DeleteTransaction(rent.id))

    assert after.balance == 2000
    assert after.transactions == (salary,)


def test_add_then_delete_is_symmetric():
    """Re-adding an identical transaction with a new id leaves sums unchanged"""
    base = reduce(Snapshot(), AddTransaction(make_transaction("income", 1500)))
    first = make_transaction("expense", 120, category="diversion", timestamp=NOW, transaction_id="a")
    again = make_transaction("expense", 120, category="diversion", timestamp=NOW, transaction_id="b")

    added = reduce(base, AddTransaction(first))
    removed = reduce(added, DeleteTransaction("a"))
    readded = reduce(removed, AddTransaction(again))

    assert len(added.transactions) == len(base.transactions) + 1
    assert len(removed.transactions) == len(base.transactions)
    assert removed.balance == base.balance
    assert readded.balance == added.balance
    assert spent_by_category(readded.transactions) == spent_by_category(added.transactions)


def test_delete_unknown_id_is_noop():
    snapshot = reduce(Snapshot(), AddTransaction(make_transaction("income", 10)))

    assert reduce(snapshot, DeleteTransaction("missing")) is snapshot


def test_reduce_does_not_mutate_input():
    original = Snapshot()

    updated = reduce(original, SetBudget("ahorro", 0.3))

    assert original.budgets["ahorro"] == 0.1
    assert updated.budgets["ahorro"] == 0.3
    assert updated.budgets["obligatorios"] == 0.6


def test_goal_income_and_reset():
    snapshot = reduce(Snapshot(), SetGoal(Goal(name="Viaje", cost=3000, months=6)))
    snapshot = reduce(snapshot, SetMonthlyIncome(2500))

    assert snapshot.goal.cost == 3000
    assert snapshot.monthly_income == 2500
    assert reduce(snapshot, ResetSnapshot()) == Snapshot()


def test_debts_add_and_delete():
    debt = Debt(id="d1", name="Test", principal=500, apr=0.2, start_timestamp=NOW, term_months=6)

    s4 = reduce(Snapshot(), AddDebt(debt))
    s5 = reduce(s4, DeleteDebt("d1"))

    assert s4.debts == (debt,)
    assert s5.debts == ()


def test_unknown_action_returns_snapshot():
    snapshot = Snapshot()

    assert reduce(snapshot, object()) is snapshot


def test_make_transaction_variants():
    """Expense-only fields exist only on expenses; amounts are magnitudes"""
    income = make_transaction("income", -300, "  ", category="ahorro", timestamp=NOW)
    expense = make_transaction("expense", -45.5, "", category="diversion")

    assert isinstance(income, IncomeTransaction)
    assert income.amount == 300
    assert income.description == "Ingreso"
    assert income.timestamp == NOW
    assert not hasattr(income, "category")

    assert isinstance(expense, ExpenseTransaction)
    assert expense.kind == "expense"
    assert expense.amount == 45.5
    assert expense.description == "Gasto"
    assert expense.category == "diversion"
    assert expense.timestamp.tzinfo is not None


def test_make_transaction_unique_ids():
    ids = {make_transaction("income", 1).id for _ in range(50)}

    assert len(ids) == 50


def test_example_seed():
    """Sample month loads one salary, four expenses and a matching balance"""
    snapshot = reduce(Snapshot(), example_seed(NOW))

    assert snapshot.monthly_income == 2500
    assert len(snapshot.transactions) == 5
    assert snapshot.balance == pytest.approx(1160)
    assert snapshot.transactions[0].timestamp == NOW
    assert spent_by_category(snapshot.transactions)["obligatorios"] == 1220


def test_make_transaction_naive_timestamp_is_utc():
    txn = make_transaction("expense", 5, timestamp=datetime(2025, 3, 1, 12, 0))

    assert txn.timestamp == NOW
    assert txn.timestamp.tzinfo is not None
