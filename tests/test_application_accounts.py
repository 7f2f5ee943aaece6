"""
Tests for the accounts application layer.

Runs TraderAccountManager against the SQLAlchemy repository on an
in-memory SQLite database.
"""

from dataclasses import replace
from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from app.application.accounts.trader_account_service import (
    MAX_BALANCE,
    UNEXPECTED_MESSAGE,
    TraderAccountManager,
)
from app.domain.accounts.entities import OrderStatus
from app.domain.accounts.outcomes import FailureKind
from app.infrastructure.accounts.schema import accounts, security_orders, traders
from app.infrastructure.accounts.trader_account_repository import SqlTraderAccountSession
from conftest import add_order, make_trader, seed_account


def _count(engine, table) -> int:
    with engine.connect() as conn:
        return conn.execute(select(func.count()).select_from(table)).scalar_one()


class TestCreateTraderAccount:
    """Tests for TraderAccountManager.create_new_trader_account."""

    def test_creates_trader_and_empty_account_with_same_id(self, manager) -> None:
        outcome = manager.create_new_trader_account(make_trader())

        assert outcome.is_ok
        view = outcome.value
        assert view.trader.id is not None
        assert view.trader.id == view.account.id == view.account.trader_id
        assert view.account.amount == Decimal("0.00")
        assert view.trader.email == "flast@email.org"

    def test_ids_are_distinct_per_trader(self, manager) -> None:
        first = manager.create_new_trader_account(make_trader("a@email.org"))
        second = manager.create_new_trader_account(make_trader("b@email.org"))
        assert first.value.trader.id != second.value.trader.id

    def test_duplicate_email_rejected(self, manager, engine) -> None:
        manager.create_new_trader_account(make_trader())
        outcome = manager.create_new_trader_account(make_trader(first_name="Other"))

        assert outcome.failure.kind is FailureKind.EMAIL_IN_USE
        assert "flast@email.org" in outcome.failure.message
        assert _count(engine, traders) == 1
        assert _count(engine, accounts) == 1

    def test_blank_field_rejected(self, manager, engine) -> None:
        outcome = manager.create_new_trader_account(make_trader(last_name="  "))

        assert outcome.failure.kind is FailureKind.VALIDATION
        assert "last_name" in outcome.failure.message
        assert _count(engine, traders) == 0

    def test_duplicate_email_after_check_rejected(self, manager, engine, monkeypatch) -> None:
        """A concurrent insert that slips past email_exists still conflicts."""
        manager.create_new_trader_account(make_trader())
        monkeypatch.setattr(SqlTraderAccountSession, "email_exists", lambda self, email: False)

        outcome = manager.create_new_trader_account(make_trader(first_name="Other"))

        assert outcome.failure.kind is FailureKind.EMAIL_IN_USE
        assert "flast@email.org" in outcome.failure.message
        assert _count(engine, traders) == 1
        assert _count(engine, accounts) == 1

    def test_preassigned_id_rejected(self, manager) -> None:
        outcome = manager.create_new_trader_account(replace(make_trader(), id=12))
        assert outcome.failure.kind is FailureKind.VALIDATION

    def test_zero_id_treated_as_unset(self, manager) -> None:
        outcome = manager.create_new_trader_account(replace(make_trader(), id=0))

        assert outcome.is_ok
        assert outcome.value.trader.id > 0

    def test_future_birthdate_rejected(self, manager) -> None:
        outcome = manager.create_new_trader_account(make_trader(dob=date(2030, 1, 1)))
        assert outcome.failure.kind is FailureKind.VALIDATION


class TestDeleteTraderAccount:
    """Tests for TraderAccountManager.delete_trader_by_id."""

    def test_deletes_empty_account(self, manager, engine) -> None:
        seed_account(engine, 42)

        outcome = manager.delete_trader_by_id(42)

        assert outcome.is_ok
        assert _count(engine, traders) == 0
        assert _count(engine, accounts) == 0

    def test_non_zero_balance_rejected(self, manager, engine) -> None:
        seed_account(engine, 42, amount="0.01")

        outcome = manager.delete_trader_by_id(42)

        assert outcome.failure.kind is FailureKind.NON_ZERO_BALANCE
        assert _count(engine, accounts) == 1

    def test_pending_orders_rejected(self, manager, engine) -> None:
        seed_account(engine, 42)
        add_order(engine, 42, OrderStatus.PENDING)

        outcome = manager.delete_trader_by_id(42)

        assert outcome.failure.kind is FailureKind.PENDING_ORDERS
        assert _count(engine, traders) == 1
        assert _count(engine, security_orders) == 1

    def test_settled_orders_removed_with_account(self, manager, engine) -> None:
        seed_account(engine, 42)
        add_order(engine, 42, OrderStatus.FILLED)
        add_order(engine, 42, OrderStatus.CANCELLED)

        outcome = manager.delete_trader_by_id(42)

        assert outcome.is_ok
        assert _count(engine, security_orders) == 0

    def test_unknown_trader_not_found(self, manager) -> None:
        outcome = manager.delete_trader_by_id(999)
        assert outcome.failure.kind is FailureKind.TRADER_NOT_FOUND

    def test_second_delete_not_found(self, manager, engine) -> None:
        seed_account(engine, 42)

        assert manager.delete_trader_by_id(42).is_ok
        outcome = manager.delete_trader_by_id(42)

        assert outcome.failure.kind is FailureKind.TRADER_NOT_FOUND


class TestFundsMovements:
    """Tests for TraderAccountManager.deposit and withdraw."""

    def test_deposit_credits_balance(self, manager, engine) -> None:
        seed_account(engine, 42, amount="100.00")

        outcome = manager.deposit(42, Decimal("1745.23"))

        assert outcome.value.amount == Decimal("1845.23")
        assert outcome.value.id == 42

    def test_withdraw_debits_balance(self, manager, engine) -> None:
        seed_account(engine, 42, amount="100.00")

        outcome = manager.withdraw(42, Decimal("40.01"))

        assert outcome.value.amount == Decimal("59.99")

    def test_withdraw_whole_balance(self, manager, engine) -> None:
        seed_account(engine, 42, amount="25.50")
        assert manager.withdraw(42, Decimal("25.50")).value.amount == Decimal("0.00")

    def test_withdraw_more_than_balance_rejected(self, manager, engine) -> None:
        seed_account(engine, 42, amount="10.00")

        outcome = manager.withdraw(42, Decimal("10.01"))

        assert outcome.failure.kind is FailureKind.INSUFFICIENT_FUNDS
        assert manager.deposit(42, Decimal("0.01")).value.amount == Decimal("10.01")

    def test_negative_deposit_rejected(self, manager, engine) -> None:
        seed_account(engine, 42)
        outcome = manager.deposit(42, Decimal("-6.00"))
        assert outcome.failure.kind is FailureKind.INVALID_AMOUNT

    def test_zero_withdrawal_rejected(self, manager, engine) -> None:
        seed_account(engine, 42, amount="5.00")
        outcome = manager.withdraw(42, Decimal("0.00"))
        assert outcome.failure.kind is FailureKind.INVALID_AMOUNT

    def test_deposit_beyond_maximum_balance_rejected(self, manager, engine) -> None:
        seed_account(engine, 42, amount="100.00")

        outcome = manager.deposit(42, MAX_BALANCE)

        assert outcome.failure.kind is FailureKind.INVALID_AMOUNT
        assert manager.withdraw(42, Decimal("100.00")).value.amount == Decimal("0.00")

    def test_unknown_trader_not_found(self, manager) -> None:
        assert manager.deposit(7, Decimal("1.00")).failure.kind is FailureKind.TRADER_NOT_FOUND
        assert manager.withdraw(7, Decimal("1.00")).failure.kind is FailureKind.TRADER_NOT_FOUND


class TestPersistenceFailures:
    """Persistence errors are reported as UNEXPECTED outcomes."""

    def test_database_error_becomes_unexpected(self) -> None:
        repository = MagicMock()
        repository.transaction.side_effect = OperationalError("SELECT", {}, Exception("down"))
        manager = TraderAccountManager(repository=repository)

        outcome = manager.deposit(42, Decimal("1.00"))

        assert outcome.failure.kind is FailureKind.UNEXPECTED
        assert outcome.failure.message == UNEXPECTED_MESSAGE
