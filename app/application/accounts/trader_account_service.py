"""
Service: trader account lifecycle and funds movements.

Input: Trader entities, trader ids and cent-truncated Decimal amounts.
Output: Outcome values (TraderAccountView, Account or None).
Side effects: Writes traders, accounts and orders through the repository.
Failure cases: every AccountDomainError is returned as a failed Outcome
tagged with its FailureKind; persistence errors become UNEXPECTED.

Each operation runs in exactly one repository transaction. Delete,
deposit and withdraw lock the account row first, so the zero-balance
and no-pending-orders checks of a delete cannot interleave with a
concurrent deposit on the same account.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Callable, TypeVar

from app.domain.accounts.entities import (
    Account,
    OrderStatus,
    Trader,
    TraderAccountView,
)
from app.domain.accounts.errors import (
    AccountDomainError,
    EmailInUseError,
    InsufficientFundsError,
    InvalidAmountError,
    NonZeroBalanceError,
    PendingOrdersError,
    TraderNotFoundError,
    TraderValidationError,
)
from app.domain.accounts.outcomes import FailureKind, Outcome
from app.domain.accounts.ports import (
    TraderAccountRepository,
    TraderAccountService,
    TraderAccountSession,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

UNEXPECTED_MESSAGE = "Account operation failed unexpectedly"
# account.amount is NUMERIC(18, 2)
MAX_BALANCE = Decimal("9999999999999999.99")
PROFILE_FIELDS = ("first_name", "last_name", "email", "country")


class TraderAccountManager(TraderAccountService):
    """Implements trader account operations against a repository."""

    def __init__(
        self,
        repository: TraderAccountRepository,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._repository = repository
        self._today = today

    def create_new_trader_account(self, trader: Trader) -> Outcome[TraderAccountView]:
        """Create a trader and their account in a single transaction.

        Args:
            trader: Profile of the new trader. Its id must be unset or 0.

        Returns:
            The created trader and account, or a VALIDATION /
            EMAIL_IN_USE failure.
        """
        return self._run("create", lambda: self._create(trader))

    def delete_trader_by_id(self, trader_id: int) -> Outcome[None]:
        """Delete a trader, their account and their settled orders.

        Returns:
            An empty Outcome, or a TRADER_NOT_FOUND, NON_ZERO_BALANCE or
            PENDING_ORDERS failure.
        """
        return self._run("delete", lambda: self._delete(trader_id))

    def deposit(self, trader_id: int, amount: Decimal) -> Outcome[Account]:
        """Credit the trader's account.

        Returns:
            The updated account, or an INVALID_AMOUNT or
            TRADER_NOT_FOUND failure.
        """
        return self._run(
            "deposit", lambda: self._move_funds(trader_id, amount, credit=True)
        )

    def withdraw(self, trader_id: int, amount: Decimal) -> Outcome[Account]:
        """Debit the trader's account.

        Returns:
            The updated account, or an INVALID_AMOUNT, TRADER_NOT_FOUND
            or INSUFFICIENT_FUNDS failure.
        """
        return self._run(
            "withdraw", lambda: self._move_funds(trader_id, amount, credit=False)
        )

    def _run(self, operation: str, action: Callable[[], T]) -> Outcome[T]:
        try:
            return Outcome.ok(action())
        except AccountDomainError as exc:
            logger.info("%s rejected: %s", operation, exc.kind.value)
            return Outcome.fail(exc.kind, exc.message)
        except Exception:
            logger.exception("%s failed in persistence layer", operation)
            return Outcome.fail(FailureKind.UNEXPECTED, UNEXPECTED_MESSAGE)

    def _create(self, trader: Trader) -> TraderAccountView:
        self._validate_trader(trader)
        with self._repository.transaction() as session:
            if session.email_exists(trader.email):
                raise EmailInUseError(trader.email)
            created = session.insert_trader(trader)
            account = session.insert_account(created.id)

        logger.info("Created trader account id=%d", created.id)
        return TraderAccountView(trader=created, account=account)

    def _delete(self, trader_id: int) -> None:
        with self._repository.transaction() as session:
            account = self._locked_account(session, trader_id)
            if account.amount != 0:
                raise NonZeroBalanceError(trader_id, account.amount)
            pending = session.count_orders(account.id, OrderStatus.PENDING)
            if pending:
                raise PendingOrdersError(trader_id, pending)

            removed = session.delete_orders(account.id)
            session.delete_account(account.id)
            session.delete_trader(trader_id)

        logger.info(
            "Deleted trader account id=%d (%d settled order(s) removed)",
            trader_id,
            removed,
        )

    def _move_funds(self, trader_id: int, amount: Decimal, credit: bool) -> Account:
        if not amount.is_finite():
            raise InvalidAmountError(f"Amount must be a finite number, got {amount}")
        if amount <= 0:
            raise InvalidAmountError(f"Amount must be greater than zero, got {amount}")

        with self._repository.transaction() as session:
            account = self._locked_account(session, trader_id)
            if credit:
                balance = account.amount + amount
            elif amount > account.amount:
                raise InsufficientFundsError(required=amount, available=account.amount)
            else:
                balance = account.amount - amount
            if balance > MAX_BALANCE:
                raise InvalidAmountError(
                    f"Balance would exceed the maximum of {MAX_BALANCE}"
                )
            updated = session.update_balance(account.id, balance)

        logger.info("Updated balance for account id=%d", trader_id)
        return updated

    @staticmethod
    def _locked_account(session: TraderAccountSession, trader_id: int) -> Account:
        account = session.lock_account(trader_id)
        if account is None:
            raise TraderNotFoundError(trader_id)
        return account

    def _validate_trader(self, trader: Trader) -> None:
        # 0 and None both mean "not yet assigned"
        if trader.id:
            raise TraderValidationError("Trader id is assigned on creation")
        for field_name in PROFILE_FIELDS:
            value = getattr(trader, field_name)
            if not isinstance(value, str) or not value.strip():
                raise TraderValidationError(f"Trader {field_name} is required")
        if not isinstance(trader.dob, date):
            raise TraderValidationError("Trader dob is required")
        if trader.dob > self._today():
            raise TraderValidationError("Trader dob cannot be in the future")
