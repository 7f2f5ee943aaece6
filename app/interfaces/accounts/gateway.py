"""
Account funds gateway.

Stateless translation between HTTP requests and the TraderAccountService:
- parses the birthdate of form-style create requests
- truncates deposit and withdrawal amounts to whole cents
- unwraps service outcomes, raising GatewayError on failure

No business rules live here. Amount magnitudes, balances and email
uniqueness are checked by the service.
"""

import logging
import re
from datetime import date
from decimal import Decimal
from typing import TypeVar

from app.domain.accounts.entities import Account, Trader, TraderAccountView
from app.domain.accounts.errors import InvalidAmountError
from app.domain.accounts.money import truncate_to_cents
from app.domain.accounts.outcomes import FailureKind, Outcome
from app.domain.accounts.ports import TraderAccountService
from app.interfaces.accounts.status_mapping import status_for

logger = logging.getLogger(__name__)

T = TypeVar("T")

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class GatewayError(Exception):
    """A failed request, carrying the HTTP status it is reported with."""

    def __init__(self, status_code: int, kind: FailureKind, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.kind = kind
        self.message = message

    @classmethod
    def for_kind(cls, kind: FailureKind, message: str) -> "GatewayError":
        return cls(status_for(kind), kind, message)


def parse_birthdate(value: str) -> date:
    """Parse a yyyy-MM-dd calendar date.

    Raises:
        GatewayError: 400 if the value is not a valid ISO calendar date.
    """
    if not ISO_DATE_PATTERN.match(value):
        raise GatewayError.for_kind(
            FailureKind.VALIDATION, f"birthdate must use yyyy-MM-dd, got {value!r}"
        )
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise GatewayError.for_kind(
            FailureKind.VALIDATION, f"birthdate is not a calendar date: {value!r}"
        ) from None


def _unwrap(outcome: Outcome[T]) -> T:
    if outcome.failure is not None:
        raise GatewayError.for_kind(outcome.failure.kind, outcome.failure.message)
    return outcome.value


class AccountFundsGateway:
    """Forwards account requests to the service and surfaces its failures."""

    def __init__(self, service: TraderAccountService) -> None:
        self._service = service

    def create_account(
        self,
        first_name: str,
        last_name: str,
        email: str,
        country: str,
        date_of_birth: str,
    ) -> TraderAccountView:
        """Build a Trader from discrete fields and create their account.

        Raises:
            GatewayError: 400 before calling the service if the birthdate
                is malformed, otherwise whatever the service reports.
        """
        trader = Trader(
            first_name=first_name,
            last_name=last_name,
            email=email,
            country=country,
            dob=parse_birthdate(date_of_birth),
        )
        return self.create_account_from_payload(trader)

    def create_account_from_payload(self, trader: Trader) -> TraderAccountView:
        """Create an account for a Trader built by the caller."""
        return _unwrap(self._service.create_new_trader_account(trader))

    def delete_account(self, trader_id: int) -> None:
        _unwrap(self._service.delete_trader_by_id(trader_id))

    def deposit_funds(self, trader_id: int, amount: Decimal) -> Account:
        """Deposit the amount truncated to whole cents."""
        return _unwrap(self._service.deposit(trader_id, self._normalize(amount)))

    def withdraw_funds(self, trader_id: int, amount: Decimal) -> Account:
        """Withdraw the amount truncated to whole cents."""
        return _unwrap(self._service.withdraw(trader_id, self._normalize(amount)))

    @staticmethod
    def _normalize(amount: Decimal) -> Decimal:
        try:
            truncated = truncate_to_cents(amount)
        except InvalidAmountError as exc:
            raise GatewayError.for_kind(exc.kind, exc.message) from None
        if truncated != amount:
            logger.debug("Truncated amount %s to %s", amount, truncated)
        return truncated
