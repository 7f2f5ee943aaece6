"""
Domain-specific errors for the accounts bounded context.

All errors raised from the domain layer must be defined here.
Each error carries the FailureKind it is reported as once it
crosses the account service boundary.
No framework imports allowed.
"""

from decimal import Decimal

from app.domain.accounts.outcomes import FailureKind


class AccountDomainError(Exception):
    """Base error for all accounts domain errors."""

    kind = FailureKind.UNEXPECTED

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class TraderValidationError(AccountDomainError):
    """Raised when a trader profile is incomplete or malformed."""

    kind = FailureKind.VALIDATION


class InvalidAmountError(AccountDomainError):
    """Raised when a deposit or withdrawal amount is not usable."""

    kind = FailureKind.INVALID_AMOUNT


class TraderNotFoundError(AccountDomainError):
    """Raised when no trader exists for the given id."""

    kind = FailureKind.TRADER_NOT_FOUND

    def __init__(self, trader_id: int) -> None:
        super().__init__(f"Trader not found: {trader_id}")
        self.trader_id = trader_id


class EmailInUseError(AccountDomainError):
    """Raised when another trader already registered the email."""

    kind = FailureKind.EMAIL_IN_USE

    def __init__(self, email: str) -> None:
        super().__init__(f"Email already in use: {email}")
        self.email = email


class NonZeroBalanceError(AccountDomainError):
    """Raised when deleting an account that still holds funds."""

    kind = FailureKind.NON_ZERO_BALANCE

    def __init__(self, trader_id: int, balance: Decimal) -> None:
        super().__init__(
            f"Account {trader_id} cannot be deleted with a balance of {balance}"
        )
        self.trader_id = trader_id
        self.balance = balance


class PendingOrdersError(AccountDomainError):
    """Raised when deleting an account with outstanding orders."""

    kind = FailureKind.PENDING_ORDERS

    def __init__(self, trader_id: int, pending: int) -> None:
        super().__init__(
            f"Account {trader_id} cannot be deleted with {pending} pending order(s)"
        )
        self.trader_id = trader_id
        self.pending = pending


class InsufficientFundsError(AccountDomainError):
    """Raised when a withdrawal exceeds the account balance."""

    kind = FailureKind.INSUFFICIENT_FUNDS

    def __init__(self, required: Decimal, available: Decimal) -> None:
        super().__init__(
            f"Insufficient funds: required {required}, available {available}"
        )
        self.required = required
        self.available = available
