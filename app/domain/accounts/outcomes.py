"""
Typed outcomes returned by the trader account service.

The service never raises across its boundary. Each operation returns
an Outcome holding either a value or a Failure tagged with a
FailureKind, which callers switch on.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class FailureKind(Enum):
    """Every way an account operation can fail."""

    VALIDATION = "validation_error"
    INVALID_AMOUNT = "invalid_amount"
    TRADER_NOT_FOUND = "trader_not_found"
    EMAIL_IN_USE = "email_in_use"
    NON_ZERO_BALANCE = "non_zero_balance"
    PENDING_ORDERS = "pending_orders"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    UNEXPECTED = "unexpected_error"


@dataclass(frozen=True)
class Failure:
    """A failed account operation."""

    kind: FailureKind
    message: str


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of an account operation: a value or a failure, never both."""

    value: Optional[T] = None
    failure: Optional[Failure] = None

    @classmethod
    def ok(cls, value: T = None) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, kind: FailureKind, message: str) -> "Outcome[T]":
        return cls(failure=Failure(kind=kind, message=message))

    @property
    def is_ok(self) -> bool:
        return self.failure is None
