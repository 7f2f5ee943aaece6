"""
Domain entities for the accounts bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


class OrderStatus(Enum):
    """Lifecycle status of a security order tied to an account."""

    PENDING = "pending"
    FILLED = "filled"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class Trader:
    """Profile of a person permitted to hold an account.

    The id is assigned by persistence on creation and is always
    equal to the id of the trader's account.
    """

    first_name: str
    last_name: str
    email: str
    country: str
    dob: date
    id: Optional[int] = None


@dataclass(frozen=True)
class Account:
    """Monetary balance held by exactly one trader."""

    id: int
    trader_id: int
    amount: Decimal


@dataclass(frozen=True)
class TraderAccountView:
    """Read-only projection of a trader together with their account."""

    trader: Trader
    account: Account
