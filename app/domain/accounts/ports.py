"""
Port interfaces (ABCs) for the accounts bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement the repository; the application layer
implements the service. The interface layer only sees TraderAccountService.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from decimal import Decimal
from typing import Optional

from app.domain.accounts.entities import (
    Account,
    OrderStatus,
    Trader,
    TraderAccountView,
)
from app.domain.accounts.outcomes import Outcome


class TraderAccountService(ABC):
    """Port for the business operations behind the account endpoints.

    Every operation returns an Outcome instead of raising.
    """

    @abstractmethod
    def create_new_trader_account(self, trader: Trader) -> Outcome[TraderAccountView]:
        """Create a trader and a zero-balance account sharing its id."""
        raise NotImplementedError

    @abstractmethod
    def delete_trader_by_id(self, trader_id: int) -> Outcome[None]:
        """Delete a trader whose account is empty and has no pending orders."""
        raise NotImplementedError

    @abstractmethod
    def deposit(self, trader_id: int, amount: Decimal) -> Outcome[Account]:
        """Credit a positive amount to the trader's account."""
        raise NotImplementedError

    @abstractmethod
    def withdraw(self, trader_id: int, amount: Decimal) -> Outcome[Account]:
        """Debit a positive amount no larger than the current balance."""
        raise NotImplementedError


class TraderAccountSession(ABC):
    """Operations available inside a single persistence transaction."""

    @abstractmethod
    def email_exists(self, email: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def insert_trader(self, trader: Trader) -> Trader:
        """Persist a new trader and return it with its assigned id."""
        raise NotImplementedError

    @abstractmethod
    def insert_account(self, trader_id: int) -> Account:
        """Open a zero-balance account with the same id as the trader."""
        raise NotImplementedError

    @abstractmethod
    def lock_account(self, trader_id: int) -> Optional[Account]:
        """Return the trader's account, locking its row until commit."""
        raise NotImplementedError

    @abstractmethod
    def update_balance(self, account_id: int, amount: Decimal) -> Account:
        raise NotImplementedError

    @abstractmethod
    def count_orders(self, account_id: int, status: OrderStatus) -> int:
        raise NotImplementedError

    @abstractmethod
    def delete_orders(self, account_id: int) -> int:
        """Delete every order of the account, returning the number removed."""
        raise NotImplementedError

    @abstractmethod
    def delete_account(self, account_id: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete_trader(self, trader_id: int) -> None:
        raise NotImplementedError


class TraderAccountRepository(ABC):
    """Port for persisting traders, accounts and their orders."""

    @abstractmethod
    def transaction(self) -> AbstractContextManager[TraderAccountSession]:
        """Open a transaction, committed on exit and rolled back on error."""
        raise NotImplementedError
