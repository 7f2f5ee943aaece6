"""
Adapter: Trader account persistence.

Implements the TraderAccountRepository port.
Each transaction maps to one engine.begin() block: committed when
the block exits normally, rolled back when it raises.
"""

import logging
from contextlib import contextmanager
from decimal import Decimal
from typing import Iterator, Optional

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import IntegrityError

from app.domain.accounts.entities import Account, OrderStatus, Trader
from app.domain.accounts.errors import EmailInUseError
from app.domain.accounts.ports import TraderAccountRepository, TraderAccountSession
from app.infrastructure.accounts.schema import accounts, security_orders, traders

logger = logging.getLogger(__name__)

OPENING_BALANCE = Decimal("0.00")


def _to_account(row) -> Account:
    return Account(id=row.id, trader_id=row.trader_id, amount=Decimal(row.amount))


class SqlTraderAccountSession(TraderAccountSession):
    """Trader account operations bound to one open connection."""

    def __init__(self, conn: Connection) -> None:
        self._conn = conn

    def email_exists(self, email: str) -> bool:
        query = select(traders.c.id).where(traders.c.email == email)
        return self._conn.execute(query).first() is not None

    def insert_trader(self, trader: Trader) -> Trader:
        """Insert the trader.

        Raises:
            EmailInUseError: If a concurrent transaction registered the
                same email after email_exists was checked.
        """
        try:
            result = self._conn.execute(
                insert(traders).values(
                    first_name=trader.first_name,
                    last_name=trader.last_name,
                    email=trader.email,
                    country=trader.country,
                    dob=trader.dob,
                )
            )
        except IntegrityError:
            raise EmailInUseError(trader.email) from None
        trader_id = result.inserted_primary_key[0]
        logger.debug("Inserted trader id=%d.", trader_id)
        return Trader(
            id=trader_id,
            first_name=trader.first_name,
            last_name=trader.last_name,
            email=trader.email,
            country=trader.country,
            dob=trader.dob,
        )

    def insert_account(self, trader_id: int) -> Account:
        self._conn.execute(
            insert(accounts).values(
                id=trader_id, trader_id=trader_id, amount=OPENING_BALANCE
            )
        )
        return Account(id=trader_id, trader_id=trader_id, amount=OPENING_BALANCE)

    def lock_account(self, trader_id: int) -> Optional[Account]:
        query = (
            select(accounts)
            .where(accounts.c.trader_id == trader_id)
            .with_for_update()
        )
        row = self._conn.execute(query).first()
        return _to_account(row) if row is not None else None

    def update_balance(self, account_id: int, amount: Decimal) -> Account:
        self._conn.execute(
            update(accounts).where(accounts.c.id == account_id).values(amount=amount)
        )
        row = self._conn.execute(
            select(accounts).where(accounts.c.id == account_id)
        ).one()
        return _to_account(row)

    def count_orders(self, account_id: int, status: OrderStatus) -> int:
        query = (
            select(func.count())
            .select_from(security_orders)
            .where(security_orders.c.account_id == account_id)
            .where(security_orders.c.status == status.value)
        )
        return self._conn.execute(query).scalar_one()

    def delete_orders(self, account_id: int) -> int:
        result = self._conn.execute(
            delete(security_orders).where(security_orders.c.account_id == account_id)
        )
        return result.rowcount

    def delete_account(self, account_id: int) -> None:
        self._conn.execute(delete(accounts).where(accounts.c.id == account_id))

    def delete_trader(self, trader_id: int) -> None:
        self._conn.execute(delete(traders).where(traders.c.id == trader_id))


class SqlTraderAccountRepository(TraderAccountRepository):
    """Persists traders and accounts to a relational database.

    Implements the TraderAccountRepository port defined in the domain layer.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    @contextmanager
    def transaction(self) -> Iterator[SqlTraderAccountSession]:
        """Yield a session whose work is committed atomically."""
        with self._engine.begin() as conn:
            yield SqlTraderAccountSession(conn)
