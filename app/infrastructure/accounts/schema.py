"""
Relational schema for traders, accounts and security orders.

Tables are declared with SQLAlchemy Core so the same definitions
work against PostgreSQL in production and SQLite in tests.
"""

import logging

from sqlalchemy import (
    Column,
    Date,
    ForeignKey,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
)
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

metadata = MetaData()

traders = Table(
    "trader",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("first_name", String(128), nullable=False),
    Column("last_name", String(128), nullable=False),
    Column("email", String(256), nullable=False, unique=True),
    Column("country", String(64), nullable=False),
    Column("dob", Date, nullable=False),
)

accounts = Table(
    "account",
    metadata,
    Column("id", Integer, ForeignKey("trader.id"), primary_key=True, autoincrement=False),
    Column("trader_id", Integer, ForeignKey("trader.id"), nullable=False, unique=True),
    Column("amount", Numeric(18, 2, asdecimal=True), nullable=False),
)

security_orders = Table(
    "security_order",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("account_id", Integer, ForeignKey("account.id"), nullable=False, index=True),
    Column("status", String(16), nullable=False),
    Column("ticker", String(16), nullable=False),
    Column("size", Integer, nullable=False),
    Column("price", Numeric(18, 2, asdecimal=True)),
    Column("notes", String(256)),
)


def create_schema(engine: Engine) -> None:
    """Create any missing tables on the given engine."""
    metadata.create_all(engine)
    logger.info("Account schema ready on %s", engine.url.render_as_string(hide_password=True))
