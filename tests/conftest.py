"""
Shared fixtures for the accounts test suite.

Every test gets a fresh in-memory SQLite database.
"""

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import insert

from app.application.accounts.trader_account_service import TraderAccountManager
from app.core.config import Settings
from app.domain.accounts.entities import OrderStatus, Trader
from app.infrastructure.accounts.database import build_engine
from app.infrastructure.accounts.schema import (
    accounts,
    create_schema,
    security_orders,
    traders,
)
from app.infrastructure.accounts.trader_account_repository import (
    SqlTraderAccountRepository,
)
from app.main import create_app

TODAY = date(2026, 10, 18)


def make_trader(email: str = "flast@email.org", **overrides) -> Trader:
    fields = {
        "first_name": "First",
        "last_name": "Last",
        "email": email,
        "country": "CA",
        "dob": date(1994, 5, 11),
    }
    fields.update(overrides)
    return Trader(**fields)


def seed_account(engine, trader_id: int, amount: str = "0.00") -> None:
    """Insert a trader and account with a chosen id and balance."""
    with engine.begin() as conn:
        conn.execute(
            insert(traders).values(
                id=trader_id,
                first_name="Seeded",
                last_name="Trader",
                email=f"trader{trader_id}@email.org",
                country="CA",
                dob=date(1990, 1, 1),
            )
        )
        conn.execute(
            insert(accounts).values(
                id=trader_id, trader_id=trader_id, amount=Decimal(amount)
            )
        )


def add_order(engine, account_id: int, status: OrderStatus) -> None:
    with engine.begin() as conn:
        conn.execute(
            insert(security_orders).values(
                account_id=account_id,
                status=status.value,
                ticker="AAPL",
                size=10,
                price=Decimal("150.25"),
            )
        )


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def manager(engine) -> TraderAccountManager:
    return TraderAccountManager(
        repository=SqlTraderAccountRepository(engine=engine),
        today=lambda: TODAY,
    )


@pytest.fixture
def app_settings() -> Settings:
    return Settings(
        database_url="sqlite://",
        create_schema=True,
        rate_limit_enabled=False,
        log_level="WARNING",
    )


@pytest.fixture
def app(app_settings):
    return create_app(app_settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def app_engine(app):
    return app.state.db_engine
