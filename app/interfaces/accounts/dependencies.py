"""
Dependency injection for the accounts bounded context.

Provides FastAPI dependency functions that wire the SQLAlchemy
repository into the account service and the service into the gateway.
The engine is built once by the application factory and kept on
app.state. Tests may replace get_trader_account_service via
app.dependency_overrides.
"""

from fastapi import Depends, Request
from sqlalchemy.engine import Engine

from app.application.accounts.trader_account_service import TraderAccountManager
from app.domain.accounts.ports import TraderAccountService
from app.infrastructure.accounts.trader_account_repository import (
    SqlTraderAccountRepository,
)
from app.interfaces.accounts.gateway import AccountFundsGateway


def get_db_engine(request: Request) -> Engine:
    """Return the engine created by the application factory."""
    return request.app.state.db_engine


def get_trader_account_service(
    engine: Engine = Depends(get_db_engine),
) -> TraderAccountService:
    """Build the TraderAccountService with its infrastructure dependencies."""
    return TraderAccountManager(
        repository=SqlTraderAccountRepository(engine=engine),
    )


def get_account_funds_gateway(
    service: TraderAccountService = Depends(get_trader_account_service),
) -> AccountFundsGateway:
    """Build the AccountFundsGateway around the account service."""
    return AccountFundsGateway(service=service)
