"""
FastAPI router for the accounts bounded context.

All routes delegate to the AccountFundsGateway. No business logic here.
Gateway failures and request validation errors are mapped to responses
by the centralized error handlers.
"""

from decimal import Decimal

from fastapi import APIRouter, Depends, Path, Query, Response, status

from app.interfaces.accounts.dependencies import get_account_funds_gateway
from app.interfaces.accounts.gateway import AccountFundsGateway
from app.interfaces.accounts.schemas import (
    AccountSchema,
    ErrorResponse,
    TraderAccountViewSchema,
    TraderPayload,
)

router = APIRouter(prefix="/trader", tags=["trader"])

TRADER_ID_DESCRIPTION = "ID of the trader and of their account"
AMOUNT_DESCRIPTION = "Amount of money, truncated to whole cents"

CREATE_NOTES = (
    "The email must not already be in use. Trader ID and Account ID are "
    "generated on creation and are identical. Each trader has one account."
)


@router.post(
    "/create",
    response_model=TraderAccountViewSchema,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Create a new trader and their account",
    description=CREATE_NOTES,
)
def create_trader_account(
    firstname: str = Query(..., description="Trader's first name"),
    lastname: str = Query(..., description="Trader's last name"),
    email: str = Query(..., description="Trader's email address"),
    country: str = Query(..., description="Trader's home country"),
    birthdate: str = Query(..., description="Date of birth, yyyy-MM-dd"),
    gateway: AccountFundsGateway = Depends(get_account_funds_gateway),
) -> TraderAccountViewSchema:
    """Create an account from query parameters.

    Sample: POST /trader/create?firstname=First&lastname=Last
    &email=flast@email.org&country=CA&birthdate=1994-05-11
    """
    view = gateway.create_account(
        first_name=firstname,
        last_name=lastname,
        email=email,
        country=country,
        date_of_birth=birthdate,
    )
    return TraderAccountViewSchema.from_entity(view)


@router.post(
    "/create/prebuilt",
    response_model=TraderAccountViewSchema,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Create a new trader and their account from a JSON document",
    description=CREATE_NOTES,
)
def create_trader_account_prebuilt(
    payload: TraderPayload,
    gateway: AccountFundsGateway = Depends(get_account_funds_gateway),
) -> TraderAccountViewSchema:
    """Create an account from a Trader document sent as the request body."""
    view = gateway.create_account_from_payload(payload.to_entity())
    return TraderAccountViewSchema.from_entity(view)


@router.delete(
    "/delete/{trader_id}",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    responses={404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
    summary="Delete a trader and their account",
    description=(
        "Only succeeds when the account balance is exactly zero and "
        "no orders tied to the account are pending."
    ),
)
def delete_trader_account(
    trader_id: int = Path(..., gt=0, description=TRADER_ID_DESCRIPTION),
    gateway: AccountFundsGateway = Depends(get_account_funds_gateway),
) -> Response:
    """Delete a trader and their account."""
    gateway.delete_account(trader_id)
    return Response(status_code=status.HTTP_200_OK)


@router.put(
    "/deposit/{trader_id}",
    response_model=AccountSchema,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Deposit funds into a trader's account",
)
def deposit_funds(
    trader_id: int = Path(..., gt=0, description=TRADER_ID_DESCRIPTION),
    amount: Decimal = Query(..., description=AMOUNT_DESCRIPTION),
    gateway: AccountFundsGateway = Depends(get_account_funds_gateway),
) -> AccountSchema:
    """Deposit funds. Sample: PUT /trader/deposit/15987?amount=1745.23"""
    account = gateway.deposit_funds(trader_id, amount)
    return AccountSchema.from_entity(account)


@router.put(
    "/withdraw/{trader_id}",
    response_model=AccountSchema,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
    summary="Withdraw funds from a trader's account",
)
def withdraw_funds(
    trader_id: int = Path(..., gt=0, description=TRADER_ID_DESCRIPTION),
    amount: Decimal = Query(..., description=AMOUNT_DESCRIPTION),
    gateway: AccountFundsGateway = Depends(get_account_funds_gateway),
) -> AccountSchema:
    """Withdraw funds. Sample: PUT /trader/withdraw/15987?amount=101.01"""
    account = gateway.withdraw_funds(trader_id, amount)
    return AccountSchema.from_entity(account)
