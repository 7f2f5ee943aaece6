"""
Pydantic schemas for account API request/response validation.

These schemas define the API contract. JSON fields use camelCase
(firstName, traderId, ...). Money is carried as Decimal and never
as a binary float.
No business logic belongs here.
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from app.domain.accounts.entities import Account, Trader, TraderAccountView
from app.interfaces.accounts.gateway import ISO_DATE_PATTERN


class CamelModel(BaseModel):
    """Base schema reading and writing camelCase JSON field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TraderPayload(CamelModel):
    """A trader profile, as sent to POST /trader/create/prebuilt.

    Field contents are validated by the account service so that both
    create endpoints reject the same profiles with the same errors.

    Attributes:
        id: Omitted or 0; ids are assigned on creation.
        first_name: Trader's first name.
        last_name: Trader's last name.
        email: Email address, unique across traders.
        country: Home country.
        dob: Date of birth, strictly yyyy-MM-dd as on /trader/create.
    """

    id: Optional[int] = None
    first_name: str
    last_name: str
    email: str
    country: str
    dob: date

    @field_validator("dob", mode="before")
    @classmethod
    def dob_is_iso_date(cls, value):
        if not isinstance(value, str) or not ISO_DATE_PATTERN.match(value):
            raise ValueError("dob must use yyyy-MM-dd")
        return value

    def to_entity(self) -> Trader:
        return Trader(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            country=self.country,
            dob=self.dob,
        )


class TraderSchema(CamelModel):
    """A persisted trader in the response."""

    id: int
    first_name: str
    last_name: str
    email: str
    country: str
    dob: date

    @classmethod
    def from_entity(cls, trader: Trader) -> "TraderSchema":
        return cls(
            id=trader.id,
            first_name=trader.first_name,
            last_name=trader.last_name,
            email=trader.email,
            country=trader.country,
            dob=trader.dob,
        )


class AccountSchema(CamelModel):
    """A trader's account and its balance."""

    id: int
    trader_id: int
    amount: Decimal

    @classmethod
    def from_entity(cls, account: Account) -> "AccountSchema":
        return cls(id=account.id, trader_id=account.trader_id, amount=account.amount)


class TraderAccountViewSchema(CamelModel):
    """Response schema for both create endpoints."""

    trader: TraderSchema
    account: AccountSchema

    @classmethod
    def from_entity(cls, view: TraderAccountView) -> "TraderAccountViewSchema":
        return cls(
            trader=TraderSchema.from_entity(view.trader),
            account=AccountSchema.from_entity(view.account),
        )


class ErrorResponse(BaseModel):
    """Consistent error response schema for all endpoints."""

    error: str
    detail: str | None = None


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    version: str
