"""Pydantic models for request payloads."""

from pydantic import BaseModel, ConfigDict, Field


class IdentityClaim(BaseModel):
    """Identity asserted by a client after third-party login."""

    model_config = ConfigDict(extra="allow")

    email: str = Field(min_length=1)


class BookingCreate(BaseModel):
    """Booking placed from the checkout page."""

    email: str = Field(min_length=1)
    service: str = Field(min_length=1)
    service_id: str | None = None
    customer_name: str | None = None
    date: str | None = None
    price: str | None = None
    img: str | None = None
    status: str | None = None


class StatusUpdate(BaseModel):
    """New status for a booking."""

    status: str = Field(min_length=1)
