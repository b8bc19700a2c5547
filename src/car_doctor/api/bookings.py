"""Booking ledger endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request

from car_doctor.api.auth import booking_change_identity, require_identity
from car_doctor.api.models import BookingCreate, StatusUpdate  # noqa: TC001
from car_doctor.domain.auth import Identity  # noqa: TC001

if TYPE_CHECKING:
    from car_doctor.containers import AppContainer
    from car_doctor.domain.bookings import BookingRecord

router = APIRouter(tags=["bookings"])


@router.post("/bookings")
def place_booking(booking: BookingCreate, request: Request) -> dict[str, str]:
    """Insert a booking as supplied by the client."""
    container: AppContainer = request.app.state.container
    result = container.booking_service.create(booking.model_dump(exclude_none=True))
    return {"inserted_id": str(result.inserted_id)}


@router.get("/bookings")
def list_bookings(
    request: Request,
    email: str | None = None,
    identity: Identity = Depends(require_identity),
) -> list[dict[str, object]]:
    """Return the caller's own bookings."""
    container: AppContainer = request.app.state.container
    records = container.booking_service.list_by_owner(email, identity)
    return [_serialize_booking(record) for record in records]


@router.delete("/booking/{booking_id}")
def delete_booking(
    booking_id: UUID,
    request: Request,
    identity: Identity | None = Depends(booking_change_identity),
) -> dict[str, int]:
    """Delete a booking by id."""
    container: AppContainer = request.app.state.container
    result = container.booking_service.delete(booking_id, identity=identity)
    return {"deleted_count": result.deleted_count}


@router.patch("/booking/{booking_id}")
def update_booking_status(
    booking_id: UUID,
    update: StatusUpdate,
    request: Request,
    upsert: bool = False,
    identity: Identity | None = Depends(booking_change_identity),
) -> dict[str, object]:
    """Set the status of a booking."""
    container: AppContainer = request.app.state.container
    result = container.booking_service.update_status(
        booking_id, update.status, identity=identity, upsert=upsert
    )
    return {
        "matched_count": result.matched_count,
        "modified_count": result.modified_count,
        "upserted_id": str(result.upserted_id) if result.upserted_id else None,
    }


def _serialize_booking(record: BookingRecord) -> dict[str, object]:
    return {
        "id": str(record.id),
        "email": record.email,
        "customer_name": record.customer_name,
        "service": record.service,
        "service_id": record.service_id,
        "date": record.date,
        "price": record.price,
        "img": record.img,
        "status": record.status,
        "created_at": record.created_at.isoformat() if record.created_at else None,
    }
