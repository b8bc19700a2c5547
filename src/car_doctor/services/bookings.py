"""Booking ledger business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from car_doctor.domain.auth import Identity
from car_doctor.domain.bookings import (
    BookingRecord,
    DeleteResult,
    InsertResult,
    UpdateResult,
)
from car_doctor.domain.errors import ForbiddenError

logger = logging.getLogger(__name__)


class BookingRepository(Protocol):
    """Persistence interface for bookings."""

    def create_booking(self, payload: dict[str, object]) -> BookingRecord:
        """Insert a booking row and return it."""

    def get_booking(self, booking_id: UUID) -> BookingRecord | None:
        """Return a booking by id, if present."""

    def list_bookings_by_email(self, email: str) -> list[BookingRecord]:
        """Return all bookings owned by an email."""

    def update_status(self, booking_id: UUID, status: str) -> None:
        """Set the status field of a booking."""

    def delete_booking(self, booking_id: UUID) -> int:
        """Delete a booking and return the number of rows removed."""


@dataclass
class BookingService:
    """Application service for the booking lifecycle.

    A booking's ``email`` is its owner and the only key used for
    authorization. Update and delete check ownership only when a verified
    identity is passed in; callers that pass ``None`` opt out of the check.
    """

    repository: BookingRepository

    def create(self, payload: dict[str, object]) -> InsertResult:
        """Place a booking exactly as supplied by the caller."""
        record = self.repository.create_booking(payload)
        return InsertResult(inserted_id=record.id)

    def list_by_owner(
        self, requested_email: str | None, identity: Identity
    ) -> list[BookingRecord]:
        """Return the caller's bookings; any other email is forbidden."""
        if (
            requested_email is None
            or identity.email is None
            or requested_email != identity.email
        ):
            logger.warning(
                "Forbidden booking listing",
                extra={"requested_email": requested_email, "email": identity.email},
            )
            raise ForbiddenError("Bookings can only be listed by their owner")
        return self.repository.list_bookings_by_email(requested_email)

    def update_status(
        self,
        booking_id: UUID,
        status: str,
        *,
        identity: Identity | None = None,
        upsert: bool = False,
    ) -> UpdateResult:
        """Change only the status of a booking.

        A missing booking yields a zero-match result, or a new record holding
        just the id and status when ``upsert`` is requested.
        """
        current = self.repository.get_booking(booking_id)
        if current is None:
            if not upsert:
                return UpdateResult(matched_count=0, modified_count=0)
            payload: dict[str, object] = {"id": str(booking_id), "status": status}
            if identity is not None:
                payload["email"] = identity.email
            created = self.repository.create_booking(payload)
            return UpdateResult(
                matched_count=0, modified_count=0, upserted_id=created.id
            )
        _ensure_owner(current, identity)
        if current.status == status:
            return UpdateResult(matched_count=1, modified_count=0)
        self.repository.update_status(booking_id, status)
        return UpdateResult(matched_count=1, modified_count=1)

    def delete(
        self, booking_id: UUID, *, identity: Identity | None = None
    ) -> DeleteResult:
        """Delete a booking; deleting a missing id removes nothing."""
        current = self.repository.get_booking(booking_id)
        if current is None:
            return DeleteResult(deleted_count=0)
        _ensure_owner(current, identity)
        return DeleteResult(deleted_count=self.repository.delete_booking(booking_id))


def _ensure_owner(record: BookingRecord, identity: Identity | None) -> None:
    if identity is None:
        return
    if identity.email is None or record.email != identity.email:
        logger.warning(
            "Forbidden booking change",
            extra={"booking_id": str(record.id), "email": identity.email},
        )
        raise ForbiddenError("Bookings can only be changed by their owner")
