"""Supabase-backed booking repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from car_doctor.adapters.supabase_support import execute
from car_doctor.domain.bookings import BookingRecord
from car_doctor.domain.errors import StorageUnavailableError
from car_doctor.services.bookings import BookingRepository

_BOOKING_COLUMNS = (
    "id, email, customer_name, service, service_id, date, price, img, status, "
    "created_at"
)


@dataclass
class SupabaseBookingRepository(BookingRepository):
    """Supabase implementation for booking persistence."""

    client: Client

    def create_booking(self, payload: dict[str, object]) -> BookingRecord:
        """Insert a booking row and return it."""
        response = execute(self.client.table("bookings").insert(payload))
        if not response.data:
            raise StorageUnavailableError("Failed to create booking in Supabase")
        return _parse_booking(response.data[0])

    def get_booking(self, booking_id: UUID) -> BookingRecord | None:
        """Return a booking by id, if present."""
        response = execute(
            self.client.table("bookings")
            .select(_BOOKING_COLUMNS)
            .eq("id", str(booking_id))
            .limit(1)
        )
        if not response.data:
            return None
        return _parse_booking(response.data[0])

    def list_bookings_by_email(self, email: str) -> list[BookingRecord]:
        """Return all bookings owned by an email."""
        response = execute(
            self.client.table("bookings")
            .select(_BOOKING_COLUMNS)
            .eq("email", email)
            .order("created_at")
        )
        return [_parse_booking(row) for row in response.data or []]

    def update_status(self, booking_id: UUID, status: str) -> None:
        """Set the status field of a booking."""
        execute(
            self.client.table("bookings")
            .update({"status": status})
            .eq("id", str(booking_id))
        )

    def delete_booking(self, booking_id: UUID) -> int:
        """Delete a booking and return the number of rows removed."""
        response = execute(
            self.client.table("bookings").delete().eq("id", str(booking_id))
        )
        return len(response.data or [])


def _parse_booking(row: dict[str, object]) -> BookingRecord:
    created_raw = row.get("created_at")
    return BookingRecord(
        id=UUID(str(row["id"])),
        email=row.get("email"),
        service=row.get("service"),
        service_id=row.get("service_id"),
        customer_name=row.get("customer_name"),
        date=row.get("date"),
        price=_as_text(row.get("price")),
        img=row.get("img"),
        status=row.get("status"),
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
    )


def _as_text(value: object) -> str | None:
    return None if value is None else str(value)
