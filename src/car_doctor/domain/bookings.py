"""Domain models for customer bookings."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class BookingRecord:
    """Represents a booking stored in the database."""

    id: UUID
    email: str | None
    service: str | None
    service_id: str | None
    customer_name: str | None
    date: str | None
    price: str | None
    img: str | None
    status: str | None
    created_at: datetime | None = None


@dataclass(frozen=True)
class InsertResult:
    """Outcome of placing a booking."""

    inserted_id: UUID


@dataclass(frozen=True)
class UpdateResult:
    """Outcome of a status update, including the no-match case."""

    matched_count: int
    modified_count: int
    upserted_id: UUID | None = None


@dataclass(frozen=True)
class DeleteResult:
    """Outcome of a delete; zero when nothing matched."""

    deleted_count: int
