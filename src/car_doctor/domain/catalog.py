"""Domain models for the service catalog."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from uuid import UUID


@dataclass(frozen=True)
class ServiceSummary:
    """Projection of a service offering used by the checkout page."""

    id: UUID
    service_id: str | None
    title: str
    price: str | None
    img: str | None


@dataclass(frozen=True)
class ServiceOffering:
    """Represents a service offering with its price stored as text."""

    id: UUID
    service_id: str | None
    title: str
    price: str | None
    img: str | None
    description: str | None = None
    facility: list[dict[str, object]] = field(default_factory=list)

    @property
    def price_value(self) -> Decimal | None:
        """Numeric value of the textual price, or None when it is not a number."""
        if self.price is None:
            return None
        try:
            value = Decimal(str(self.price).strip())
        except InvalidOperation:
            return None
        if not value.is_finite():
            return None
        return value
