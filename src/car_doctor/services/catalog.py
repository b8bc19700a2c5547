"""Service catalog lookups."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from car_doctor.domain.catalog import ServiceOffering, ServiceSummary
from car_doctor.domain.errors import NotFoundError


class ServiceRepository(Protocol):
    """Read-only persistence interface for service offerings."""

    def list_services(self) -> list[ServiceOffering]:
        """Return every offering in storage order."""

    def get_service(self, offering_id: UUID) -> ServiceOffering | None:
        """Return a full offering by id, if present."""

    def get_service_summary(self, offering_id: UUID) -> ServiceSummary | None:
        """Return the projected offering by id, if present."""


@dataclass
class CatalogService:
    """Application service for browsing the catalog."""

    repository: ServiceRepository

    def list_services(self, sort: str | None = None) -> list[ServiceOffering]:
        """List offerings by numeric price, ascending only for ``sort="asc"``."""
        return sort_by_price(self.repository.list_services(), ascending=sort == "asc")

    def get_service(self, offering_id: UUID) -> ServiceOffering:
        """Return a full offering or raise when it does not exist."""
        offering = self.repository.get_service(offering_id)
        if offering is None:
            raise NotFoundError("Service not found")
        return offering

    def get_service_summary(self, offering_id: UUID) -> ServiceSummary:
        """Return the projected offering or raise when it does not exist."""
        summary = self.repository.get_service_summary(offering_id)
        if summary is None:
            raise NotFoundError("Service not found")
        return summary


def sort_by_price(
    offerings: Iterable[ServiceOffering], ascending: bool
) -> list[ServiceOffering]:
    """Order offerings by the numeric value of their textual price.

    Ties keep their storage order. Offerings whose price is not a number go
    last regardless of direction.
    """
    priced: list[ServiceOffering] = []
    unpriced: list[ServiceOffering] = []
    for offering in offerings:
        (priced if offering.price_value is not None else unpriced).append(offering)
    priced.sort(key=lambda offering: offering.price_value, reverse=not ascending)
    return priced + unpriced
