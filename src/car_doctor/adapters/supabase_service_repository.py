"""Supabase implementation for the service catalog."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from car_doctor.adapters.supabase_support import execute
from car_doctor.domain.catalog import ServiceOffering, ServiceSummary
from car_doctor.services.catalog import ServiceRepository

_SUMMARY_COLUMNS = "id, title, price, img, service_id"


@dataclass
class SupabaseServiceRepository(ServiceRepository):
    """Supabase-backed read-only repository for service offerings."""

    client: Client

    def list_services(self) -> list[ServiceOffering]:
        """Return every offering in storage order."""
        response = execute(self.client.table("services").select("*"))
        return [_parse_offering(row) for row in response.data or []]

    def get_service(self, offering_id: UUID) -> ServiceOffering | None:
        """Return a full offering by id, if present."""
        response = execute(
            self.client.table("services")
            .select("*")
            .eq("id", str(offering_id))
            .limit(1)
        )
        if not response.data:
            return None
        return _parse_offering(response.data[0])

    def get_service_summary(self, offering_id: UUID) -> ServiceSummary | None:
        """Return only the checkout fields of an offering."""
        response = execute(
            self.client.table("services")
            .select(_SUMMARY_COLUMNS)
            .eq("id", str(offering_id))
            .limit(1)
        )
        if not response.data:
            return None
        row = response.data[0]
        return ServiceSummary(
            id=UUID(str(row["id"])),
            service_id=_as_text(row.get("service_id")),
            title=_as_text(row.get("title")) or "",
            price=_as_text(row.get("price")),
            img=row.get("img"),
        )


def _parse_offering(row: dict[str, object]) -> ServiceOffering:
    """Parse a services row into a domain model."""
    facility = row.get("facility")
    return ServiceOffering(
        id=UUID(str(row["id"])),
        service_id=_as_text(row.get("service_id")),
        title=_as_text(row.get("title")) or "",
        price=_as_text(row.get("price")),
        img=row.get("img"),
        description=row.get("description"),
        facility=facility if isinstance(facility, list) else [],
    )


def _as_text(value: object) -> str | None:
    return None if value is None else str(value)
