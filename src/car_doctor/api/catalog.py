"""Service catalog endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request

if TYPE_CHECKING:
    from car_doctor.containers import AppContainer
    from car_doctor.domain.catalog import ServiceOffering

router = APIRouter(tags=["catalog"])


@router.get("/services")
def list_services(
    request: Request, sort: str | None = None
) -> list[dict[str, object]]:
    """Return all offerings sorted by numeric price."""
    container: AppContainer = request.app.state.container
    offerings = container.catalog_service.list_services(sort)
    return [_serialize_offering(offering) for offering in offerings]


@router.get("/services/{offering_id}")
def service_detail(offering_id: UUID, request: Request) -> dict[str, object]:
    """Return a full offering."""
    container: AppContainer = request.app.state.container
    return _serialize_offering(container.catalog_service.get_service(offering_id))


@router.get("/service/{offering_id}")
def service_summary(offering_id: UUID, request: Request) -> dict[str, object]:
    """Return the title, price, image and catalog id of an offering."""
    container: AppContainer = request.app.state.container
    summary = container.catalog_service.get_service_summary(offering_id)
    return {
        "id": str(summary.id),
        "title": summary.title,
        "price": summary.price,
        "img": summary.img,
        "service_id": summary.service_id,
    }


def _serialize_offering(offering: ServiceOffering) -> dict[str, object]:
    return {
        "id": str(offering.id),
        "service_id": offering.service_id,
        "title": offering.title,
        "price": offering.price,
        "img": offering.img,
        "description": offering.description,
        "facility": offering.facility,
    }
