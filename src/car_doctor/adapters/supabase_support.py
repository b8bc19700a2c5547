"""Shared helpers for Supabase-backed repositories."""

import logging
from typing import Any

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from car_doctor.domain.errors import StorageUnavailableError

logger = logging.getLogger(__name__)


def execute(query: Any) -> Any:
    """Run a PostgREST query, translating backend failures."""
    try:
        return query.execute()
    except (APIError, httpx.HTTPError) as exc:
        logger.exception("Supabase request failed")
        raise StorageUnavailableError("Storage request failed") from exc


def ping(client: Client) -> None:
    """Confirm the catalog table is reachable."""
    execute(client.table("services").select("id").limit(1))
