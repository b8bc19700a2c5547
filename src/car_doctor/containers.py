"""Dependency container wiring for the application."""

from collections.abc import Callable
from dataclasses import dataclass
from functools import partial

from supabase import create_client

from car_doctor.adapters.supabase_booking_repository import SupabaseBookingRepository
from car_doctor.adapters.supabase_service_repository import SupabaseServiceRepository
from car_doctor.adapters.supabase_support import ping
from car_doctor.config import Settings
from car_doctor.services.auth import AuthGuard
from car_doctor.services.bookings import BookingService
from car_doctor.services.catalog import CatalogService
from car_doctor.services.tokens import TokenService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    token_service: TokenService
    auth_guard: AuthGuard
    booking_service: BookingService
    catalog_service: CatalogService
    check_storage: Callable[[], None]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container.

    One Supabase client is created here and shared by every repository for
    the lifetime of the process.
    """
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    token_service = TokenService(
        secret=resolved_settings.access_token_secret,
        ttl_seconds=resolved_settings.token_ttl_seconds,
    )
    return AppContainer(
        settings=resolved_settings,
        token_service=token_service,
        auth_guard=AuthGuard(token_service),
        booking_service=BookingService(SupabaseBookingRepository(supabase_client)),
        catalog_service=CatalogService(SupabaseServiceRepository(supabase_client)),
        check_storage=partial(ping, supabase_client),
    )
