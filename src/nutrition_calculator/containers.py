"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from nutrition_calculator.adapters.json_file_portion_repository import (
    JsonFilePortionRepository,
)
from nutrition_calculator.adapters.supabase_portion_repository import (
    SupabasePortionRepository,
)
from nutrition_calculator.config import Settings
from nutrition_calculator.services.portions import (
    PortionService,
    PortionStateRepository,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    portion_service: PortionService
    close_resources: Callable[[], Awaitable[None]]


def build_portion_repository(settings: Settings) -> PortionStateRepository:
    """Create the configured portion state store."""
    if settings.portion_store_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError(
                "Supabase portion store requires SUPABASE_URL and "
                "SUPABASE_SERVICE_KEY"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabasePortionRepository(client, key=settings.portion_store_key)
    return JsonFilePortionRepository(
        settings.portion_store_path, key=settings.portion_store_key
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    portion_service = PortionService(
        repository=build_portion_repository(resolved_settings),
        debug=resolved_settings.debug,
    )
    portion_service.restore()

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=resolved_settings,
        portion_service=portion_service,
        close_resources=close_resources,
    )
