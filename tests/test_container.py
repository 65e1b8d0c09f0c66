"""Tests for container wiring."""

import asyncio

import pytest

from nutrition_calculator.adapters.json_file_portion_repository import (
    JsonFilePortionRepository,
)
from nutrition_calculator.config import Settings
from nutrition_calculator.containers import build_container
from nutrition_calculator.domain.nutrition import DEFAULT_PORTION


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert isinstance(container.portion_service.repository, JsonFilePortionRepository)
    assert container.portion_service.portion == DEFAULT_PORTION
    asyncio.run(container.close_resources())


def test_build_container_restores_saved_state(settings: Settings) -> None:
    build_container(settings).portion_service.set_servings(3)

    container = build_container(settings)

    assert container.portion_service.portion.serving_count == 3


def test_supabase_backend_requires_credentials() -> None:
    settings = Settings(portion_store_backend="supabase", supabase_url=None)

    with pytest.raises(ValueError, match="SUPABASE_URL"):
        build_container(settings)
