"""Shared test fixtures."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

import pytest

from nutrition_calculator.config import Settings
from nutrition_calculator.containers import AppContainer
from nutrition_calculator.domain.nutrition import PortionInput
from nutrition_calculator.services.portions import (
    PortionService,
    PortionStateRepository,
)


@dataclass
class InMemoryPortionRepository(PortionStateRepository):
    """In-memory portion store for tests."""

    record: dict[str, object] | None = None
    saves: list[dict[str, object]] = field(default_factory=list)

    def load(self) -> dict[str, object] | None:
        return self.record

    def save(self, record: dict[str, object]) -> None:
        self.record = record
        self.saves.append(record)


@dataclass
class FailingPortionRepository(PortionStateRepository):
    """Portion store whose every call fails."""

    def load(self) -> dict[str, object] | None:
        raise OSError("storage unavailable")

    def save(self, record: dict[str, object]) -> None:
        raise OSError("storage unavailable")


@pytest.fixture
def label_portion() -> PortionInput:
    return PortionInput(
        calories_per_100=250,
        fat_per_100=10,
        carb_per_100=30,
        protein_per_100=12,
        grams_per_serving=100,
        serving_count=1,
    )


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        portion_store_backend="file",
        portion_store_path=tmp_path / "state.json",
    )


@pytest.fixture
def portion_repository() -> InMemoryPortionRepository:
    return InMemoryPortionRepository()


@pytest.fixture
def portion_service(portion_repository: InMemoryPortionRepository) -> PortionService:
    return PortionService(portion_repository)


@pytest.fixture
def container(settings: Settings, portion_service: PortionService) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        portion_service=portion_service,
        close_resources=close_resources,
    )


@pytest.fixture(autouse=True)
def _reset_app_logger() -> Iterator[None]:
    """Undo configure_logging so caplog sees records in every test."""
    yield
    logger = logging.getLogger("nutrition_calculator")
    logger.handlers.clear()
    logger.propagate = True
