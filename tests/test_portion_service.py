"""Tests for the portion state service."""

import logging

import pytest

from nutrition_calculator.domain.nutrition import DEFAULT_PORTION, PortionInput
from nutrition_calculator.services.portions import (
    PortionService,
    portion_from_record,
    portion_to_record,
)
from tests.conftest import FailingPortionRepository, InMemoryPortionRepository


def test_restore_without_saved_state_uses_defaults(
    portion_service: PortionService,
) -> None:
    assert portion_service.restore() == DEFAULT_PORTION


def test_restore_applies_saved_snapshot() -> None:
    repository = InMemoryPortionRepository(
        record={
            "per100": {"kcal": 52, "fat": 0.2, "carb": 14, "protein": 0.3},
            "grams": 182,
            "servings": 2,
        }
    )
    service = PortionService(repository)

    portion = service.restore()

    assert portion == PortionInput(52, 0.2, 14, 0.3, 182, 2)


def test_restore_skips_falsy_parts() -> None:
    repository = InMemoryPortionRepository(
        record={"per100": {}, "grams": 0, "servings": None}
    )
    service = PortionService(repository)

    assert service.restore() == DEFAULT_PORTION


def test_restore_falls_back_when_storage_fails(caplog) -> None:
    service = PortionService(FailingPortionRepository())

    with caplog.at_level(logging.ERROR):
        portion = service.restore()

    assert portion == DEFAULT_PORTION
    assert "Failed to load portion state" in caplog.text


def test_restore_ignores_malformed_record() -> None:
    assert portion_from_record(["not", "a", "record"]) == DEFAULT_PORTION


def test_set_per100_clamps_and_persists(
    portion_service: PortionService, portion_repository: InMemoryPortionRepository
) -> None:
    portion = portion_service.set_per100("fat", -4)

    assert portion.fat_per_100 == 0
    assert portion_repository.record == portion_to_record(portion)


def test_set_per100_rejects_unknown_field(portion_service: PortionService) -> None:
    with pytest.raises(ValueError, match="sugar"):
        portion_service.set_per100("sugar", 5)


def test_grams_and_servings_have_minimum_of_one(
    portion_service: PortionService,
) -> None:
    assert portion_service.set_grams(0).grams_per_serving == 1
    assert portion_service.set_grams(2500).grams_per_serving == 2500
    assert portion_service.set_servings("").serving_count == 1


def test_increment_and_decrement_servings(portion_service: PortionService) -> None:
    assert portion_service.increment_servings().serving_count == 2
    assert portion_service.increment_servings().serving_count == 3
    assert portion_service.decrement_servings().serving_count == 2
    assert portion_service.decrement_servings().serving_count == 1
    assert portion_service.decrement_servings().serving_count == 1


def test_reset_restores_defaults(
    portion_service: PortionService, portion_repository: InMemoryPortionRepository
) -> None:
    portion_service.set_grams(300)
    portion_service.set_per100("kcal", 900)

    portion = portion_service.reset()

    assert portion == DEFAULT_PORTION
    assert portion_repository.record == portion_to_record(DEFAULT_PORTION)


def test_save_failure_keeps_state(caplog) -> None:
    service = PortionService(FailingPortionRepository())

    with caplog.at_level(logging.ERROR):
        portion = service.set_servings(4)

    assert portion.serving_count == 4
    assert "Failed to save portion state" in caplog.text


def test_derived_tracks_current_state(portion_service: PortionService) -> None:
    portion_service.set_grams(200)
    portion_service.set_servings(2)

    derived = portion_service.derived()

    assert derived.total_grams == 400
    assert derived.labeled_calories == 1000
    assert portion_service.report().total_grams_label == "Total considered: 400 g"
