"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Request, status

from nutrition_calculator.api.models import PortionPayload, ValuePayload
from nutrition_calculator.app_logging import configure_logging
from nutrition_calculator.containers import AppContainer
from nutrition_calculator.domain.nutrition import DerivedNutrition
from nutrition_calculator.domain.report import NutritionReport
from nutrition_calculator.services.calculator import classify_consistency, compute
from nutrition_calculator.services.portions import (
    GRAMS_SLIDER_MAX,
    GRAMS_SLIDER_MIN,
    QUICK_GRAM_OPTIONS,
    PortionService,
)
from nutrition_calculator.services.report import build_report


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Portion store backend: %s", container.settings.portion_store_backend
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/nutrition/compute")
    async def compute_nutrition(payload: PortionPayload) -> dict[str, object]:
        """Compute derived nutrition for an ad-hoc portion."""
        return _derived_payload(compute(payload.model_dump()))

    @app.post("/nutrition/report")
    async def nutrition_report(payload: PortionPayload) -> dict[str, object]:
        """Return the display report for an ad-hoc portion."""
        return _report_payload(build_report(payload.model_dump()))

    @app.get("/portion")
    async def get_portion(request: Request) -> dict[str, object]:
        """Return the current portion and its derived values."""
        return _state_payload(_portion_service(request))

    @app.get("/portion/options")
    async def portion_options() -> dict[str, object]:
        """Return suggested gram amounts and the slider range."""
        return {
            "quick_grams": list(QUICK_GRAM_OPTIONS),
            "grams_min": GRAMS_SLIDER_MIN,
            "grams_max": GRAMS_SLIDER_MAX,
        }

    @app.get("/portion/report")
    async def portion_report(request: Request) -> dict[str, object]:
        """Return the display report for the current portion."""
        return _report_payload(_portion_service(request).report())

    @app.put("/portion/per100/{field}")
    async def set_per100(
        field: str, payload: ValuePayload, request: Request
    ) -> dict[str, object]:
        """Update one per-100 g label value."""
        service = _portion_service(request)
        try:
            service.set_per100(field, payload.value)
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
            ) from exc
        return _state_payload(service)

    @app.put("/portion/grams")
    async def set_grams(payload: ValuePayload, request: Request) -> dict[str, object]:
        """Update grams per serving."""
        service = _portion_service(request)
        service.set_grams(payload.value)
        return _state_payload(service)

    @app.put("/portion/servings")
    async def set_servings(
        payload: ValuePayload, request: Request
    ) -> dict[str, object]:
        """Update the serving count."""
        service = _portion_service(request)
        service.set_servings(payload.value)
        return _state_payload(service)

    @app.post("/portion/servings/increment")
    async def increment_servings(request: Request) -> dict[str, object]:
        """Add one serving."""
        service = _portion_service(request)
        service.increment_servings()
        return _state_payload(service)

    @app.post("/portion/servings/decrement")
    async def decrement_servings(request: Request) -> dict[str, object]:
        """Remove one serving, never going below one."""
        service = _portion_service(request)
        service.decrement_servings()
        return _state_payload(service)

    @app.post("/portion/reset")
    async def reset_portion(request: Request) -> dict[str, object]:
        """Restore the default portion."""
        service = _portion_service(request)
        service.reset()
        return _state_payload(service)

    return app


def _portion_service(request: Request) -> PortionService:
    state_container: AppContainer = request.app.state.container
    return state_container.portion_service


def _derived_payload(derived: DerivedNutrition) -> dict[str, object]:
    payload = asdict(derived)
    payload["consistency_intent"] = classify_consistency(
        derived.consistency_pct_diff
    ).value
    return payload


def _state_payload(service: PortionService) -> dict[str, object]:
    return {
        "portion": asdict(service.portion),
        "derived": _derived_payload(service.derived()),
    }


def _report_payload(report: NutritionReport) -> dict[str, object]:
    payload = asdict(report)
    payload["derived"] = _derived_payload(report.derived)
    payload["consistency_intent"] = report.consistency_intent.value
    return payload
