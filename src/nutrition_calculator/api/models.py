"""Pydantic models for API request payloads."""

from pydantic import BaseModel

RawNumber = float | str | None


class PortionPayload(BaseModel):
    """Portion input as sent by a client; values are normalized server-side."""

    calories_per_100: RawNumber = None
    fat_per_100: RawNumber = None
    carb_per_100: RawNumber = None
    protein_per_100: RawNumber = None
    grams_per_serving: RawNumber = None
    serving_count: RawNumber = None


class ValuePayload(BaseModel):
    """Single raw value for a state update."""

    value: RawNumber = None
