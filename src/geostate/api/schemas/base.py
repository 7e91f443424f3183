"""Shared configuration for API payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class APIBaseSchema(BaseModel):
    """
    Base for every API payload.

    Attributes stay snake_case in Python; JSON keys are camelCase
    (``duration_ms`` is served as ``durationMs``). Payloads are immutable once built.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
