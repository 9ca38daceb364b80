"""Shared Pydantic base class with consistent configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TypedBaseModel(BaseModel):
    """Centralized typed base ensuring all schemas inherit the same contract.

    Attributes are snake_case in Python and camelCase on the wire, matching the
    upstream configuration documents. Unknown keys are rejected so typos in an
    operator's document surface at load time instead of being dropped.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )
