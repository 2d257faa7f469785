"""Comparison options with Pydantic validation."""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from looksalike.config.settings import DEFAULT_HIGHLIGHT_COLOR
from looksalike.exceptions import ConfigurationError
from looksalike.imaging.colors import parse_color
from looksalike.types import JND, Color


class CompareOptions(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    tolerance: float | None = Field(default=None, ge=0)
    strict: bool = False
    ignore_antialiasing: bool = True
    antialiasing_tolerance: float = Field(default=0.0, ge=0)
    ignore_caret: bool = False
    pixel_ratio: float = Field(default=1.0, gt=0)

    @model_validator(mode="after")
    def check_strict_tolerance(self) -> Self:
        if self.strict and self.tolerance is not None:
            msg = 'Unable to use "strict" and "tolerance" options together'
            raise ValueError(msg)
        return self

    @property
    def effective_tolerance(self) -> float:
        return JND if self.tolerance is None else self.tolerance

    @classmethod
    def from_kwargs(cls, **kwargs: Any) -> Self:
        """Build options, reporting any invalid value as a ConfigurationError."""
        try:
            return cls.model_validate(kwargs)
        except ValidationError as exc:
            raise ConfigurationError(str(exc)) from exc


class DiffOptions(CompareOptions):
    highlight_color: Color = Field(default_factory=lambda: parse_color(DEFAULT_HIGHLIGHT_COLOR))

    @field_validator("highlight_color", mode="before")
    @classmethod
    def parse_highlight_color(cls, value: Any) -> Color:
        return parse_color(value)
