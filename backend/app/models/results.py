"""Structured results returned by the adapter operations."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TransformStats(BaseModel):
    ids_assigned: int = 0
    pointer_events_added: int = 0
    strokes_adjusted: int = 0
    fills_cleared: int = 0


class ValidationResult(BaseModel):
    """Structural report for one SVG tree. ``valid`` is False iff ``errors`` is non-empty."""

    valid: bool = True
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    colorable_areas: list[str] = Field(default_factory=list)
    decorative_elements: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)

    def add_error(self, message: str) -> None:
        self.errors.append(message)
        self.valid = False


class RepairResult(BaseModel):
    fixed: bool = False
    changes: list[str] = Field(default_factory=list)


class AdaptationResult(BaseModel):
    colorable_count: int = 0
    decorative_count: int = 0
    stats: TransformStats = Field(default_factory=TransformStats)
    validation: ValidationResult | None = None
