"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AdaptRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    validate_output: bool = Field(default=False, description="Run validation on the adapted tree")


class ValidateRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")


class RepairRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
