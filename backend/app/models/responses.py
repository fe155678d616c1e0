"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from app.models.results import AdaptationResult, RepairResult


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"


class AdaptResponse(BaseModel):
    svg: str
    result: AdaptationResult = Field(default_factory=AdaptationResult)
    processing_time_ms: float = 0.0


class RepairResponse(BaseModel):
    svg: str
    result: RepairResult = Field(default_factory=RepairResult)
