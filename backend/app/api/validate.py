"""POST /api/validate and POST /api/repair — structural checks on any SVG."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from app.adapter.pipeline import repair_svg_text, validate_svg_text
from app.models.requests import RepairRequest, ValidateRequest
from app.models.responses import RepairResponse
from app.models.results import ValidationResult
from app.svg.parser import SvgParseError

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/validate", response_model=ValidationResult)
def validate(request: ValidateRequest) -> ValidationResult:
    # Load failures are reported inside the result, not as HTTP errors
    return validate_svg_text(request.svg)


@router.post("/repair", response_model=RepairResponse)
def repair(request: RepairRequest) -> RepairResponse:
    try:
        svg, result = repair_svg_text(request.svg)
    except SvgParseError as e:
        logger.warning("repair: rejected input: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e
    return RepairResponse(svg=svg, result=result)
