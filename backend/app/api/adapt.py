"""POST /api/adapt — rewrite an SVG into the coloring contract."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, HTTPException

from app.adapter.pipeline import adapt_svg
from app.models.requests import AdaptRequest
from app.models.responses import AdaptResponse
from app.svg.parser import SvgParseError

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/adapt", response_model=AdaptResponse)
def adapt(request: AdaptRequest) -> AdaptResponse:
    start = time.perf_counter()
    try:
        svg, result = adapt_svg(request.svg, run_validation=request.validate_output)
    except SvgParseError as e:
        logger.warning("adapt: rejected input: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    elapsed = (time.perf_counter() - start) * 1000
    return AdaptResponse(svg=svg, result=result, processing_time_ms=round(elapsed, 1))
