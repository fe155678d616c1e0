"""Adaptation pipeline — parse, classify, transform, optionally validate, serialize."""

from __future__ import annotations

import logging
import time

from app.adapter.classifier import classify
from app.adapter.config import DEFAULT_CONFIG, AdapterConfig
from app.adapter.repair import fix_duplicate_ids
from app.adapter.transform_engine import transform
from app.adapter.validation import validate
from app.models.results import AdaptationResult, RepairResult, ValidationResult
from app.svg.parser import SvgParseError, parse_svg
from app.svg.serializer import serialize_svg

logger = logging.getLogger(__name__)

MSG_LOAD_ERROR = "Erro ao carregar SVG: {error}"


def adapt_svg(
    svg_text: str,
    run_validation: bool = False,
    config: AdapterConfig = DEFAULT_CONFIG,
) -> tuple[str, AdaptationResult]:
    """Adapt raw SVG markup to the coloring contract.

    Returns the adapted markup and a summary. Raises SvgParseError when the
    markup is not an SVG document.
    """
    start = time.perf_counter()

    doc = parse_svg(svg_text)
    classification = classify(doc.elements, config)
    stats = transform(doc.root, classification, config)

    result = AdaptationResult(
        colorable_count=len(classification.colorable),
        decorative_count=len(classification.decorative),
        stats=stats,
    )
    if run_validation:
        result.validation = validate(doc.root)

    adapted = serialize_svg(doc.root)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Adaptation complete: %d colorable, %d decorative in %.0fms",
        result.colorable_count,
        result.decorative_count,
        elapsed,
    )
    return adapted, result


def validate_svg_text(svg_text: str) -> ValidationResult:
    """Validate raw markup. Load failures become an error result instead of raising."""
    try:
        doc = parse_svg(svg_text)
    except SvgParseError as e:
        logger.warning("Validation skipped, SVG could not be loaded: %s", e)
        result = ValidationResult()
        result.add_error(MSG_LOAD_ERROR.format(error=e))
        return result

    return validate(doc.root)


def repair_svg_text(svg_text: str) -> tuple[str, RepairResult]:
    """Fix duplicate ids in raw markup. Raises SvgParseError on unparseable input."""
    doc = parse_svg(svg_text)
    result = fix_duplicate_ids(doc.root)
    return serialize_svg(doc.root), result
