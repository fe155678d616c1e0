"""Validation engine — inspects any SVG tree against the canonical attribute contract.

Works on freshly adapted and legacy drawings alike, so it relies on the
decorative predicate (attributes only) rather than the classifier. Defects are
reported as data; nothing here raises on a well-formed tree.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterator

from app.adapter.constants import COLORABLE_ID_PREFIX, POINTER_EVENTS_NONE
from app.adapter.decorative import is_decorative
from app.models.results import ValidationResult

logger = logging.getLogger(__name__)

MSG_DUPLICATE_ID = "ID duplicado encontrado: {id}"
MSG_MISSING_POINTER_EVENTS = 'Elemento decorativo {id} não possui pointer-events="none"'
MSG_NO_COLORABLE = "Nenhuma área colorível encontrada"
MSG_NO_SVG_ROOT = "Elemento <svg> não encontrado"

SUGGEST_FIX_ERRORS = "Corrija os erros antes de usar o SVG"
SUGGEST_RERUN_TRANSFORM = "Execute novamente a transformação para garantir IDs únicos"
SUGGEST_REVIEW_CLASSIFICATION = "Nenhuma área colorível encontrada - verifique a classificação"
SUGGEST_INTERACTIVE_MODE = "Considere reclassificar elementos manualmente no modo interativo"
SUGGEST_REVIEW_WARNINGS = "Revise os avisos para garantir qualidade"
SUGGEST_RESTORE_POINTER_EVENTS = 'Adicione pointer-events="none" aos elementos decorativos'


def iter_colorable_ids(root: ET.Element) -> Iterator[tuple[str, ET.Element]]:
    """Yield (id, element) for descendants whose id has the colorable prefix, in document order."""
    for el in root.iter():
        if el is root:
            continue
        el_id = el.get("id")
        if el_id and el_id.startswith(COLORABLE_ID_PREFIX):
            yield el_id, el


def validate(root: ET.Element | None) -> ValidationResult:
    """Check id uniqueness and non-interactivity markers; attach suggestions."""
    result = ValidationResult()

    if root is None or not ET.iselement(root):
        result.add_error(MSG_NO_SVG_ROOT)
        result.suggestions = generate_suggestions(result)
        return result

    seen: dict[str, ET.Element] = {}
    for el_id, el in iter_colorable_ids(root):
        if el_id in seen:
            result.add_error(MSG_DUPLICATE_ID.format(id=el_id))
        else:
            seen[el_id] = el

        if is_decorative(el):
            result.decorative_elements.append(el_id)
            if el.get("pointer-events") != POINTER_EVENTS_NONE:
                result.warnings.append(MSG_MISSING_POINTER_EVENTS.format(id=el_id))
        else:
            result.colorable_areas.append(el_id)

    if not result.colorable_areas:
        result.warnings.append(MSG_NO_COLORABLE)

    result.suggestions = generate_suggestions(result)

    logger.info(
        "Validated SVG: valid=%s, %d errors, %d warnings, %d colorable, %d decorative",
        result.valid,
        len(result.errors),
        len(result.warnings),
        len(result.colorable_areas),
        len(result.decorative_elements),
    )
    return result


def generate_suggestions(result: ValidationResult) -> list[str]:
    """Actionable hints for a validation result. Checks are independent; several may fire."""
    suggestions: list[str] = []

    if result.errors:
        suggestions.append(SUGGEST_FIX_ERRORS)
        suggestions.append(SUGGEST_RERUN_TRANSFORM)

    if not result.colorable_areas:
        suggestions.append(SUGGEST_REVIEW_CLASSIFICATION)
        suggestions.append(SUGGEST_INTERACTIVE_MODE)

    if result.warnings:
        suggestions.append(SUGGEST_REVIEW_WARNINGS)
        if any('pointer-events="none"' in w for w in result.warnings):
            suggestions.append(SUGGEST_RESTORE_POINTER_EVENTS)

    return suggestions
