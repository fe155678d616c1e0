"""Tests for the end-to-end adaptation pipeline."""

from __future__ import annotations

import pytest

from tests.conftest import COLORING_SVG, DUPLICATE_ID_SVG, NESTED_GROUP_SVG

from app.adapter.pipeline import adapt_svg, repair_svg_text, validate_svg_text
from app.svg.parser import SvgParseError, parse_svg


def test_adapt_summary():
    svg, result = adapt_svg(COLORING_SVG)
    assert result.colorable_count == 3
    assert result.decorative_count == 3
    assert result.stats.ids_assigned == 3
    assert result.stats.pointer_events_added == 3
    assert result.validation is None
    assert svg.startswith("<?xml")


def test_adapted_markup_meets_contract():
    svg, _ = adapt_svg(COLORING_SVG)
    doc = parse_svg(svg)

    by_id = {el.id: el for el in doc.elements if el.id}
    assert sorted(by_id) == ["area-1", "area-2", "area-3"]
    for el in by_id.values():
        assert el.fill == "none"
        assert float(el.stroke_width) >= 2
        assert el.pointer_events is None

    decorative = [el for el in doc.elements if not el.id]
    assert len(decorative) == 3
    assert all(el.pointer_events == "none" for el in decorative)
    assert [el.fill for el in decorative] == ["#FFFFFF", "#000000", "#4ECDC4"]


def test_adapt_with_validation():
    _, result = adapt_svg(COLORING_SVG, run_validation=True)
    assert result.validation is not None
    assert result.validation.valid
    assert result.validation.colorable_areas == ["area-1", "area-2", "area-3"]


def test_adapt_nested_groups():
    svg, result = adapt_svg(NESTED_GROUP_SVG)
    # two outlines colorable, the painted gold rect is colorable by default
    assert result.colorable_count == 3
    assert result.decorative_count == 0
    assert '<g id="body">' in svg


def test_adapting_twice_is_stable():
    once, _ = adapt_svg(COLORING_SVG)
    twice, _ = adapt_svg(once)
    assert twice == once


def test_adapt_rejects_non_svg():
    with pytest.raises(SvgParseError):
        adapt_svg("<not-svg>")


def test_validate_text():
    result = validate_svg_text(DUPLICATE_ID_SVG)
    assert not result.valid
    assert result.errors == ["ID duplicado encontrado: area-1"]


def test_validate_text_load_failure():
    result = validate_svg_text("<svg><path></svg>")
    assert not result.valid
    assert len(result.errors) == 1
    assert result.errors[0].startswith("Erro ao carregar SVG: ")


def test_repair_text():
    svg, result = repair_svg_text(DUPLICATE_ID_SVG)
    assert result.changes == ["Renomeado area-1 para decorative-1"]
    assert 'id="decorative-1"' in svg
    assert validate_svg_text(svg).valid
