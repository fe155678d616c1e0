"""Duplicate-id repair.

Only the later holder of a duplicated ``area-`` id is ever touched, and only
when it is decorative by the attribute predicate; it moves to the
``decorative-`` namespace. A later duplicate that looks colorable is left
unrenamed and validate() keeps reporting it.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from app.adapter.constants import DECORATIVE_ID_PREFIX
from app.adapter.decorative import is_decorative
from app.adapter.validation import iter_colorable_ids
from app.models.results import RepairResult

logger = logging.getLogger(__name__)


def fix_duplicate_ids(root: ET.Element | None) -> RepairResult:
    """Rename decorative duplicates of colorable ids. Never raises on a missing root."""
    result = RepairResult()
    if root is None or not ET.iselement(root):
        logger.debug("fix_duplicate_ids: no element tree, nothing to fix")
        return result

    # Materialize first: renaming while iterating must not change the selection
    candidates = list(iter_colorable_ids(root))

    seen: set[str] = set()
    next_index = 1
    for el_id, el in candidates:
        if el_id not in seen:
            seen.add(el_id)
            continue

        if not is_decorative(el):
            logger.warning("Duplicate id %s on a non-decorative element left unresolved", el_id)
            continue

        new_id = f"{DECORATIVE_ID_PREFIX}{next_index}"
        next_index += 1
        el.set("id", new_id)
        result.changes.append(f"Renomeado {el_id} para {new_id}")

    result.fixed = bool(result.changes)
    if result.fixed:
        logger.info("Repaired %d duplicate ids", len(result.changes))
    return result
