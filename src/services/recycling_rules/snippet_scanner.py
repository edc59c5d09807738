"""
Scanning of search result snippets against the material taxonomy.

Each snippet is matched against every canonical material; the first synonym
found wins for that material. Not-accepted materials additionally need
rejection language in the snippet unless they are universally excluded.
"""

import logging
from typing import Iterable, Mapping, Optional, Tuple

from constants import (
    ACCEPTED_MATERIALS,
    ALWAYS_NOT_ACCEPTED,
    NOT_ACCEPTED_MATERIALS,
    REJECTION_MARKERS,
)
from models import SearchResult
from services.recycling_rules.models import MaterialTally
from services.recycling_rules.notes import record_care_note

logger = logging.getLogger(__name__)


def scan_search_result(result: SearchResult, tally: MaterialTally) -> None:
    """Record every taxonomy material mentioned by one search result."""
    text = (result.snippet or "").lower()
    url = result.url

    for material, term in _matched_materials(text, ACCEPTED_MATERIALS):
        tally.accepted_sources.setdefault(material, set()).add(url)
        record_care_note(tally.notes, material, text, term)

    rejection_context = has_rejection_context(text)
    for material, term in _matched_materials(text, NOT_ACCEPTED_MATERIALS):
        if not rejection_context and not is_always_not_accepted(term):
            logger.debug(f"Skipping '{material}' from {url}: no rejection context")
            continue
        tally.not_accepted_sources.setdefault(material, set()).add(url)
        record_care_note(tally.notes, material, text, term)


def has_rejection_context(text: str) -> bool:
    return any(marker in text for marker in REJECTION_MARKERS)


def is_always_not_accepted(term: str) -> bool:
    return any(excluded in term for excluded in ALWAYS_NOT_ACCEPTED)


def _matched_materials(
    text: str,
    taxonomy: Mapping[str, Tuple[str, ...]],
) -> Iterable[Tuple[str, str]]:
    for material, synonyms in taxonomy.items():
        term = _first_synonym_in(text, synonyms)
        if term is not None:
            yield material, term


def _first_synonym_in(text: str, synonyms: Iterable[str]) -> Optional[str]:
    for synonym in synonyms:
        if synonym in text:
            return synonym
    return None
