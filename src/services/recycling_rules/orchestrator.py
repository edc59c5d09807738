"""
Main orchestration for the recycling rules pipeline.

Turns a batch of raw search results into a RecyclingRules record:
1. Snippet scanning and care-note extraction
2. Confidence scoring and ordering
3. Deduplication of overlapping materials
4. Location, tips and source citations
"""

import logging
from typing import Iterable, List, Mapping, Union

from config import settings
from constants import ACCEPTED_MATERIALS, NOT_ACCEPTED_MATERIALS, ZIP_CODE_PATTERN
from models import MaterialEntry, RecyclingRules, RulesMeta, SearchResult, SupportedMaterials
from services.recycling_rules.aggregation import (
    build_accepted_entries,
    build_not_accepted_entries,
    deduplicate_materials,
    finalize_notes,
)
from services.recycling_rules.location import resolve_location
from services.recycling_rules.models import MaterialTally
from services.recycling_rules.snippet_scanner import scan_search_result
from services.recycling_rules.sources import deduplicate_sources
from services.recycling_rules.tips import extract_tips

logger = logging.getLogger(__name__)

SearchResultInput = Union[SearchResult, Mapping]


def get_rules(zip_code: str, search_results: Iterable[SearchResultInput] | None) -> RecyclingRules:
    """
    Build recycling rules for a ZIP code from already-fetched search results.

    An empty batch is a normal outcome: the returned record carries empty
    lists and an ``error`` message instead of raising.
    """
    results = _coerce_results(search_results)
    if not results:
        logger.warning(f"No search results supplied for ZIP {zip_code}")
        return RecyclingRules(
            location=f"ZIP {zip_code}",
            meta=RulesMeta(sources_analyzed=0, materials_found=0),
            error=settings.no_results_error,
        )
    return extract_rules(zip_code, results)


def extract_rules(zip_code: str, search_results: Iterable[SearchResultInput]) -> RecyclingRules:
    results = _coerce_results(search_results)

    tally = MaterialTally()
    for result in results:
        scan_search_result(result, tally)

    accepted = deduplicate_materials(build_accepted_entries(tally.accepted_sources, tally.notes))
    not_accepted = deduplicate_materials(build_not_accepted_entries(tally.not_accepted_sources, tally.notes))
    accepted = _exclude_rejected(accepted, not_accepted)
    accepted, not_accepted = finalize_notes(accepted, not_accepted)

    rules = RecyclingRules(
        location=resolve_location(zip_code, results),
        accepted=accepted,
        not_accepted=not_accepted,
        tips=extract_tips(results),
        sources=deduplicate_sources(results),
        meta=RulesMeta(
            sources_analyzed=len(results),
            materials_found=tally.materials_found(),
        ),
    )
    logger.info(
        f"Extracted rules for {rules.location}: {len(rules.accepted)} accepted, "
        f"{len(rules.not_accepted)} not accepted from {len(results)} results"
    )
    return rules


def validate_zip_code(zip_code: str | None) -> str:
    if not zip_code or not ZIP_CODE_PATTERN.match(zip_code):
        raise ValueError("Please provide a valid 5-digit ZIP code")
    return zip_code


def list_supported_materials() -> SupportedMaterials:
    accepted = list(ACCEPTED_MATERIALS)
    not_accepted = list(NOT_ACCEPTED_MATERIALS)
    return SupportedMaterials(
        accepted=accepted,
        not_accepted=not_accepted,
        total=len(accepted) + len(not_accepted),
    )


def _coerce_results(search_results: Iterable[SearchResultInput] | None) -> List[SearchResult]:
    return [
        r if isinstance(r, SearchResult) else SearchResult.model_validate(r)
        for r in (search_results or [])
    ]


def _exclude_rejected(
    accepted: List[MaterialEntry],
    not_accepted: List[MaterialEntry],
) -> List[MaterialEntry]:
    rejected = {e.material for e in not_accepted}
    return [e for e in accepted if e.material not in rejected]
