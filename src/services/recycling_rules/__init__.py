"""
Recycling rules extraction.

Builds structured, location-specific recycling rules out of raw web search
snippets using the static material taxonomy in ``constants.materials``.
"""

from services.recycling_rules.models import MaterialTally
from services.recycling_rules.orchestrator import (
    extract_rules,
    get_rules,
    list_supported_materials,
    validate_zip_code,
)
from services.recycling_rules.snippet_scanner import (
    has_rejection_context,
    is_always_not_accepted,
    scan_search_result,
)
from services.recycling_rules.notes import extract_care_note, record_care_note
from services.recycling_rules.aggregation import (
    build_accepted_entries,
    build_not_accepted_entries,
    confidence_for,
    deduplicate_materials,
    finalize_notes,
)
from services.recycling_rules.location import (
    location_from_title,
    location_from_url,
    resolve_location,
)
from services.recycling_rules.tips import extract_tips
from services.recycling_rules.sources import deduplicate_sources

__all__ = [
    # Data models
    "MaterialTally",

    # Main API functions
    "get_rules",
    "extract_rules",
    "list_supported_materials",
    "validate_zip_code",

    # Snippet scanning
    "scan_search_result",
    "has_rejection_context",
    "is_always_not_accepted",
    "extract_care_note",
    "record_care_note",

    # Aggregation
    "confidence_for",
    "build_accepted_entries",
    "build_not_accepted_entries",
    "deduplicate_materials",
    "finalize_notes",

    # Location, tips, sources
    "resolve_location",
    "location_from_title",
    "location_from_url",
    "extract_tips",
    "deduplicate_sources",
]
