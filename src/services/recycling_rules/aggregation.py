"""
Confidence scoring, ordering and deduplication of matched materials.
"""

import logging
from typing import List, Mapping, Set, Tuple

from config import settings
from constants import (
    MULTI_SOURCE_DEFAULT_NOTE,
    NOT_ACCEPTED_DEFAULT_NOTE,
    PLACEHOLDER_MATERIAL,
    PLACEHOLDER_NOTE,
    SINGLE_SOURCE_DEFAULT_NOTE,
    SINGLE_SOURCE_NOTE,
)
from models import Confidence, MaterialEntry

logger = logging.getLogger(__name__)


def confidence_for(source_count: int) -> Confidence:
    if source_count >= settings.multi_source_threshold:
        return Confidence.HIGH
    return Confidence.MEDIUM


def build_accepted_entries(
    sources_by_material: Mapping[str, Set[str]],
    notes: Mapping[str, str],
) -> List[MaterialEntry]:
    """Multi-source materials first, then single-source ones alphabetically."""
    entries = [_entry(material, sources, notes) for material, sources in sources_by_material.items()]

    multi_source = sorted(
        (e for e in entries if e.confidence == Confidence.HIGH),
        key=_by_source_count_then_name,
    )
    single_source = sorted(
        (e for e in entries if e.confidence != Confidence.HIGH),
        key=lambda e: e.material,
    )
    for entry in single_source:
        entry.notes = entry.notes or SINGLE_SOURCE_NOTE

    return multi_source + single_source


def build_not_accepted_entries(
    sources_by_material: Mapping[str, Set[str]],
    notes: Mapping[str, str],
) -> List[MaterialEntry]:
    entries = [_entry(material, sources, notes) for material, sources in sources_by_material.items()]
    return sorted(entries, key=_by_source_count_then_name)


def deduplicate_materials(entries: List[MaterialEntry]) -> List[MaterialEntry]:
    """
    Drop materials whose name overlaps a more specific one already kept.

    "Glass" is dropped when "Glass Bottles" is present: longer names are
    visited first, and a candidate goes if any of its words longer than three
    characters appears inside a retained name.
    """
    retained: List[str] = []
    kept: List[MaterialEntry] = []

    for entry in sorted(entries, key=lambda e: len(e.material), reverse=True):
        words = entry.material.lower().split(" ")
        overlap = _find_overlap(words, retained)
        if overlap is not None:
            logger.debug(f"Dropping '{entry.material}' as duplicate of '{overlap}'")
            continue
        retained.append(entry.material.lower())
        kept.append(entry)

    return sorted(kept, key=lambda e: e.source_count, reverse=True)


def finalize_notes(
    accepted: List[MaterialEntry],
    not_accepted: List[MaterialEntry],
) -> Tuple[List[MaterialEntry], List[MaterialEntry]]:
    """Fill blank notes with defaults and substitute the empty-result placeholder."""
    for entry in accepted:
        if not entry.notes:
            entry.notes = (
                MULTI_SOURCE_DEFAULT_NOTE
                if entry.confidence == Confidence.HIGH
                else SINGLE_SOURCE_DEFAULT_NOTE
            )
    for entry in not_accepted:
        entry.notes = entry.notes or NOT_ACCEPTED_DEFAULT_NOTE

    if not accepted:
        accepted = [
            MaterialEntry(
                material=PLACEHOLDER_MATERIAL,
                notes=PLACEHOLDER_NOTE,
                confidence=Confidence.LOW,
                source_count=0,
            )
        ]
    return accepted, not_accepted


def _entry(material: str, sources: Set[str], notes: Mapping[str, str]) -> MaterialEntry:
    return MaterialEntry(
        material=material,
        notes=notes.get(material) or None,
        confidence=confidence_for(len(sources)),
        source_count=len(sources),
    )


def _by_source_count_then_name(entry: MaterialEntry) -> Tuple[int, str]:
    return -entry.source_count, entry.material


def _find_overlap(words: List[str], retained: List[str]) -> str | None:
    for word in words:
        if len(word) <= 3:
            continue
        for name in retained:
            if word in name:
                return name
    return None
