import logging
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from constants import (
    ACCEPTED_MATERIALS,
    NOT_ACCEPTED_MATERIALS,
    NOT_ACCEPTED_REASON,
    UNKNOWN_MATERIAL_REASON,
)
from models import (
    Comparison,
    ComparisonSummary,
    DetectedItem,
    ItemComparison,
    MaterialComparison,
    MaterialEntry,
    MaterialStatus,
    OverallStatus,
    RecyclingRules,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VocabularyMatch:
    specificity: int = 0
    term: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.term is not None


def compare_materials(
    detected_items: Optional[Iterable[Union[DetectedItem, Mapping]]],
    rules: Union[RecyclingRules, Mapping],
) -> Comparison:
    """Classify each detected item against the location rules and the global taxonomy."""
    rules = rules if isinstance(rules, RecyclingRules) else RecyclingRules.model_validate(rules)
    items = [
        i if isinstance(i, DetectedItem) else DetectedItem.model_validate(i)
        for i in (detected_items or [])
    ]

    accepted_vocabulary = build_vocabulary(ACCEPTED_MATERIALS, rules.accepted)
    not_accepted_vocabulary = build_vocabulary(NOT_ACCEPTED_MATERIALS, rules.not_accepted)

    compared = [
        compare_item(item, rules, accepted_vocabulary, not_accepted_vocabulary)
        for item in items
    ]

    summary = summarize(compared)
    return Comparison(
        items=compared,
        location=rules.location or "Unknown",
        summary=summary,
        tips=list(rules.tips),
        can_recycle=can_recycle(summary),
    )


def can_recycle(summary: ComparisonSummary) -> bool:
    """Whole batch verdict: nothing rejected and at least one item recyclable."""
    return summary.not_recyclable == 0 and summary.recyclable > 0


def build_vocabulary(
    taxonomy: Mapping[str, Sequence[str]],
    location_entries: Sequence[MaterialEntry],
) -> Tuple[str, ...]:
    words = {}
    for canonical, synonyms in taxonomy.items():
        words.setdefault(canonical.lower(), None)
        for synonym in synonyms:
            words.setdefault(synonym.lower(), None)
    for entry in location_entries:
        words.setdefault(entry.material.lower(), None)
    return tuple(words)


def compare_item(
    item: DetectedItem,
    rules: RecyclingRules,
    accepted_vocabulary: Sequence[str],
    not_accepted_vocabulary: Sequence[str],
) -> ItemComparison:
    results = [
        classify_material(item.name, material, rules, accepted_vocabulary, not_accepted_vocabulary)
        for material in item.materials
    ]
    return ItemComparison(
        name=item.name,
        confidence=item.confidence,
        preparation=item.preparation,
        overall_status=_overall_status(results),
        materials=results,
    )


def classify_material(
    item_name: str,
    material: str,
    rules: RecyclingRules,
    accepted_vocabulary: Sequence[str],
    not_accepted_vocabulary: Sequence[str],
) -> MaterialComparison:
    name_lower = item_name.lower()
    material_lower = material.lower()
    terms = [t for t in (name_lower, material_lower) if t]

    accepted = best_vocabulary_match(terms, accepted_vocabulary)
    not_accepted = best_vocabulary_match(terms, not_accepted_vocabulary)

    # Ties go to accepted.
    if accepted.found and not_accepted.found:
        if accepted.specificity >= not_accepted.specificity:
            not_accepted = VocabularyMatch()
        else:
            accepted = VocabularyMatch()

    if not_accepted.found:
        rule = _find_rule(rules.not_accepted, [name_lower, material_lower])
        logger.debug(f"'{material}' of '{item_name}' not accepted via '{not_accepted.term}'")
        return MaterialComparison(
            material=material,
            status=MaterialStatus.NOT_RECYCLABLE,
            recyclable=False,
            reason=(rule.notes if rule else None) or NOT_ACCEPTED_REASON,
        )

    if accepted.found:
        rule = _find_rule(rules.accepted, [accepted.term])
        logger.debug(f"'{material}' of '{item_name}' accepted via '{accepted.term}'")
        return MaterialComparison(
            material=material,
            status=MaterialStatus.RECYCLABLE,
            recyclable=True,
            notes=(rule.notes if rule else None) or None,
        )

    return MaterialComparison(
        material=material,
        status=MaterialStatus.UNKNOWN,
        recyclable="unknown",
        reason=UNKNOWN_MATERIAL_REASON,
    )


def best_vocabulary_match(terms: Sequence[str], vocabulary: Sequence[str]) -> VocabularyMatch:
    """
    Most specific overlap between any term and any vocabulary word.

    Specificity is the length of the shorter string of an overlapping pair;
    only a strictly higher specificity replaces the current best.
    """
    best = VocabularyMatch()
    for candidate in vocabulary:
        for term in terms:
            if term in candidate or candidate in term:
                specificity = min(len(term), len(candidate))
                if specificity > best.specificity:
                    best = VocabularyMatch(specificity=specificity, term=term)
    return best


def summarize(items: Sequence[ItemComparison]) -> ComparisonSummary:
    statuses = [i.overall_status for i in items]
    return ComparisonSummary(
        recyclable=statuses.count(OverallStatus.RECYCLABLE),
        not_recyclable=statuses.count(OverallStatus.NOT_RECYCLABLE),
        unknown=statuses.count(OverallStatus.CHECK_LOCALLY),
        total=len(items),
    )


def _overall_status(results: List[MaterialComparison]) -> OverallStatus:
    statuses = {r.status for r in results}
    if MaterialStatus.NOT_RECYCLABLE in statuses:
        return OverallStatus.NOT_RECYCLABLE
    if MaterialStatus.RECYCLABLE in statuses:
        return OverallStatus.RECYCLABLE
    if MaterialStatus.UNKNOWN in statuses:
        return OverallStatus.CHECK_LOCALLY
    # TODO: product review of the optimistic default for items with no materials
    return OverallStatus.RECYCLABLE


def _find_rule(entries: Sequence[MaterialEntry], terms: Sequence[str]) -> Optional[MaterialEntry]:
    for entry in entries:
        name = entry.material.lower()
        for term in terms:
            if term and (term in name or name in term):
                return entry
    return None
