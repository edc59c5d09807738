from models.schemas import (
    Comparison,
    ComparisonSummary,
    Confidence,
    DetectedItem,
    ItemComparison,
    MaterialComparison,
    MaterialEntry,
    MaterialStatus,
    OverallStatus,
    RecyclingRules,
    RulesMeta,
    SearchResult,
    Source,
    SupportedMaterials,
)

__all__ = [
    "SearchResult",
    "Source",
    "Confidence",
    "MaterialEntry",
    "RulesMeta",
    "RecyclingRules",
    "SupportedMaterials",
    "DetectedItem",
    "MaterialStatus",
    "OverallStatus",
    "MaterialComparison",
    "ItemComparison",
    "ComparisonSummary",
    "Comparison",
]
