from constants.materials import (
    ACCEPTED_MATERIALS,
    NOT_ACCEPTED_MATERIALS,
    REJECTION_MARKERS,
    ALWAYS_NOT_ACCEPTED,
)
from constants.text_patterns import (
    CARE_INSTRUCTIONS,
    TIP_PATTERNS,
    COMPILED_TIP_PATTERNS,
    TITLE_CITY_STATE_PATTERN,
    TITLE_PLACE_PATTERN,
    URL_PLACE_PATTERN,
    CAMEL_CASE_BOUNDARY,
    CITY_NAME_CORRECTIONS,
    ZIP_CODE_PATTERN,
    SINGLE_SOURCE_NOTE,
    MULTI_SOURCE_DEFAULT_NOTE,
    SINGLE_SOURCE_DEFAULT_NOTE,
    NOT_ACCEPTED_DEFAULT_NOTE,
    PLACEHOLDER_MATERIAL,
    PLACEHOLDER_NOTE,
    NOT_ACCEPTED_REASON,
    UNKNOWN_MATERIAL_REASON,
)

__all__ = [
    "ACCEPTED_MATERIALS",
    "NOT_ACCEPTED_MATERIALS",
    "REJECTION_MARKERS",
    "ALWAYS_NOT_ACCEPTED",
    "CARE_INSTRUCTIONS",
    "TIP_PATTERNS",
    "COMPILED_TIP_PATTERNS",
    "TITLE_CITY_STATE_PATTERN",
    "TITLE_PLACE_PATTERN",
    "URL_PLACE_PATTERN",
    "CAMEL_CASE_BOUNDARY",
    "CITY_NAME_CORRECTIONS",
    "ZIP_CODE_PATTERN",
    "SINGLE_SOURCE_NOTE",
    "MULTI_SOURCE_DEFAULT_NOTE",
    "SINGLE_SOURCE_DEFAULT_NOTE",
    "NOT_ACCEPTED_DEFAULT_NOTE",
    "PLACEHOLDER_MATERIAL",
    "PLACEHOLDER_NOTE",
    "NOT_ACCEPTED_REASON",
    "UNKNOWN_MATERIAL_REASON",
]
