from .material_comparison import compare_materials
from .recycling_rules import extract_rules, get_rules, list_supported_materials

__all__ = [
    "compare_materials",
    "extract_rules",
    "get_rules",
    "list_supported_materials",
]
