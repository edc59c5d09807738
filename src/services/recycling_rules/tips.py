from typing import Dict, List, Sequence

from constants import COMPILED_TIP_PATTERNS
from models import SearchResult


def extract_tips(results: Sequence[SearchResult]) -> List[str]:
    found: Dict[str, None] = {}
    for result in results:
        text = result.snippet or ""
        for pattern, tip in COMPILED_TIP_PATTERNS:
            if pattern.search(text):
                found.setdefault(tip, None)
    return list(found)
