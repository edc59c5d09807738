import logging
from typing import Optional, Sequence

from constants import (
    CAMEL_CASE_BOUNDARY,
    CITY_NAME_CORRECTIONS,
    TITLE_CITY_STATE_PATTERN,
    TITLE_PLACE_PATTERN,
    URL_PLACE_PATTERN,
)
from models import SearchResult

logger = logging.getLogger(__name__)


def resolve_location(zip_code: str, results: Sequence[SearchResult]) -> str:
    """Best-effort place name from result titles and URLs, else the ZIP code."""
    for result in results:
        location = location_from_title(result.title) or location_from_url(result.url)
        if location:
            logger.debug(f"Resolved location '{location}' from {result.url}")
            return location
    return f"ZIP {zip_code}"


def location_from_title(title: str) -> Optional[str]:
    match = TITLE_CITY_STATE_PATTERN.search(title or "") or TITLE_PLACE_PATTERN.search(title or "")
    return match.group(1).strip() if match else None


def location_from_url(url: str) -> Optional[str]:
    match = URL_PLACE_PATTERN.search(url or "")
    if not match:
        return None

    city = match.group(1)
    corrected = CITY_NAME_CORRECTIONS.get(city.lower())
    if corrected:
        return corrected

    city = CAMEL_CASE_BOUNDARY.sub(r"\1 \2", city)
    return city[:1].upper() + city[1:]
