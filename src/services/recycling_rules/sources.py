from typing import List, Optional, Sequence, Set
from urllib.parse import urlsplit

from models import SearchResult, Source


def deduplicate_sources(results: Sequence[SearchResult]) -> List[Source]:
    """One citation per hostname; unparseable URLs are always kept."""
    seen: Set[str] = set()
    sources: List[Source] = []

    for result in results:
        hostname = _hostname(result.url)
        if hostname is not None:
            if hostname in seen:
                continue
            seen.add(hostname)
        sources.append(Source(title=result.title, url=result.url))

    return sources


def _hostname(url: str) -> Optional[str]:
    try:
        return urlsplit(url).hostname
    except ValueError:
        return None
