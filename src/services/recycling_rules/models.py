"""
Working structures for the recycling rules pipeline.

The tally is created fresh for every batch of search results and thrown
away once the rules record has been assembled.
"""

from dataclasses import dataclass, field
from typing import Dict, Set


@dataclass
class MaterialTally:
    """Per-material source URLs and care notes collected across one batch."""
    accepted_sources: Dict[str, Set[str]] = field(default_factory=dict)
    not_accepted_sources: Dict[str, Set[str]] = field(default_factory=dict)
    notes: Dict[str, str] = field(default_factory=dict)

    def materials_found(self) -> int:
        return len(self.accepted_sources) + len(self.not_accepted_sources)
