"""Shared fixtures for recycling rules tests."""

import os
import sys
from pathlib import Path

import pytest


def ensure_src_on_path() -> None:
    root = Path(__file__).resolve().parent.parent
    for path in (root, root / "src"):
        if str(path) not in sys.path:
            sys.path.append(str(path))


ensure_src_on_path()

os.environ.setdefault("LOG_LEVEL", "DEBUG")

from models import SearchResult


@pytest.fixture
def beverly_hills_results():
    return [
        SearchResult(
            title="Recycling Rules | Beverly Hills, CA",
            url="https://www.beverlyhills.org/recycling",
            snippet=(
                "Place cardboard, glass bottles and aluminum cans in the blue bin. "
                "Flatten cardboard boxes. Plastic bags are not accepted."
            ),
        ),
        SearchResult(
            title="Curbside Recycling Guide",
            url="https://www.beverlyhills.org/curbside",
            snippet="Rinse plastic bottles and glass jars. Do not bag recyclables; place items loose.",
        ),
        SearchResult(
            title="What goes in the bin",
            url="https://recycle.example.com/guide",
            snippet="Accepted: cardboard, aluminum cans, plastic bottles. Never put batteries in the bin.",
        ),
    ]


@pytest.fixture
def make_result():
    def _make(snippet: str, url: str = "https://example.com/a", title: str = "Recycling guide") -> SearchResult:
        return SearchResult(title=title, url=url, snippet=snippet)
    return _make
