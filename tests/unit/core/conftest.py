"""Shared fixtures for core unit tests"""

import pytest

from docnav.core.models import Heading, MetaEntry
from docnav.core.store import MetadataStore


def _entry(doc_id, parent=None, listings=(), headings=(), title=None) -> MetaEntry:
    return MetaEntry(
        id=doc_id,
        title=title or doc_id.title(),
        url=f"{doc_id}.html",
        parent=parent,
        sub_listings=listings,
        headings=headings,
    )


@pytest.fixture(name="entry")
def entry_fixture():
    """Factory for MetaEntry records with url '<id>.html' and title '<Id>'."""
    return _entry


@pytest.fixture(name="book_store")
def book_store_fixture():
    """index -> intro -> [ch1, ch2]; ch1 carries a two-level heading tree."""
    return MetadataStore([
        _entry("index", listings=[["intro"]]),
        _entry("intro", parent="index", listings=[["ch1", "ch2"]]),
        _entry("ch1", parent="intro", headings=[
            Heading(text="Getting Started", children=[Heading(text="Install it!")]),
            Heading(text="Usage"),
        ]),
        _entry("ch2", parent="intro"),
    ])


@pytest.fixture(name="flat_store")
def flat_store_fixture():
    """A guide parent whose single listing holds four pages."""
    return MetadataStore([
        _entry("guide", listings=[["a", "b", "c", "d"]]),
        *(_entry(doc_id, parent="guide") for doc_id in "abcd"),
    ])
