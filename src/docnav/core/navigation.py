"""Next/previous link resolution over the document hierarchy.

Documents form a forest: each entry points at its parent by id and a parent
orders its children in a sub-document listing. Next/prev thread through that
forest:

  - from the root index (or its sole top-level section) "next" descends into
    the first real chapter,
  - otherwise "next" and "prev" step through the parent's listing,
  - "prev" of the first child climbs to the parent itself.

Sibling order only exists when the parent has exactly one listing. Anything
else (no parent, missing parent, several listings, child not listed) yields
no link. Missing entries are reported to the notes sink and never raised,
except for the document being navigated, which must exist.
"""

import logging
from typing import NamedTuple, Optional

from docnav.core.diagnostics import NoteSink, discard
from docnav.core.models import MetaEntry, NavLink
from docnav.core.store import MetadataStore


logger = logging.getLogger(__name__)

ROOT_DOC = "index"


class Location(NamedTuple):
    """Where a document sits in its parent's single listing."""
    listing: tuple[str, ...]
    position: int
    parent: MetaEntry


class NavigationResolver:
    """Resolve next/prev NavLinks for documents of a MetadataStore."""

    def __init__(self, store: MetadataStore, root_doc: str = ROOT_DOC, notes: NoteSink = discard):
        self.store = store
        self.root_doc = root_doc
        self.notes = notes

    def _lookup(self, doc_id: str) -> Optional[MetaEntry]:
        """Return the entry for doc_id, noting a broken reference when absent."""
        entry = self.store.get(doc_id)
        if entry is None:
            self.notes(f'Could not find entry for document "{doc_id}"')
        return entry

    def _link(self, doc_id: str) -> Optional[NavLink]:
        entry = self._lookup(doc_id)
        if entry is None:
            return None
        return NavLink(title=entry.title, link=entry.url)

    def _locate(self, entry: MetaEntry) -> Optional[Location]:
        if not entry.parent:
            return None

        parent = self._lookup(entry.parent)
        if parent is None:
            return None

        listing = parent.single_listing
        if listing is None or entry.id not in listing:
            return None
        # an id listed twice sits at its last occurrence
        position = len(listing) - 1 - listing[::-1].index(entry.id)
        return Location(listing, position, parent)

    def _first_chapter(self, entry: MetaEntry) -> Optional[str]:
        """Id that "next" jumps to from the root index or its sole section, else None."""
        if entry.id == self.root_doc:
            listing = entry.single_listing
            if listing is None or len(listing) != 1:
                return None
            section = self._lookup(listing[0])
        elif entry.parent == self.root_doc:
            root = self.store.get(self.root_doc)  # a missing root is noted by _locate
            if root is None or root.single_listing != (entry.id,):
                return None
            section = entry
        else:
            return None

        if section is None or not section.single_listing:
            return None
        return section.single_listing[0]

    def _next(self, entry: MetaEntry, location: Optional[Location]) -> Optional[NavLink]:
        chapter = self._first_chapter(entry)
        if chapter is not None:
            return self._link(chapter)

        if location is None:
            return None
        listing, position, _ = location
        if position + 1 >= len(listing):
            return None
        return self._link(listing[position + 1])

    def _prev(self, location: Optional[Location]) -> Optional[NavLink]:
        if location is None:
            return None
        listing, position, parent = location
        if position == 0:
            return NavLink(title=parent.title, link=parent.url)
        return self._link(listing[position - 1])

    def locate(self, doc_id: str) -> Optional[Location]:
        """Locate doc_id in its parent's listing. Raises MissingDocumentError for unknown ids."""
        return self._locate(self.store.require(doc_id))

    def resolve_next(self, doc_id: str) -> Optional[NavLink]:
        entry = self.store.require(doc_id)
        return self._next(entry, self._locate(entry))

    def resolve_prev(self, doc_id: str) -> Optional[NavLink]:
        return self._prev(self.locate(doc_id))

    def resolve(self, doc_id: str) -> tuple[Optional[NavLink], Optional[NavLink]]:
        """Return (next, prev) from a single parent lookup."""
        entry = self.store.require(doc_id)
        location = self._locate(entry)
        nxt, prev = self._next(entry, location), self._prev(location)
        logger.debug("Resolved %s: next=%s prev=%s", doc_id,
                     nxt.link if nxt else None, prev.link if prev else None)
        return nxt, prev
