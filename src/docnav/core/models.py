"""Value records for parsed document metadata and the derived navigation output"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, computed_field


class Heading(BaseModel):
    """A heading node of a parsed document; children are its nested sub-headings."""
    model_config = ConfigDict(frozen=True)

    text: str
    children: tuple["Heading", ...] = ()


class MetaEntry(BaseModel):
    """One parsed document as recorded by the parsing stage. Read-only here."""
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    url: str
    parent: Optional[str] = None                    # None or "" for top-level documents
    sub_listings: tuple[tuple[str, ...], ...] = ()  # ordered child id listings
    headings: tuple[Heading, ...] = ()

    @property
    def single_listing(self) -> Optional[tuple[str, ...]]:
        """The sub-document listing when there is exactly one, else None."""
        if len(self.sub_listings) != 1:
            return None
        return self.sub_listings[0]


class NavLink(BaseModel):
    title: str
    link: str


class TocNode(BaseModel):
    url:      str
    page:     str
    fragment: str
    title:    str
    children: list["TocNode"] = []


class OutputRecord(BaseModel):
    """Per-document navigation record consumed by the templating/search layer."""
    title: str
    current_page_name: str
    toc: list[TocNode] = []
    next: Optional[NavLink] = None
    prev: Optional[NavLink] = None
    body: str = ""

    @computed_field
    @property
    def rellinks(self) -> list[Optional[NavLink]]:
        return [self.next, self.prev]
