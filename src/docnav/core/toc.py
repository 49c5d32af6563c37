"""Table-of-contents tree built from a document's heading hierarchy"""

from collections.abc import Sequence
from typing import Optional

from docnav.core.models import Heading, MetaEntry, TocNode
from docnav.core.utils.slug import slugify


def page_name(url: str) -> str:
    """Return the page id for an output url (url without its trailing '.html')."""
    head, sep, _ = url.rpartition('.html')
    return head if sep else url


def build_toc(entry: MetaEntry, headings: Optional[Sequence[Heading]]) -> list[TocNode]:
    """Convert headings into TocNodes anchored on entry.url, in document order."""
    if not headings:
        return []

    page = page_name(entry.url)
    toc = []
    for heading in headings:
        fragment = slugify(heading.text)
        toc.append(TocNode(
            url=f"{entry.url}#{fragment}",
            page=page,
            fragment=fragment,
            title=heading.text,
            children=build_toc(entry, heading.children),
        ))
    return toc
