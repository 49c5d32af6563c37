"""Per-document record assembly: title, TOC, navigation links and rendered body"""

import logging
from pathlib import Path
from typing import Callable, Optional

from bs4 import BeautifulSoup

from docnav.core.diagnostics import NoteSink, discard
from docnav.core.models import OutputRecord
from docnav.core.navigation import ROOT_DOC, NavigationResolver
from docnav.core.store import MetadataStore
from docnav.core.toc import build_toc


logger = logging.getLogger(__name__)

PageSource = Callable[[str], str]
Progress = Callable[[int, int], None]


def html_page_source(html_dir: Path) -> PageSource:
    """Return a PageSource reading <html_dir>/<doc_id>.html."""
    def read(doc_id: str) -> str:
        return (Path(html_dir) / f"{doc_id}.html").read_text(encoding='utf-8')
    return read


def extract_body(html: str) -> str:
    """Return the inner HTML of the page's <body> element."""
    body = BeautifulSoup(html, 'html.parser').body
    if body is None:
        raise ValueError("rendered page has no <body> element")
    return body.decode_contents()


class RecordAssembler:
    """Build OutputRecords for documents of a MetadataStore."""

    def __init__(
        self,
        store: MetadataStore,
        pages: PageSource,
        root_doc: str = ROOT_DOC,
        notes: NoteSink = discard,
        ):
        self.store = store
        self.pages = pages
        self.notes = notes
        self.resolver = NavigationResolver(store, root_doc=root_doc, notes=notes)

    def assemble(self, doc_id: str) -> OutputRecord:
        """Assemble one record. Raises MissingDocumentError when doc_id is not in the store."""
        entry = self.store.require(doc_id)
        nxt, prev = self.resolver.resolve(doc_id)
        return OutputRecord(
            title=entry.title,
            current_page_name=doc_id,
            toc=build_toc(entry, entry.headings),
            next=nxt,
            prev=prev,
            body=extract_body(self.pages(doc_id)),
        )

    def assemble_all(self, progress: Optional[Progress] = None) -> dict[str, OutputRecord]:
        """Assemble every document in store order.

        A document whose page cannot be read or has no body is noted and
        skipped; the rest of the batch continues. progress(done, total) is
        called once per document, skipped ones included.
        """
        total = len(self.store)
        records: dict[str, OutputRecord] = {}
        for done, doc_id in enumerate(self.store, start=1):
            try:
                records[doc_id] = self.assemble(doc_id)
                logger.debug("Assembled %s", doc_id)
            except (OSError, ValueError) as e:
                self.notes(f'Skipped document "{doc_id}": {e}')
            if progress:
                progress(done, total)
        return records
