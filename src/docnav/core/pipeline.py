"""Pipeline step functions: assemble navigation records and write them"""

from pathlib import Path
from typing import Optional

from docnav.core.assemble import Progress, RecordAssembler, html_page_source
from docnav.core.diagnostics import NoteSink, discard
from docnav.core.export import write_record
from docnav.core.models import OutputRecord
from docnav.core.store import MetadataStore


def run_show(
    store: MetadataStore,
    doc_id: str,
    html_dir: Path,
    root_doc: str,
    notes: NoteSink = discard,
    ) -> OutputRecord:
    """Assemble a single document. Raises MissingDocumentError for unknown ids."""
    assembler = RecordAssembler(store, html_page_source(html_dir), root_doc=root_doc, notes=notes)
    return assembler.assemble(doc_id)


def run_build(
    store: MetadataStore,
    html_dir: Path,
    output_dir: Path,
    root_doc: str,
    ext: str = 'fjson',
    notes: NoteSink = discard,
    progress: Optional[Progress] = None,
    ) -> list[tuple[str, Path]]:
    """Assemble every document in the store and write its record. Returns (doc_id, path) pairs.

    Documents skipped by the assembler, or whose id escapes output_dir, are
    reported to notes and produce no file.
    """
    assembler = RecordAssembler(store, html_page_source(html_dir), root_doc=root_doc, notes=notes)
    results = []
    for doc_id, record in assembler.assemble_all(progress=progress).items():
        try:
            results.append((doc_id, write_record(doc_id, record, output_dir, ext)))
        except ValueError as e:
            notes(f'Skipped document "{doc_id}": {e}')
    return results
