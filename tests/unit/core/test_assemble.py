"""Unit tests for core/assemble.py"""

import pytest

from docnav.core.assemble import RecordAssembler, extract_body, html_page_source
from docnav.core.diagnostics import Diagnostics
from docnav.core.models import NavLink
from docnav.core.store import MetadataStore, MissingDocumentError


def _page(doc_id: str) -> str:
    return (
        f"<html><head><title>{doc_id}</title></head>"
        f"<body><div class=\"section\"><p>Body of {doc_id}</p></div></body></html>"
    )


@pytest.fixture(name="notes")
def notes_fixture():
    return Diagnostics()


@pytest.fixture(name="assembler")
def assembler_fixture(book_store, notes):
    return RecordAssembler(book_store, _page, notes=notes)


# --- extract_body ---

def test_extract_body_returns_inner_html():
    """Only the body's contents are kept; page chrome is dropped."""
    body = extract_body(_page("ch1"))
    assert body == '<div class="section"><p>Body of ch1</p></div>'
    assert "<title>" not in body


def test_extract_body_empty_body():
    assert extract_body("<html><body></body></html>") == ""


def test_extract_body_without_body_element():
    with pytest.raises(ValueError, match="no <body>"):
        extract_body("<p>fragment</p>")


def test_html_page_source_reads_nested_ids(tmp_path):
    (tmp_path / "book").mkdir()
    (tmp_path / "book" / "intro.html").write_text(_page("book/intro"), encoding="utf-8")
    assert "Body of book/intro" in html_page_source(tmp_path)("book/intro")


# --- assemble ---

def test_assemble_record(assembler):
    record = assembler.assemble("ch1")
    assert record.title == "Ch1"
    assert record.current_page_name == "ch1"
    assert [n.fragment for n in record.toc] == ["getting-started", "usage"]
    assert record.next == NavLink(title="Ch2", link="ch2.html")
    assert record.prev == NavLink(title="Intro", link="intro.html")
    assert record.rellinks == [record.next, record.prev]
    assert "Body of ch1" in record.body


def test_assemble_last_page(assembler):
    record = assembler.assemble("ch2")
    assert record.next is None
    assert record.rellinks == [None, record.prev]
    assert record.toc == []


def test_assemble_unknown_document_is_fatal(assembler):
    with pytest.raises(MissingDocumentError):
        assembler.assemble("nope")


# --- assemble_all ---

def test_assemble_all_covers_store(assembler, book_store):
    records = assembler.assemble_all()
    assert list(records) == list(book_store)


def test_assemble_all_reports_progress(assembler):
    calls = []
    assembler.assemble_all(progress=lambda done, total: calls.append((done, total)))
    assert calls == [(1, 4), (2, 4), (3, 4), (4, 4)]


def test_assemble_all_skips_failing_document(book_store, notes):
    """A page that cannot be read is noted and skipped; the batch continues."""
    def pages(doc_id):
        if doc_id == "intro":
            raise FileNotFoundError("intro.html")
        return _page(doc_id)

    records = RecordAssembler(book_store, pages, notes=notes).assemble_all()
    assert "intro" not in records
    assert set(records) == {"index", "ch1", "ch2"}
    assert len(notes.notes) == 1
    assert notes.notes[0].startswith('Skipped document "intro"')


def test_assemble_all_notes_broken_references(entry, notes):
    """Broken neighbors are absent in the record and noted; nothing raises."""
    store = MetadataStore([
        entry("parent", listings=[["here", "gone"]]),
        entry("here", parent="parent"),
    ])
    records = RecordAssembler(store, _page, notes=notes).assemble_all()
    assert records["here"].next is None
    assert records["here"].prev == NavLink(title="Parent", link="parent.html")
    assert notes.notes == ['Could not find entry for document "gone"']


def test_assemble_all_does_not_alter_records(book_store):
    """Progress and notes are observational only."""
    quiet = RecordAssembler(book_store, _page).assemble_all()
    observed = RecordAssembler(book_store, _page, notes=Diagnostics()).assemble_all(progress=lambda d, t: None)
    assert quiet == observed
