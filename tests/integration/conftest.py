"""Shared fixtures for integration tests: a small rendered docs tree on disk"""

import json

import pytest


METAS = [
    {"id": "index", "title": "Documentation", "url": "index.html", "parent": None,
     "sub_listings": [["intro"]]},
    {"id": "intro", "title": "Introduction", "url": "intro.html", "parent": "index",
     "sub_listings": [["book/ch1", "book/ch2"]]},
    {"id": "book/ch1", "title": "Chapter One", "url": "book/ch1.html", "parent": "intro",
     "headings": [{"text": "Chapter One", "children": [
         {"text": "Setup & Install", "children": []},
         {"text": "First Steps", "children": [{"text": "Hello, World!"}]},
     ]}]},
    {"id": "book/ch2", "title": "Chapter Two", "url": "book/ch2.html", "parent": "intro"},
]


@pytest.fixture(name="site")
def site_fixture(tmp_path, monkeypatch):
    """Write metas.json + rendered pages under tmp_path and chdir into it."""
    monkeypatch.chdir(tmp_path)
    for name in ("DOCNAV_STORE_PATH", "DOCNAV_HTML_DIR", "DOCNAV_OUTPUT_DIR", "DOCNAV_ROOT_DOC"):
        monkeypatch.delenv(name, raising=False)

    (tmp_path / "metas.json").write_text(json.dumps(METAS))
    for meta in METAS:
        page = tmp_path / "html" / f"{meta['id']}.html"
        page.parent.mkdir(parents=True, exist_ok=True)
        page.write_text(
            f"<html><head><title>{meta['title']}</title></head>"
            f"<body><h1>{meta['title']}</h1></body></html>",
            encoding="utf-8",
        )
    return tmp_path
