"""CLI command implementations"""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from docnav.config import Settings, load_config
from docnav.core.diagnostics import Diagnostics
from docnav.core.export import build_record_json
from docnav.core.pipeline import run_build, run_show
from docnav.core.store import MetadataStore, MissingDocumentError, load_store


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _echo_notes(diagnostics: Diagnostics, err: bool = False) -> None:
    for message in diagnostics.notes:
        typer.echo(f"  note: {message}", err=err)


def _load(store_path: str) -> MetadataStore:
    """Load the metadata store with standard CLI error handling."""
    try:
        return load_store(Path(store_path))
    except ValueError as e:
        _fail(str(e))
    except OSError as e:
        _fail(f"Could not read metadata store {store_path}", e)


def build_cmd(
    store: Annotated[Optional[str], typer.Argument(help="Metadata store dump (JSON or YAML)")] = None,
    html: Annotated[Optional[str], typer.Option("--html-dir", help="Directory of rendered pages")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    root: Annotated[Optional[str], typer.Option("--root-doc", help="Id of the root index document")] = None,
    ):
    """Assemble navigation records for every document and write them to the output dir."""
    settings = _settings(overrides={
        "store_path": store, "html_dir": html, "output_dir": out, "root_doc": root,
    })
    metas = _load(settings.store_path)
    output_dir = Path(settings.output_dir)
    diagnostics = Diagnostics()

    try:
        with typer.progressbar(length=len(metas), label="Assembling") as bar:
            results = run_build(
                metas, Path(settings.html_dir), output_dir, settings.root_doc, settings.output_ext,
                notes=diagnostics, progress=lambda done, total: bar.update(1),
            )
    except OSError as e:
        _fail("Build failed", e)

    _echo_notes(diagnostics)
    typer.echo(f"Wrote {len(results)} record(s) to {output_dir}/")


def show_cmd(
    doc_id: Annotated[str, typer.Argument(help="Document id to assemble")],
    store: Annotated[Optional[str], typer.Argument(help="Metadata store dump (JSON or YAML)")] = None,
    html: Annotated[Optional[str], typer.Option("--html-dir", help="Directory of rendered pages")] = None,
    root: Annotated[Optional[str], typer.Option("--root-doc", help="Id of the root index document")] = None,
    ):
    """Assemble a single document and print its record as JSON."""
    settings = _settings(overrides={"store_path": store, "html_dir": html, "root_doc": root})
    metas = _load(settings.store_path)
    diagnostics = Diagnostics()

    try:
        record = run_show(metas, doc_id, Path(settings.html_dir), settings.root_doc, notes=diagnostics)
    except MissingDocumentError as e:
        _fail(str(e))
    except (OSError, ValueError) as e:
        _fail(f'Could not assemble "{doc_id}"', e)

    _echo_notes(diagnostics, err=True)  # stdout carries only the JSON record
    typer.echo(json.dumps(build_record_json(record), indent=2))
