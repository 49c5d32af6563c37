"""Export: serialize OutputRecords and write one JSON file per document"""

import json
from pathlib import Path

from docnav.core.models import OutputRecord


RECORD_KEYS = ("title", "current_page_name", "toc", "next", "prev", "rellinks", "body")


def build_record_json(record: OutputRecord) -> dict:
    """Return the record as a plain dict in the published key order."""
    data = record.model_dump(mode='json')
    return {key: data[key] for key in RECORD_KEYS}


def record_path(doc_id: str, output_dir: Path, ext: str = 'fjson') -> Path:
    """Return output_dir/<doc_id>.<ext>; raises ValueError if the id escapes output_dir."""
    dest = Path(output_dir) / f"{doc_id}.{ext}"
    if not dest.resolve().is_relative_to(Path(output_dir).resolve()):
        raise ValueError(f'document id "{doc_id}" resolves outside {output_dir}')
    return dest


def write_record(doc_id: str, record: OutputRecord, output_dir: Path, ext: str = 'fjson') -> Path:
    """Write record to output_dir/<doc_id>.<ext>, mirroring the id's directory structure."""
    dest = record_path(doc_id, output_dir, ext)
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_text(json.dumps(build_record_json(record), indent=2), encoding='utf-8')
    return dest
