"""Read-only metadata store: document id -> MetaEntry, loaded from the parsing stage's dump"""

from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from docnav.core.models import MetaEntry


class MissingDocumentError(LookupError):
    """The document being navigated or assembled has no entry in the store."""

    def __init__(self, doc_id: str):
        super().__init__(f'Could not find entry for document "{doc_id}"')
        self.doc_id = doc_id


class MetadataStore(Mapping):
    """Immutable lookup table of MetaEntry records keyed by document id."""

    def __init__(self, entries: Iterable[MetaEntry]):
        table: dict[str, MetaEntry] = {}
        for entry in entries:
            if entry.id in table:
                raise ValueError(f'Duplicate document id "{entry.id}"')
            table[entry.id] = entry
        self._entries = MappingProxyType(table)

    def __getitem__(self, doc_id: str) -> MetaEntry:
        return self._entries[doc_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def require(self, doc_id: str) -> MetaEntry:
        """Return the entry for doc_id or raise MissingDocumentError."""
        entry = self._entries.get(doc_id)
        if entry is None:
            raise MissingDocumentError(doc_id)
        return entry


def _entries_from_data(data: Any) -> list[MetaEntry]:
    """Accept a list of entries or a mapping of id -> entry (the key fills a missing id)."""
    if isinstance(data, Mapping):
        items = []
        for doc_id, fields in data.items():
            if fields is not None and not isinstance(fields, Mapping):
                raise ValueError(f'entry "{doc_id}" must be a mapping, got {type(fields).__name__}')
            items.append({"id": doc_id, **(fields or {})})
    elif isinstance(data, list):
        items = data
    else:
        raise ValueError(f"expected a list or mapping of entries, got {type(data).__name__}")
    return [MetaEntry.model_validate(item) for item in items]


def load_store(path: Path) -> MetadataStore:
    """Load a MetadataStore from a JSON or YAML dump."""
    try:
        data: Optional[Any] = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid metadata store {path}: {e}") from e
    try:
        return MetadataStore(_entries_from_data(data or []))
    except (ValidationError, ValueError) as e:
        raise ValueError(f"Invalid metadata store {path}: {e}") from e
