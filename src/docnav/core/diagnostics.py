"""Side-output channel for non-fatal notes (broken references, skipped documents)"""

import logging
from dataclasses import dataclass, field
from typing import Callable


logger = logging.getLogger(__name__)

NoteSink = Callable[[str], None]


@dataclass
class Diagnostics:
    """Collects notes in arrival order; callable so it can be passed as a NoteSink."""
    notes: list[str] = field(default_factory=list)

    def __call__(self, message: str) -> None:
        self.note(message)

    def note(self, message: str) -> None:
        logger.info(message)
        self.notes.append(message)


def discard(message: str) -> None:
    """Default sink when the caller does not collect notes."""
