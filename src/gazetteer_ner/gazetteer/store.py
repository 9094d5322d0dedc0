"""
Deduplicated, ordered gazetteer of canonical entity names.

The store is built once from a knowledge-base query result, then frozen
and persisted as a flat list. Malformed labels are logged and skipped;
they never abort a build.

Example:
    >>> store = GazetteerStore.build(['"Steven Spielberg (director)"@en'])
    >>> store.entries
    ('steven spielberg',)
    >>> [p.text for p in store.to_patterns()]
    [' steven spielberg ']
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Tuple

from gazetteer_ner.errors import LabelFormatError
from gazetteer_ner.gazetteer.normalizer import normalize_label
from gazetteer_ner.models.entities import Pattern
from gazetteer_ner.storage.delimited import read_gazetteer, write_gazetteer

logger = logging.getLogger(__name__)


class GazetteerStore:
    """
    Immutable sequence of unique canonical entries.

    Attributes:
        entries: Canonical names in first-seen order
        skipped: Raw labels rejected during the build
    """

    def __init__(self, entries: Iterable[str] = (), skipped: Iterable[str] = ()):
        seen = dict.fromkeys(entries)
        self._entries: Tuple[str, ...] = tuple(seen)
        self._skipped: Tuple[str, ...] = tuple(skipped)

    @classmethod
    def build(cls, raw_labels: Iterable[str]) -> "GazetteerStore":
        """
        Normalize raw labels and collapse duplicates, keeping first-seen order.

        Args:
            raw_labels: Label strings from a knowledge-base query

        Returns:
            GazetteerStore with one entry per distinct canonical name
        """
        entries: List[str] = []
        seen = set()
        skipped: List[str] = []

        for raw in raw_labels:
            try:
                name = normalize_label(raw)
            except LabelFormatError as exc:
                logger.warning("Skipping label: %s", exc)
                skipped.append(raw)
                continue
            if name not in seen:
                seen.add(name)
                entries.append(name)

        logger.info(
            "Built gazetteer with %d entries (%d labels skipped)",
            len(entries),
            len(skipped),
        )
        return cls(entries, skipped)

    @classmethod
    def load(cls, path: Path) -> "GazetteerStore":
        """Load a previously persisted gazetteer."""
        return cls(read_gazetteer(path))

    @property
    def entries(self) -> Tuple[str, ...]:
        return self._entries

    @property
    def skipped(self) -> Tuple[str, ...]:
        return self._skipped

    def to_patterns(self) -> List[Pattern]:
        """One space-delimited pattern per entry, in gazetteer order."""
        return [Pattern.from_entry(entry) for entry in self._entries]

    def persist(self, path: Path) -> Path:
        """Write one entry per line."""
        write_gazetteer(self._entries, path)
        logger.info("Wrote %d gazetteer entries to %s", len(self._entries), path)
        return path

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __repr__(self) -> str:
        return f"GazetteerStore({len(self._entries)} entries)"


__all__ = ["GazetteerStore"]
