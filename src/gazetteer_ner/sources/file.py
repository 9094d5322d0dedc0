"""
File-backed label source, one raw label per line.

Useful offline or for replaying a saved knowledge-base query result.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List

from gazetteer_ner.errors import LabelSourceError
from gazetteer_ner.sources.base import LabelSource

logger = logging.getLogger(__name__)


class FileLabelSource(LabelSource):
    """Read raw labels from a UTF-8 text file, skipping blank lines."""

    name = "file"

    def __init__(self, config: Dict[str, Any]) -> None:
        path = config.get("path")
        if not path:
            raise ValueError("File label source requires a 'path'")
        self.path = Path(path)

    def fetch_labels(self) -> List[str]:
        try:
            lines = self.path.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as exc:
            raise LabelSourceError(f"Cannot read labels from {self.path}: {exc}") from exc
        labels = [line.strip() for line in lines if line.strip()]
        logger.info("Read %d label(s) from %s", len(labels), self.path)
        return labels


__all__ = ["FileLabelSource"]
