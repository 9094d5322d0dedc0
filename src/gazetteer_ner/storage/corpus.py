"""
Corpus loading.

Reads a directory of plain-text files into immutable Documents. The file
name is the document id; files are returned in sorted name order so the
corpus order is the same on every run.
"""

import logging
from pathlib import Path
from typing import List

from gazetteer_ner.errors import CorpusLoadError
from gazetteer_ner.models.entities import Document

logger = logging.getLogger(__name__)


def load_corpus(directory: Path, glob: str = "*.txt") -> List[Document]:
    """
    Load every file matching ``glob`` in ``directory``.

    Args:
        directory: Corpus directory
        glob: File name pattern

    Returns:
        Documents in sorted file-name order

    Raises:
        CorpusLoadError: If the directory is missing or a file cannot be
            decoded as UTF-8
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise CorpusLoadError(f"Corpus directory not found: {directory}")

    documents: List[Document] = []
    for path in sorted(p for p in directory.glob(glob) if p.is_file()):
        try:
            text = path.read_text(encoding="utf-8")
        except (UnicodeDecodeError, OSError) as exc:
            raise CorpusLoadError(f"Cannot read corpus file {path}: {exc}") from exc
        documents.append(Document(id=path.name, text=text))

    if not documents:
        logger.warning("No files matching '%s' in %s", glob, directory)
    else:
        logger.info("Loaded %d documents from %s", len(documents), directory)
    return documents


__all__ = ["load_corpus"]
