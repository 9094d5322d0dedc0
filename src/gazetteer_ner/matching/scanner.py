"""
Corpus-wide gazetteer scan.

Runs every pattern against every document and records the result in a
dense MatchTable: one row per document (corpus order), one column per
pattern (gazetteer order). This is O(|corpus| x |patterns|) full-text
regex searches with no indexing, and is the dominant cost of a run.

Document text is prepared once per document before matching:
whitespace runs collapse to a single space, the text is padded with one
space at each end so entities at the very start or end of a document
still sit between delimiters, and (by default) it is lower-cased to
agree with the lower-cased gazetteer.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from gazetteer_ner.matching.matcher import detect
from gazetteer_ner.models.entities import NO_MATCH, Document, MatchResult, Pattern
from gazetteer_ner.storage.delimited import DOCUMENT_ID_HEADER

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def prepare_text(text: str, lowercase: bool = True) -> str:
    """Collapse whitespace, pad with single spaces and optionally lower-case."""
    prepared = f" {_WHITESPACE.sub(' ', text).strip()} "
    return prepared.lower() if lowercase else prepared


@dataclass
class MatchTable:
    """
    Dense document x pattern grid of match results.

    Attributes:
        document_ids: Row keys, in corpus order
        patterns: Column keys, in gazetteer order
        rows: ``rows[i][j]`` is the result of pattern j on document i
        errors: Messages for cells whose evaluation failed
    """

    document_ids: List[str]
    patterns: List[Pattern]
    rows: List[List[MatchResult]]
    errors: List[str] = field(default_factory=list)

    @property
    def shape(self) -> Tuple[int, int]:
        """(rows, columns) including the document id column."""
        return len(self.document_ids), len(self.patterns) + 1

    @property
    def header(self) -> List[str]:
        return [DOCUMENT_ID_HEADER] + [p.text for p in self.patterns]

    def column(self, index: int) -> List[MatchResult]:
        """All results for the pattern at ``index``, in corpus order."""
        return [row[index] for row in self.rows]

    def cell(self, document_id: str, pattern_name: str) -> MatchResult:
        """
        Look up one result by document id and pattern name.

        Raises:
            KeyError: If either key is unknown
        """
        try:
            i = self.document_ids.index(document_id)
            j = [p.name for p in self.patterns].index(pattern_name)
        except ValueError:
            raise KeyError((document_id, pattern_name)) from None
        return self.rows[i][j]

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        """Document id -> {pattern name: cell text} for found matches only."""
        return {
            document_id: {
                pattern.name: cell.surface
                for pattern, cell in zip(self.patterns, row)
                if cell.found
            }
            for document_id, row in zip(self.document_ids, self.rows)
        }


class CorpusScanner:
    """
    Apply every pattern to every document.

    Example:
        >>> scanner = CorpusScanner()
        >>> table = scanner.scan(corpus, store.to_patterns())
        >>> table.shape
        (2, 2)
    """

    def __init__(self, lowercase: bool = True):
        self.lowercase = lowercase

    def scan(self, corpus: Sequence[Document], patterns: Sequence[Pattern]) -> MatchTable:
        """
        Build the match table for a corpus.

        A failure while evaluating a single cell is logged, recorded in
        ``MatchTable.errors`` and stored as no match; the scan continues.

        Args:
            corpus: Documents in corpus order
            patterns: Patterns in gazetteer order

        Returns:
            MatchTable with ``len(corpus)`` rows and ``len(patterns) + 1``
            columns
        """
        texts = [prepare_text(doc.text, self.lowercase) for doc in corpus]
        rows: List[List[MatchResult]] = [[NO_MATCH] * len(patterns) for _ in corpus]
        errors: List[str] = []

        for j, pattern in enumerate(patterns):
            for i, text in enumerate(texts):
                try:
                    rows[i][j] = detect(text, pattern)
                except Exception as exc:
                    error_msg = (
                        f"Error matching pattern '{pattern.name}' "
                        f"against '{corpus[i].id}': {exc}"
                    )
                    errors.append(error_msg)
                    logger.error(error_msg)

        table = MatchTable(
            document_ids=[doc.id for doc in corpus],
            patterns=list(patterns),
            rows=rows,
            errors=errors,
        )
        logger.info(
            "Scanned %d documents against %d patterns",
            len(corpus),
            len(patterns),
        )
        return table


__all__ = ["prepare_text", "MatchTable", "CorpusScanner"]
