"""
Summary views over a MatchTable.

- ``count_per_entity``: documents containing each entity
- ``count_per_document``: entities found per document, non-zero only
- ``to_match_list``: per-document list of matched strings, used for
  comparison against the gold standard
"""

from typing import Dict

from gazetteer_ner.matching.scanner import MatchTable
from gazetteer_ner.models.entities import MatchList


def count_per_entity(table: MatchTable) -> Dict[str, int]:
    """
    Count the documents in which each pattern matched.

    Returns:
        Pattern name -> number of documents with a match, in gazetteer
        order. Entities that never matched map to 0.
    """
    return {
        pattern.name: sum(1 for cell in table.column(j) if cell.found)
        for j, pattern in enumerate(table.patterns)
    }


def count_per_document(table: MatchTable) -> Dict[str, int]:
    """
    Count the patterns that matched in each document.

    Documents without any match are left out rather than mapped to 0.
    """
    counts: Dict[str, int] = {}
    for document_id, row in zip(table.document_ids, table.rows):
        found = sum(1 for cell in row if cell.found)
        if found > 0:
            counts[document_id] = found
    return counts


def to_match_list(table: MatchTable) -> MatchList:
    """
    Per-document list of matched cell values in pattern order.

    One value per found cell, the same text the match table file holds
    (capture groups joined by a space), trimmed of surrounding
    whitespace. Reading a written match table back yields the same list.
    Every document is present; documents without matches get an empty
    list.
    """
    return {
        document_id: [cell.surface.strip() for cell in row if cell.found]
        for document_id, row in zip(table.document_ids, table.rows)
    }


__all__ = ["count_per_entity", "count_per_document", "to_match_list"]
