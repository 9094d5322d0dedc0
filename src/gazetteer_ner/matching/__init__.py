"""
Pattern matching, corpus scanning and match aggregation.
"""

from gazetteer_ner.matching.aggregator import (
    count_per_document,
    count_per_entity,
    to_match_list,
)
from gazetteer_ner.matching.matcher import detect
from gazetteer_ner.matching.scanner import CorpusScanner, MatchTable, prepare_text

__all__ = [
    "detect",
    "prepare_text",
    "CorpusScanner",
    "MatchTable",
    "count_per_entity",
    "count_per_document",
    "to_match_list",
]
