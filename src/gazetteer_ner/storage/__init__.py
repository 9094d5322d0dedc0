"""
Corpus loading and result serialization.
"""

from gazetteer_ner.storage.corpus import load_corpus
from gazetteer_ner.storage.delimited import (
    read_gazetteer,
    read_gold_standard,
    read_match_table,
    write_gazetteer,
    write_match_table,
)

__all__ = [
    "load_corpus",
    "read_gazetteer",
    "read_gold_standard",
    "read_match_table",
    "write_gazetteer",
    "write_match_table",
]
