"""
Gazetteer construction.

Turns raw knowledge-base labels into canonical, deduplicated entity
names and the space-delimited patterns used for matching.
"""

from gazetteer_ner.gazetteer.normalizer import normalize_label
from gazetteer_ner.gazetteer.store import GazetteerStore

__all__ = ["normalize_label", "GazetteerStore"]
