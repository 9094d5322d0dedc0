"""
Gazetteer NER

Dictionary-based named entity recognition over a text corpus.
Builds a normalized gazetteer from knowledge-base labels, scans every
document for gazetteer entries and scores the result against a gold
standard with precision, recall and F-measure.
"""

__version__ = "0.1.0"
__author__ = "Gazetteer NER Team"

from gazetteer_ner.config import Config

__all__ = ["Config", "__version__"]
