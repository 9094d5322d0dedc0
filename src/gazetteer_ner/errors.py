"""
Exception types raised by the gazetteer NER system.

Data loading failures (corpus, gold standard) are fatal to a run.
Malformed raw labels are reported with LabelFormatError and skipped by
the gazetteer builder. Absence of a match is never an error.
"""


class GazetteerNERError(Exception):
    """Base class for all gazetteer NER errors."""


class LabelFormatError(GazetteerNERError, ValueError):
    """A raw knowledge-base label could not be normalized."""


class CorpusLoadError(GazetteerNERError):
    """The corpus directory or one of its files could not be read."""


class GoldStandardError(GazetteerNERError):
    """The gold-standard file is missing or malformed."""


class AlignmentError(GazetteerNERError, ValueError):
    """System and gold match lists do not describe the same documents."""


class LabelSourceError(GazetteerNERError):
    """A knowledge-base query failed or returned an unusable response."""


__all__ = [
    "GazetteerNERError",
    "LabelFormatError",
    "CorpusLoadError",
    "GoldStandardError",
    "AlignmentError",
    "LabelSourceError",
]
