"""
Data models.

Provides the immutable document, pattern, match-result and metrics
types shared by every stage of the pipeline.
"""

from gazetteer_ner.models.entities import (
    NO_MATCH,
    AnnotatedDocument,
    Document,
    GroupMatches,
    MatchResult,
    MatchList,
    Metrics,
    NoMatch,
    Pattern,
    SingleMatch,
    Token,
)

__all__ = [
    "Document",
    "Token",
    "AnnotatedDocument",
    "Pattern",
    "MatchResult",
    "NoMatch",
    "SingleMatch",
    "GroupMatches",
    "NO_MATCH",
    "MatchList",
    "Metrics",
]
