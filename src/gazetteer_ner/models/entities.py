"""
Data models for documents, patterns, match results and metrics.

Documents and annotated documents are immutable Pydantic models: every
processing stage produces a new value instead of editing the corpus in
place. Match results form a small tagged variant
(NoMatch / SingleMatch / GroupMatches) so callers never have to inspect
the shape of a regex result at runtime.
"""

import json
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field


PATTERN_DELIMITER = " "

# Document id -> surface strings found (or expected) in that document
MatchList = Dict[str, List[str]]


class Document(BaseModel):
    """
    A corpus document.

    The id is derived from corpus metadata (the file name) and is stable
    across runs.
    """
    id: str = Field(min_length=1)
    text: str

    class Config:
        """Pydantic configuration."""
        frozen = True


class Token(BaseModel):
    """A token span returned by an annotation service, optionally tagged."""
    text: str
    start: int = Field(ge=0)
    end: int = Field(ge=0)
    tag: Optional[str] = None

    class Config:
        """Pydantic configuration."""
        frozen = True


class AnnotatedDocument(BaseModel):
    """
    A document together with its token annotations.

    Holds the document id and text rather than a reference to the
    source Document so it can be serialized on its own.
    """
    id: str
    text: str
    tokens: Tuple[Token, ...] = ()
    annotator: str = ""

    class Config:
        """Pydantic configuration."""
        frozen = True

    def to_json(self) -> str:
        """Serialize to a single-line JSON string."""
        return self.model_dump_json()


@dataclass(frozen=True)
class Pattern:
    """
    A compiled search pattern.

    Attributes:
        name: Gazetteer entry (or label) the pattern was built from
        text: Pattern source as written in match table headers
        regex: Compiled regular expression
    """

    name: str
    text: str
    regex: "re.Pattern[str]"

    @classmethod
    def from_entry(cls, entry: str) -> "Pattern":
        """Wrap a gazetteer entry in single-space delimiters."""
        text = f"{PATTERN_DELIMITER}{entry}{PATTERN_DELIMITER}"
        return cls(name=entry, text=text, regex=re.compile(re.escape(text)))

    @classmethod
    def from_regex(cls, expression: str, name: Optional[str] = None) -> "Pattern":
        """
        Build a pattern from a raw regular expression.

        Raises:
            re.error: If the expression does not compile
        """
        return cls(name=name or expression, text=expression, regex=re.compile(expression))


class MatchResult:
    """Base type for the outcome of matching one pattern against one document."""

    found: bool = False

    @property
    def values(self) -> Tuple[str, ...]:
        """Matched strings, in capture order."""
        return ()

    @property
    def surface(self) -> str:
        """Cell text used in the match table; empty for no match."""
        return " ".join(self.values)


@dataclass(frozen=True)
class NoMatch(MatchResult):
    """The pattern does not occur in the document."""


@dataclass(frozen=True)
class SingleMatch(MatchResult):
    """The whole matched span of a pattern without capture groups."""

    text: str
    found = True

    @property
    def values(self) -> Tuple[str, ...]:
        return (self.text,)


@dataclass(frozen=True)
class GroupMatches(MatchResult):
    """The non-empty capture groups of a matching pattern."""

    groups: Tuple[str, ...]
    found = True

    @property
    def values(self) -> Tuple[str, ...]:
        return self.groups


NO_MATCH = NoMatch()


class Metrics(BaseModel):
    """
    Corpus-level accuracy of the recognizer against a gold standard.

    A score is None when its denominator is zero. None is the explicit
    "undefined" state and is serialized as null.
    """
    precision: Optional[float] = Field(None, ge=0.0, le=1.0)
    recall: Optional[float] = Field(None, ge=0.0, le=1.0)
    f_measure: Optional[float] = Field(None, ge=0.0, le=1.0)
    num_correct: int = Field(ge=0, default=0)
    all_answers: int = Field(ge=0, default=0)
    possible_answers: int = Field(ge=0, default=0)
    documents_evaluated: int = Field(ge=0, default=0)
    beta: float = 1.0

    class Config:
        """Pydantic configuration."""
        frozen = True

    @property
    def is_defined(self) -> bool:
        """True when all three scores could be computed."""
        return None not in (self.precision, self.recall, self.f_measure)

    def to_json(self, indent: int = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.model_dump(), indent=indent, ensure_ascii=False)


def format_score(value: Optional[float]) -> str:
    """Render a score for humans, spelling out the undefined state."""
    return "undefined" if value is None else f"{value:.4f}"


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
    "format_score",
]
