"""
Single-document pattern matching.

Answers "does this entity appear at least once in this document": one
regex search over the full text, first match only. Matching is
case-sensitive here; text preparation (lower-casing, padding) belongs
to the caller.
"""

from typing import Union

from gazetteer_ner.models.entities import (
    NO_MATCH,
    Document,
    GroupMatches,
    MatchResult,
    Pattern,
    SingleMatch,
)


def detect(document: Union[Document, str], pattern: Pattern) -> MatchResult:
    """
    Search a document for the first occurrence of a pattern.

    Args:
        document: Document or already prepared text
        pattern: Compiled pattern

    Returns:
        SingleMatch with the matched span for patterns without capture
        groups, GroupMatches with the non-empty groups otherwise, or
        NO_MATCH when nothing (or only empty groups) matched

    Example:
        >>> detect("a foo b", Pattern.from_entry("foo"))
        SingleMatch(text=' foo ')
        >>> detect("foobar", Pattern.from_entry("foo"))
        NoMatch()
    """
    text = document.text if isinstance(document, Document) else document
    match = pattern.regex.search(text)
    if match is None:
        return NO_MATCH

    if pattern.regex.groups == 0:
        span = match.group(0)
        return SingleMatch(span) if span else NO_MATCH

    groups = tuple(g for g in match.groups() if g)
    return GroupMatches(groups) if groups else NO_MATCH


__all__ = ["detect"]
