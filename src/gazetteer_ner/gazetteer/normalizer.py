"""
Canonicalization of raw knowledge-base labels.

Labels arrive as RDF literals such as ``"John Smith (director)"@en``.
The canonical gazetteer form is the quoted segment, cut at the first
opening parenthesis, with periods replaced by spaces, whitespace
collapsed and everything lower-cased:

    "John Smith (director)"@en  ->  john smith
    "J.R.R. Tolkien"@en         ->  j r r tolkien

Only a label that is a whole literal is unwrapped. Anything else is
treated as already extracted, so quotation marks inside a name survive
and normalizing a canonical entry returns it unchanged:

    "Dwayne "The Rock" Johnson"@en  ->  dwayne "the rock" johnson
"""

import re

from gazetteer_ner.errors import LabelFormatError


# "lexical form" with an optional @lang tag or ^^datatype
_RDF_LITERAL = re.compile(r'"(.*)"(?:@[\w-]+|\^\^\S+)?', re.DOTALL)
_WHITESPACE = re.compile(r"\s+")


def extract_quoted(raw_label: str) -> str:
    """
    Return the lexical form of an RDF literal.

    Labels that are not a whole literal are returned unchanged.

    Raises:
        LabelFormatError: If the label opens a literal that never closes
    """
    label = raw_label.strip()
    match = _RDF_LITERAL.fullmatch(label)
    if match is not None:
        return match.group(1)
    if label.startswith('"'):
        raise LabelFormatError(f"Unbalanced quotation in label: {raw_label!r}")
    return raw_label


def normalize_label(raw_label: str) -> str:
    """
    Normalize a raw label into a canonical gazetteer entry.

    Args:
        raw_label: Label as returned by the knowledge base

    Returns:
        Canonical, lower-cased entry

    Raises:
        LabelFormatError: If nothing usable remains after cleaning
    """
    name = extract_quoted(raw_label)
    name = name.split("(", 1)[0]
    name = name.replace(".", " ")
    name = _WHITESPACE.sub(" ", name).strip().lower()
    if not name:
        raise LabelFormatError(f"Label normalizes to an empty name: {raw_label!r}")
    return name


__all__ = ["extract_quoted", "normalize_label"]
