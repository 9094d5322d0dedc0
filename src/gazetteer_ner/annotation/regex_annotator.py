"""
Dependency-free word tokenizer.

Splits text into word and punctuation tokens with character offsets.
No part-of-speech tags are produced.
"""

import re
from typing import Any, Dict, Optional

from gazetteer_ner.annotation.base import Annotator
from gazetteer_ner.models.entities import AnnotatedDocument, Document, Token

_TOKEN = re.compile(r"\w+(?:[-']\w+)*|[^\w\s]")


class RegexAnnotator(Annotator):
    """Tokenize on word characters; every other non-space char is a token."""

    name = "regex"

    def __init__(self, config: Optional[Dict[str, Any]] = None) -> None:
        self.config = config or {}

    def annotate(self, document: Document) -> AnnotatedDocument:
        tokens = tuple(
            Token(text=m.group(0), start=m.start(), end=m.end())
            for m in _TOKEN.finditer(document.text)
        )
        return AnnotatedDocument(
            id=document.id,
            text=document.text,
            tokens=tokens,
            annotator=self.name,
        )


__all__ = ["RegexAnnotator"]
