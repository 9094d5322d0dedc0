"""
spaCy-backed tokenizer and part-of-speech tagger.

Requires the optional ``spacy`` extra and an installed model, e.g.:

    pip install gazetteer-ner[spacy]
    python -m spacy download en_core_web_sm

The model is loaded on first use; the pipeline's NER component is
disabled since entity recognition here is dictionary-based.
"""

import logging
from typing import Any, Dict, Optional

from gazetteer_ner.annotation.base import Annotator
from gazetteer_ner.models.entities import AnnotatedDocument, Document, Token

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "en_core_web_sm"


class SpacyAnnotator(Annotator):
    """
    Annotate documents with spaCy tokens and fine-grained POS tags.

    Attributes:
        model_name: spaCy model package name
    """

    name = "spacy"

    def __init__(self, config: Optional[Dict[str, Any]] = None) -> None:
        config = config or {}
        self.model_name: str = config.get("model", DEFAULT_MODEL)
        self._nlp = None

    @property
    def nlp(self):
        if self._nlp is None:
            import spacy

            logger.info("Loading spaCy model '%s'", self.model_name)
            self._nlp = spacy.load(self.model_name, disable=["ner"])
        return self._nlp

    def annotate(self, document: Document) -> AnnotatedDocument:
        doc = self.nlp(document.text)
        tokens = tuple(
            Token(
                text=tok.text,
                start=tok.idx,
                end=tok.idx + len(tok.text),
                tag=tok.tag_ or None,
            )
            for tok in doc
            if not tok.is_space
        )
        return AnnotatedDocument(
            id=document.id,
            text=document.text,
            tokens=tokens,
            annotator=self.name,
        )


__all__ = ["SpacyAnnotator"]
