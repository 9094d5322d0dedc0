"""
Abstract interface for linguistic annotation services.

An annotator turns a Document into an AnnotatedDocument holding token
spans with optional part-of-speech tags. Annotation never changes the
source Document.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List

from gazetteer_ner.models.entities import AnnotatedDocument, Document


class Annotator(ABC):
    """
    Base class for annotation services.

    Subclasses must implement ``annotate()``.
    """

    name: str = ""

    @abstractmethod
    def annotate(self, document: Document) -> AnnotatedDocument:
        """
        Annotate a single document.

        Args:
            document: Source document

        Returns:
            A new AnnotatedDocument for the same id and text
        """

    def annotate_corpus(self, corpus: Iterable[Document]) -> List[AnnotatedDocument]:
        """Annotate every document, preserving corpus order."""
        return [self.annotate(document) for document in corpus]


__all__ = ["Annotator"]
