"""
Abstract interface for raw label sources.

A label source returns the flat list of raw candidate names that the
gazetteer is built from. Labels are returned exactly as the source
delivers them (for example ``"Steven Spielberg (director)"@en``);
normalization happens in the gazetteer builder.
"""

from abc import ABC, abstractmethod
from typing import List


class LabelSource(ABC):
    """
    Base class for knowledge-base label sources.

    Subclasses must implement ``fetch_labels()``.

    Example:
        >>> class StaticSource(LabelSource):
        ...     def fetch_labels(self) -> List[str]:
        ...         return ['"Ada Lovelace"@en']
    """

    name: str = ""

    @abstractmethod
    def fetch_labels(self) -> List[str]:
        """
        Fetch raw labels.

        Returns:
            Raw label strings in source order

        Raises:
            LabelSourceError: If the source cannot be queried
        """


__all__ = ["LabelSource"]
