"""
Registry of annotation services.

Supported annotators:
- ``regex`` -- word/punctuation tokenizer, no tags
- ``spacy`` -- spaCy tokenizer and POS tagger (optional extra)

Annotators are lazily imported so spaCy is only needed when selected.
"""

import importlib
from pathlib import Path
from typing import Any, Dict, Iterable

from gazetteer_ner.annotation.base import Annotator
from gazetteer_ner.models.entities import AnnotatedDocument


_ANNOTATOR_REGISTRY: Dict[str, str] = {
    "regex": "gazetteer_ner.annotation.regex_annotator.RegexAnnotator",
    "spacy": "gazetteer_ner.annotation.spacy_annotator.SpacyAnnotator",
}


def get_annotator(name: str, config: Dict[str, Any]) -> Annotator:
    """
    Get an instantiated annotator by name.

    Raises:
        ValueError: If the annotator name is not found in the registry
    """
    if name not in _ANNOTATOR_REGISTRY:
        available = ", ".join(sorted(_ANNOTATOR_REGISTRY.keys()))
        raise ValueError(
            f"Unknown annotator '{name}'. "
            f"Available annotators: {available}"
        )

    module_path, class_name = _ANNOTATOR_REGISTRY[name].rsplit(".", 1)
    module = importlib.import_module(module_path)
    return getattr(module, class_name)(config)


def write_annotations(documents: Iterable[AnnotatedDocument], path: Path) -> int:
    """
    Write annotated documents as JSON lines.

    Returns:
        Number of documents written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with open(path, "w", encoding="utf-8") as f:
        for document in documents:
            f.write(document.to_json())
            f.write("\n")
            count += 1
    return count


__all__ = ["Annotator", "get_annotator", "write_annotations"]
