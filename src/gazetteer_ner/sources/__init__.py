"""
Registry of raw label sources.

Maps source names (from gazetteer.yaml) to their implementation classes.
Sources are lazily imported to avoid pulling in unnecessary dependencies.

Supported sources:
- ``sparql`` -- SPARQL endpoint queried over HTTP
- ``file`` -- local file, one raw label per line

Example:
    >>> from gazetteer_ner.sources import get_source
    >>> source = get_source("file", {"path": "labels.txt"})
    >>> labels = source.fetch_labels()
"""

import importlib
from typing import Any, Dict

from gazetteer_ner.config import Config
from gazetteer_ner.sources.base import LabelSource


_SOURCE_REGISTRY: Dict[str, str] = {
    "sparql": "gazetteer_ner.sources.sparql.SparqlLabelSource",
    "file": "gazetteer_ner.sources.file.FileLabelSource",
}


def get_source(name: str, config: Dict[str, Any]) -> LabelSource:
    """
    Get an instantiated label source by name.

    Args:
        name: Source name (e.g., "sparql")
        config: Source-specific configuration dictionary

    Returns:
        An initialized LabelSource instance

    Raises:
        ValueError: If the source name is not found in the registry
    """
    if name not in _SOURCE_REGISTRY:
        available = ", ".join(sorted(_SOURCE_REGISTRY.keys()))
        raise ValueError(
            f"Unknown label source '{name}'. "
            f"Available sources: {available}"
        )

    module_path, class_name = _SOURCE_REGISTRY[name].rsplit(".", 1)
    module = importlib.import_module(module_path)
    source_class = getattr(module, class_name)

    return source_class(config)


def source_from_config(config: Config) -> LabelSource:
    """Build the label source selected by application configuration."""
    if config.label_source == "file":
        options: Dict[str, Any] = {"path": config.labels_file}
    else:
        options = {
            "endpoint": config.sparql_endpoint,
            "query": config.sparql_query,
            "timeout": config.request_timeout,
        }
    return get_source(config.label_source, options)


def list_sources() -> Dict[str, str]:
    """List all registered source names and their class paths."""
    return dict(_SOURCE_REGISTRY)


__all__ = [
    "LabelSource",
    "get_source",
    "source_from_config",
    "list_sources",
]
