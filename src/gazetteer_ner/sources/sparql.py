"""
SPARQL endpoint label source.

Sends a SELECT query to a SPARQL endpoint over HTTP and returns the
first column of the tab-separated result set. Literal cells keep their
RDF form (``"Label"@en``), which the gazetteer normalizer understands.

Configuration (via gazetteer.yaml or GAZETTEER_NER_* variables):
    sparql_endpoint: "https://dbpedia.org/sparql"
    sparql_query: "SELECT DISTINCT ?label WHERE { ... }"
    request_timeout: 60

Example:
    >>> source = SparqlLabelSource({"endpoint": "https://dbpedia.org/sparql",
    ...                             "query": "SELECT ?label WHERE { ... }"})
    >>> labels = source.fetch_labels()
"""

import logging
from typing import Any, Dict, List

import requests

from gazetteer_ner.config import DEFAULT_SPARQL_ENDPOINT
from gazetteer_ner.errors import LabelSourceError
from gazetteer_ner.sources.base import LabelSource

logger = logging.getLogger(__name__)

RESULT_FORMAT = "text/tab-separated-values"
REQUEST_TIMEOUT = 60  # seconds


def query(query_string: str, endpoint: str, timeout: float = REQUEST_TIMEOUT) -> List[str]:
    """
    Run a SPARQL SELECT query and return its first result column.

    Args:
        query_string: SPARQL query text
        endpoint: Endpoint URL
        timeout: HTTP timeout in seconds

    Returns:
        Raw cell values, one per result row, header excluded

    Raises:
        LabelSourceError: On network failure or a non-2xx response
    """
    try:
        response = requests.get(
            endpoint,
            params={"query": query_string, "format": RESULT_FORMAT},
            headers={"Accept": RESULT_FORMAT},
            timeout=timeout,
        )
        response.raise_for_status()
    except requests.RequestException as exc:
        raise LabelSourceError(f"SPARQL query to {endpoint} failed: {exc}") from exc

    return parse_tsv_results(response.text)


def parse_tsv_results(body: str) -> List[str]:
    """Extract the first column from a SPARQL TSV result body."""
    lines = body.splitlines()
    if not lines:
        return []
    labels = []
    for line in lines[1:]:
        if not line.strip():
            continue
        labels.append(line.split("\t", 1)[0])
    return labels


class SparqlLabelSource(LabelSource):
    """
    Label source backed by a SPARQL endpoint.

    Attributes:
        endpoint: Endpoint URL
        query: SELECT query whose first variable is the label
        timeout: HTTP timeout in seconds
    """

    name = "sparql"

    def __init__(self, config: Dict[str, Any]) -> None:
        self.endpoint: str = config.get("endpoint", DEFAULT_SPARQL_ENDPOINT)
        self.query: str = config.get("query", "")
        self.timeout: float = config.get("timeout", REQUEST_TIMEOUT)

        if not self.query:
            raise ValueError("SPARQL label source requires a 'query'")

    def fetch_labels(self) -> List[str]:
        labels = query(self.query, self.endpoint, timeout=self.timeout)
        logger.info("SPARQL endpoint %s returned %d label(s)", self.endpoint, len(labels))
        return labels


__all__ = ["query", "parse_tsv_results", "SparqlLabelSource"]
