"""
Tests for knowledge-base label sources.

Uses unittest.mock to isolate from real SPARQL endpoints.
"""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

from gazetteer_ner.config import Config
from gazetteer_ner.errors import LabelSourceError
from gazetteer_ner.sources import get_source, list_sources, source_from_config
from gazetteer_ner.sources.file import FileLabelSource
from gazetteer_ner.sources.sparql import SparqlLabelSource, parse_tsv_results, query


TSV_BODY = (
    '?label\n'
    '"Steven Spielberg (director)"@en\n'
    '"Sofia Coppola"@en\n'
    '\n'
)


def _response(text: str = TSV_BODY, status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.text = text
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    return response


class TestParseTsv:

    def test_header_is_skipped(self):
        assert parse_tsv_results(TSV_BODY) == [
            '"Steven Spielberg (director)"@en',
            '"Sofia Coppola"@en',
        ]

    def test_first_column_only(self):
        body = '?label\t?film\n"Ang Lee"@en\t<http://dbpedia.org/resource/Hulk>\n'
        assert parse_tsv_results(body) == ['"Ang Lee"@en']

    def test_empty_body(self):
        assert parse_tsv_results("") == []


class TestSparqlQuery:

    @patch("gazetteer_ner.sources.sparql.requests.get")
    def test_sends_query_and_format(self, mock_get):
        mock_get.return_value = _response()
        labels = query("SELECT ?label WHERE {}", "https://example.org/sparql", timeout=5)

        assert len(labels) == 2
        args, kwargs = mock_get.call_args
        assert args[0] == "https://example.org/sparql"
        assert kwargs["params"]["query"] == "SELECT ?label WHERE {}"
        assert kwargs["params"]["format"] == "text/tab-separated-values"
        assert kwargs["timeout"] == 5

    @patch("gazetteer_ner.sources.sparql.requests.get")
    def test_http_error_raises_label_source_error(self, mock_get):
        mock_get.return_value = _response(status_code=503)
        with pytest.raises(LabelSourceError, match="failed"):
            query("SELECT ?label WHERE {}", "https://example.org/sparql")

    @patch("gazetteer_ner.sources.sparql.requests.get")
    def test_network_error_raises_label_source_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("unreachable")
        with pytest.raises(LabelSourceError):
            query("SELECT ?label WHERE {}", "https://example.org/sparql")


class TestSparqlLabelSource:

    def test_requires_query(self):
        with pytest.raises(ValueError):
            SparqlLabelSource({"endpoint": "https://example.org/sparql"})

    @patch("gazetteer_ner.sources.sparql.requests.get")
    def test_fetch_labels(self, mock_get):
        mock_get.return_value = _response()
        source = SparqlLabelSource({"endpoint": "https://example.org/sparql", "query": "Q"})
        assert source.fetch_labels()[1] == '"Sofia Coppola"@en'


class TestFileLabelSource:

    def test_reads_non_blank_lines(self, labels_file: Path):
        labels = FileLabelSource({"path": labels_file}).fetch_labels()
        assert labels[0] == '"Steven Spielberg (director)"@en'
        assert len(labels) == 5

    def test_missing_file(self, tmp_path: Path):
        source = FileLabelSource({"path": tmp_path / "none.txt"})
        with pytest.raises(LabelSourceError):
            source.fetch_labels()

    def test_requires_path(self):
        with pytest.raises(ValueError):
            FileLabelSource({})


class TestRegistry:

    def test_list_sources(self):
        assert set(list_sources()) == {"sparql", "file"}

    def test_unknown_source(self):
        with pytest.raises(ValueError, match="Available sources"):
            get_source("wikidata-dump", {})

    def test_get_source_instantiates_class(self, labels_file: Path):
        assert isinstance(get_source("file", {"path": labels_file}), FileLabelSource)

    def test_source_from_config_sparql(self):
        config = Config(sparql_endpoint="https://example.org/sparql", request_timeout=3)
        source = source_from_config(config)
        assert isinstance(source, SparqlLabelSource)
        assert source.endpoint == "https://example.org/sparql"
        assert source.timeout == 3

    def test_source_from_config_file(self, test_config: Config):
        assert isinstance(source_from_config(test_config), FileLabelSource)
