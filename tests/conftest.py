"""
Shared test fixtures.

Provides pytest fixtures for common test resources including:
- A small film-review corpus, in memory and on disk
- Raw knowledge-base labels
- Configuration pointing every output at a temporary directory
"""

from pathlib import Path
from typing import List

import pytest

from gazetteer_ner.config import Config
from gazetteer_ner.models.entities import Document


@pytest.fixture
def sample_corpus() -> List[Document]:
    """Two-document corpus from the end-to-end scenario."""
    return [
        Document(id="d1", text="steven spielberg directed this film"),
        Document(id="d2", text="a quiet drama"),
    ]


@pytest.fixture
def raw_labels() -> List[str]:
    """Raw labels as a SPARQL endpoint returns them, with duplicates."""
    return [
        '"Steven Spielberg (director)"@en',
        '"Steven Spielberg"@en',
        '"Sofia Coppola"@en',
        '"STEVEN SPIELBERG (producer)"@en',
        '"J.J. Abrams"@en',
    ]


@pytest.fixture
def corpus_dir(tmp_path: Path) -> Path:
    """
    Write a corpus to disk.

    Returns:
        Path: Directory with one .txt file per document
    """
    directory = tmp_path / "corpus"
    directory.mkdir()
    (directory / "review_01.txt").write_text(
        "Steven Spielberg directed this film.\nSofia Coppola was not involved.",
        encoding="utf-8",
    )
    (directory / "review_02.txt").write_text("A quiet drama", encoding="utf-8")
    (directory / "review_03.txt").write_text(
        "Sofia Coppola and j j abrams share a scene",
        encoding="utf-8",
    )
    return directory


@pytest.fixture
def labels_file(tmp_path: Path, raw_labels: List[str]) -> Path:
    """Raw labels written one per line."""
    path = tmp_path / "labels.txt"
    path.write_text("\n".join(raw_labels) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def test_config(tmp_path: Path, corpus_dir: Path, labels_file: Path) -> Config:
    """
    Create test configuration with temporary paths.

    Returns:
        Config: Test configuration using the file label source
    """
    output = tmp_path / "output"
    return Config(
        corpus_dir=corpus_dir,
        gazetteer_path=output / "gazetteer.csv",
        match_table_path=output / "match_table.csv",
        metrics_path=output / "metrics.json",
        annotated_path=output / "annotated.jsonl",
        label_source="file",
        labels_file=labels_file,
    )
