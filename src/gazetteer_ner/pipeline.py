"""
End-to-end gazetteer NER run.

Stages, in order:

1. Build (or load) the gazetteer from knowledge-base labels
2. Load the corpus
3. Optionally annotate the corpus and write the annotations
4. Scan the corpus for every gazetteer pattern and write the match table
5. Aggregate per-entity and per-document counts
6. Evaluate against the gold standard, when one is configured

Data loading failures (corpus, gold standard, knowledge base) propagate
and abort the run. Per-cell matching failures are collected in
``PipelineResult.errors``.

Example:
    >>> from gazetteer_ner.config import get_config
    >>> from gazetteer_ner.pipeline import run_pipeline
    >>> result = run_pipeline(get_config())
    >>> print(result.metrics.f_measure if result.metrics else "no gold standard")
"""

import json
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from gazetteer_ner.annotation import get_annotator, write_annotations
from gazetteer_ner.config import Config
from gazetteer_ner.evaluation.metrics import evaluate
from gazetteer_ner.gazetteer.store import GazetteerStore
from gazetteer_ner.matching.aggregator import (
    count_per_document,
    count_per_entity,
    to_match_list,
)
from gazetteer_ner.matching.scanner import CorpusScanner, MatchTable
from gazetteer_ner.models.entities import Document, Metrics
from gazetteer_ner.sources import LabelSource, source_from_config
from gazetteer_ner.storage.corpus import load_corpus
from gazetteer_ner.storage.delimited import read_gold_standard, write_match_table

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """
    Outcome of a pipeline run.

    Attributes:
        started_at: ISO-8601 timestamp of when the run started
        document_count: Number of documents scanned
        gazetteer_size: Number of gazetteer entries
        skipped_labels: Raw labels rejected while building the gazetteer
        entity_counts: Entity -> documents containing it
        document_counts: Document id -> entities found (non-zero only)
        metrics: Evaluation result, or None when no gold standard is set
        outputs: Output name -> file path written
        errors: Non-fatal error messages
    """

    started_at: str = ""
    document_count: int = 0
    gazetteer_size: int = 0
    skipped_labels: List[str] = field(default_factory=list)
    entity_counts: Dict[str, int] = field(default_factory=dict)
    document_counts: Dict[str, int] = field(default_factory=dict)
    metrics: Optional[Metrics] = None
    outputs: Dict[str, str] = field(default_factory=dict)
    errors: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "started_at": self.started_at,
            "document_count": self.document_count,
            "gazetteer_size": self.gazetteer_size,
            "skipped_labels": self.skipped_labels,
            "entity_counts": self.entity_counts,
            "document_counts": self.document_counts,
            "metrics": self.metrics.model_dump() if self.metrics else None,
            "outputs": self.outputs,
            "errors": self.errors,
        }

    def to_json(self, indent: int = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


def build_gazetteer(config: Config, source: Optional[LabelSource] = None) -> GazetteerStore:
    """
    Fetch raw labels, build the gazetteer and persist it.

    Args:
        config: Application configuration
        source: Label source; defaults to the one selected by config

    Returns:
        The built GazetteerStore
    """
    source = source or source_from_config(config)
    labels = source.fetch_labels()
    store = GazetteerStore.build(labels)
    store.persist(config.gazetteer_path)
    return store


def load_or_build_gazetteer(
    config: Config,
    source: Optional[LabelSource] = None,
    rebuild: bool = False,
) -> GazetteerStore:
    """Reuse the persisted gazetteer unless it is missing or a rebuild is requested."""
    if not rebuild and Path(config.gazetteer_path).is_file():
        store = GazetteerStore.load(config.gazetteer_path)
        logger.info("Loaded %d gazetteer entries from %s", len(store), config.gazetteer_path)
        return store
    return build_gazetteer(config, source)


def scan_corpus(
    config: Config,
    corpus: Sequence[Document],
    store: GazetteerStore,
) -> MatchTable:
    """Scan a corpus with every gazetteer pattern and write the match table."""
    scanner = CorpusScanner(lowercase=config.lowercase_documents)
    table = scanner.scan(corpus, store.to_patterns())
    write_match_table(table, config.match_table_path)
    return table


def annotate_corpus(config: Config, corpus: Sequence[Document]) -> Path:
    """Annotate a corpus with the configured annotator and write JSON lines."""
    options = {"model": config.spacy_model}
    annotator = get_annotator(config.annotator, options)
    count = write_annotations(annotator.annotate_corpus(corpus), config.annotated_path)
    logger.info("Wrote %d annotated document(s) to %s", count, config.annotated_path)
    return Path(config.annotated_path)


def evaluate_table(config: Config, table: MatchTable) -> Metrics:
    """Compare a match table with the configured gold standard and write metrics."""
    gold = read_gold_standard(config.gold_path, strip_cells=config.strip_gold_cells)
    metrics = evaluate(
        to_match_list(table),
        gold,
        beta=config.beta,
        alignment=config.alignment,
    )
    write_metrics(metrics, config.metrics_path)
    return metrics


def write_metrics(metrics: Metrics, path: Path) -> Path:
    """Write a metrics report as JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(metrics.to_json(), encoding="utf-8")
    return path


def run_pipeline(
    config: Config,
    source: Optional[LabelSource] = None,
    rebuild_gazetteer: bool = False,
) -> PipelineResult:
    """
    Run every stage and collect the results.

    Args:
        config: Application configuration
        source: Label source override (tests, offline runs)
        rebuild_gazetteer: Query the knowledge base even if a gazetteer
            file already exists

    Returns:
        PipelineResult describing the run
    """
    result = PipelineResult(started_at=datetime.now().isoformat())
    config.ensure_directories()

    store = load_or_build_gazetteer(config, source, rebuild=rebuild_gazetteer)
    result.gazetteer_size = len(store)
    result.skipped_labels = list(store.skipped)
    result.outputs["gazetteer"] = str(config.gazetteer_path)

    corpus = load_corpus(config.corpus_dir, config.corpus_glob)
    result.document_count = len(corpus)

    if config.annotator != "none":
        result.outputs["annotations"] = str(annotate_corpus(config, corpus))

    table = scan_corpus(config, corpus, store)
    result.outputs["match_table"] = str(config.match_table_path)
    result.errors.extend(table.errors)

    result.entity_counts = count_per_entity(table)
    result.document_counts = count_per_document(table)

    if config.gold_path is not None:
        result.metrics = evaluate_table(config, table)
        result.outputs["metrics"] = str(config.metrics_path)
    else:
        logger.info("No gold standard configured; skipping evaluation")

    return result


__all__ = [
    "PipelineResult",
    "build_gazetteer",
    "load_or_build_gazetteer",
    "scan_corpus",
    "annotate_corpus",
    "evaluate_table",
    "write_metrics",
    "run_pipeline",
]
