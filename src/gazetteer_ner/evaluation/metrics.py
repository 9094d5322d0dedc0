"""
Precision, recall and F-measure against a gold standard.

Counts are accumulated over the whole corpus (micro-averaged), then
turned into scores once. Documents whose gold list is empty are skipped
entirely, even when the system found something in them.

The F-measure is computed as

    ((sqrt(beta) + 1) * P * R) / (sqrt(beta) * P + R)

With the default beta of 1 this equals the usual harmonic mean of P
and R.
"""

import logging
import math
from typing import List, Optional, Sequence, Tuple

from gazetteer_ner.errors import AlignmentError
from gazetteer_ner.models.entities import MatchList, Metrics

logger = logging.getLogger(__name__)

ALIGNMENTS = ("id", "position")


def _ratio(numerator: int, denominator: int) -> Optional[float]:
    return numerator / denominator if denominator else None


def f_measure(
    precision: Optional[float],
    recall: Optional[float],
    beta: float = 1.0,
) -> Optional[float]:
    """
    Combine precision and recall.

    Returns:
        The F-measure, or None if either input is undefined or both are 0
    """
    if precision is None or recall is None:
        return None
    weight = math.sqrt(beta)
    denominator = weight * precision + recall
    if denominator == 0:
        return None
    return ((weight + 1) * precision * recall) / denominator


def align(
    system: MatchList,
    gold: MatchList,
    alignment: str = "id",
) -> List[Tuple[Sequence[str], Sequence[str]]]:
    """
    Pair system and gold lists document by document.

    ``id`` alignment matches rows by document id and requires both sides
    to cover the same documents. ``position`` alignment pairs the i-th
    system row with the i-th gold row and requires equal row counts.

    Raises:
        AlignmentError: If the two match lists cannot be paired
        ValueError: If the alignment strategy is unknown
    """
    if alignment not in ALIGNMENTS:
        raise ValueError(f"Unknown alignment '{alignment}', expected one of {ALIGNMENTS}")

    if alignment == "position":
        if len(system) != len(gold):
            raise AlignmentError(
                f"System has {len(system)} documents but gold standard has {len(gold)}"
            )
        return list(zip(system.values(), gold.values()))

    missing = [doc_id for doc_id in gold if doc_id not in system]
    extra = [doc_id for doc_id in system if doc_id not in gold]
    if missing or extra:
        raise AlignmentError(
            f"Document ids differ between system and gold standard: "
            f"missing from system={missing[:5]}, missing from gold={extra[:5]}"
        )
    return [(system[doc_id], gold[doc_id]) for doc_id in gold]


def evaluate(
    system: MatchList,
    gold: MatchList,
    beta: float = 1.0,
    alignment: str = "id",
) -> Metrics:
    """
    Score a system match list against the gold standard.

    Args:
        system: Match list derived from the scan
        gold: Match list loaded from the gold-standard file
        beta: F-measure weight
        alignment: ``id`` or ``position``

    Returns:
        Metrics; a score whose denominator is zero is None

    Example:
        >>> metrics = evaluate({"d1": ["foo"]}, {"d1": ["foo", "bar"]})
        >>> metrics.precision, metrics.recall
        (1.0, 0.5)
    """
    num_correct = 0
    all_answers = 0
    possible_answers = 0
    documents = 0

    for found, expected in align(system, gold, alignment):
        if not expected:
            continue
        documents += 1
        num_correct += len(set(found) & set(expected))
        all_answers += len(found)
        possible_answers += len(expected)

    precision = _ratio(num_correct, all_answers)
    recall = _ratio(num_correct, possible_answers)
    metrics = Metrics(
        precision=precision,
        recall=recall,
        f_measure=f_measure(precision, recall, beta),
        num_correct=num_correct,
        all_answers=all_answers,
        possible_answers=possible_answers,
        documents_evaluated=documents,
        beta=beta,
    )

    if not metrics.is_defined:
        logger.warning(
            "Metrics undefined: %d system answers, %d possible answers",
            all_answers,
            possible_answers,
        )
    return metrics


__all__ = ["ALIGNMENTS", "align", "evaluate", "f_measure"]
