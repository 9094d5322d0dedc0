"""Tests for precision / recall / F-measure evaluation."""

import json
import math

import pytest

from gazetteer_ner.errors import AlignmentError
from gazetteer_ner.evaluation.metrics import align, evaluate, f_measure


class TestFMeasure:

    def test_beta_one_is_harmonic_mean(self):
        assert f_measure(0.5, 1.0) == pytest.approx(2 * 0.5 * 1.0 / 1.5)

    def test_sqrt_beta_weighting(self):
        p, r = 0.5, 0.25
        expected = ((math.sqrt(4.0) + 1) * p * r) / (math.sqrt(4.0) * p + r)
        assert f_measure(p, r, beta=4.0) == pytest.approx(expected)

    def test_undefined_inputs(self):
        assert f_measure(None, 0.5) is None
        assert f_measure(0.5, None) is None

    def test_zero_precision_and_recall_is_undefined(self):
        assert f_measure(0.0, 0.0) is None


class TestEvaluate:

    def test_identical_lists_score_one(self):
        lists = {"d1": ["ang lee", "sofia coppola"], "d2": ["ava duvernay"], "d3": []}
        metrics = evaluate(lists, {k: list(v) for k, v in lists.items()})
        assert metrics.precision == 1.0
        assert metrics.recall == 1.0
        assert metrics.f_measure == pytest.approx(1.0)

    def test_partial_overlap(self):
        system = {"d1": ["ang lee", "sofia coppola"]}
        gold = {"d1": ["ang lee", "ava duvernay", "greta gerwig"]}
        metrics = evaluate(system, gold)
        assert metrics.num_correct == 1
        assert metrics.all_answers == 2
        assert metrics.possible_answers == 3
        assert metrics.precision == pytest.approx(0.5)
        assert metrics.recall == pytest.approx(1 / 3)
        assert metrics.f_measure == pytest.approx(0.4)

    def test_documents_with_empty_gold_are_skipped(self):
        system = {"A": ["ang lee", "wrong"], "B": ["sofia coppola", "noise"]}
        gold = {"A": [], "B": ["sofia coppola"]}
        only_b = evaluate({"B": system["B"]}, {"B": gold["B"]})
        both = evaluate(system, gold)
        assert both == only_b
        assert both.documents_evaluated == 1
        assert both.precision == pytest.approx(0.5)
        assert both.recall == 1.0

    def test_matching_is_exact_string_equality(self):
        metrics = evaluate({"d1": ["ang lee"]}, {"d1": [" ang lee"]})
        assert metrics.num_correct == 0

    def test_no_system_answers_gives_undefined_precision(self):
        metrics = evaluate({"d1": []}, {"d1": ["ang lee"]})
        assert metrics.precision is None
        assert metrics.recall == 0.0
        assert metrics.f_measure is None
        assert not metrics.is_defined

    def test_empty_gold_everywhere_is_fully_undefined(self):
        metrics = evaluate({"d1": ["ang lee"]}, {"d1": []})
        assert metrics.precision is None
        assert metrics.recall is None
        assert metrics.documents_evaluated == 0

    def test_undefined_serializes_as_null(self):
        metrics = evaluate({"d1": []}, {"d1": []})
        parsed = json.loads(metrics.to_json())
        assert parsed["precision"] is None
        assert parsed["f_measure"] is None


class TestAlignment:

    def test_id_alignment_ignores_order(self):
        system = {"d2": ["sofia coppola"], "d1": ["ang lee"]}
        gold = {"d1": ["ang lee"], "d2": ["sofia coppola"]}
        assert evaluate(system, gold, alignment="id").precision == 1.0

    def test_position_alignment_pairs_rows_in_order(self):
        system = {"x": ["ang lee"], "y": ["sofia coppola"]}
        gold = {"d1": ["ang lee"], "d2": ["sofia coppola"]}
        assert evaluate(system, gold, alignment="position").precision == 1.0

    def test_position_alignment_row_count_mismatch_fails(self):
        with pytest.raises(AlignmentError):
            evaluate({"d1": []}, {"d1": ["a"], "d2": ["b"]}, alignment="position")

    def test_id_alignment_mismatch_fails(self):
        with pytest.raises(AlignmentError, match="missing from system"):
            evaluate({"d1": ["a"]}, {"d1": ["a"], "d2": ["b"]}, alignment="id")

    def test_unknown_alignment(self):
        with pytest.raises(ValueError):
            align({}, {}, alignment="fuzzy")
