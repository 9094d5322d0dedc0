"""Tests for the annotation service interface and built-in annotators."""

import json
import sys
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest

from gazetteer_ner.annotation import get_annotator, write_annotations
from gazetteer_ner.annotation.regex_annotator import RegexAnnotator
from gazetteer_ner.annotation.spacy_annotator import SpacyAnnotator
from gazetteer_ner.models.entities import Document


class TestRegexAnnotator:

    def test_tokens_and_offsets(self):
        document = Document(id="d1", text="Ang Lee's film, 2000.")
        annotated = RegexAnnotator().annotate(document)
        assert [t.text for t in annotated.tokens] == ["Ang", "Lee's", "film", ",", "2000", "."]
        for token in annotated.tokens:
            assert document.text[token.start:token.end] == token.text
            assert token.tag is None

    def test_produces_new_value(self):
        document = Document(id="d1", text="a quiet drama")
        annotated = RegexAnnotator().annotate(document)
        assert annotated.id == document.id
        assert annotated.text == document.text
        assert annotated.annotator == "regex"
        assert document.text == "a quiet drama"

    def test_annotate_corpus_keeps_order(self, sample_corpus):
        annotated = RegexAnnotator().annotate_corpus(sample_corpus)
        assert [a.id for a in annotated] == ["d1", "d2"]


class TestSpacyAnnotator:

    def test_uses_pos_tags_and_skips_whitespace(self):
        tokens = [
            SimpleNamespace(text="Ang", idx=0, tag_="NNP", is_space=False),
            SimpleNamespace(text=" ", idx=3, tag_="_SP", is_space=True),
            SimpleNamespace(text="Lee", idx=4, tag_="NNP", is_space=False),
        ]
        fake_spacy = MagicMock()
        fake_spacy.load.return_value = MagicMock(return_value=tokens)

        with patch.dict(sys.modules, {"spacy": fake_spacy}):
            annotator = SpacyAnnotator({"model": "en_core_web_sm"})
            annotated = annotator.annotate(Document(id="d1", text="Ang  Lee"))

        fake_spacy.load.assert_called_once_with("en_core_web_sm", disable=["ner"])
        assert [(t.text, t.start, t.end, t.tag) for t in annotated.tokens] == [
            ("Ang", 0, 3, "NNP"),
            ("Lee", 4, 7, "NNP"),
        ]
        assert annotated.annotator == "spacy"


class TestRegistry:

    def test_get_regex_annotator(self):
        assert isinstance(get_annotator("regex", {}), RegexAnnotator)

    def test_unknown_annotator(self):
        with pytest.raises(ValueError, match="Available annotators"):
            get_annotator("stanza", {})


class TestWriteAnnotations:

    def test_json_lines(self, tmp_path: Path, sample_corpus):
        path = tmp_path / "out" / "annotated.jsonl"
        annotated = RegexAnnotator().annotate_corpus(sample_corpus)
        assert write_annotations(annotated, path) == 2

        lines = path.read_text(encoding="utf-8").splitlines()
        first = json.loads(lines[0])
        assert first["id"] == "d1"
        assert first["tokens"][0] == {"text": "steven", "start": 0, "end": 6, "tag": None}
