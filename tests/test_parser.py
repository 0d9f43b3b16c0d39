"""
Tests for reply parsing and safe navigation of the response document
"""
import pytest

from askbox.core.parser import parse_answer
from askbox.core.response_adapter import build_payload, dig, extract_reply_text

from .conftest import reply_document


class TestParseAnswer:
    """Tests for splitting a reply into answer segments"""

    def test_plain_text_is_one_segment(self):
        assert parse_answer("hello world") == ["hello world"]

    def test_bullets_split_and_trimmed(self):
        assert parse_answer("* Point one* Point two") == ["Point one", "Point two"]

    def test_multiline_bullets(self):
        raw = "Intro line\n* first item\n* second item\n"
        assert parse_answer(raw) == ["Intro line", "first item", "second item"]

    def test_asterisk_without_space_is_not_a_delimiter(self):
        assert parse_answer("2*3=6, see **note**") == ["2*3=6, see **note**"]

    @pytest.mark.parametrize("raw", ["", None])
    def test_empty_or_missing_is_empty(self, raw):
        assert parse_answer(raw) == []

    def test_whitespace_only_fragments_dropped(self):
        assert parse_answer("* \n* *   * last") == ["last"]


class TestDig:
    """Tests for the nested lookup helper"""

    def test_full_path(self):
        tree = {"a": [{"b": "found"}]}
        assert dig(tree, "a", 0, "b") == "found"

    def test_missing_key_returns_default(self):
        assert dig({"a": {}}, "a", "b", default="x") == "x"

    def test_index_out_of_range_returns_default(self):
        assert dig({"a": []}, "a", 0, default="x") == "x"

    def test_wrong_container_type_returns_default(self):
        assert dig({"a": "string"}, "a", 0, default="x") == "x"
        assert dig(["list"], "key", default="x") == "x"

    def test_null_step_returns_default(self):
        assert dig({"a": None}, "a", "b", default="x") == "x"


class TestExtractReplyText:
    def test_reply_text_extracted(self):
        assert extract_reply_text(reply_document("* one")) == "* one"

    @pytest.mark.parametrize("document", [
        {},
        {"candidates": []},
        {"candidates": [{}]},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"content": {"parts": [{"text": 42}]}}]},
        None,
        [],
        "text",
    ])
    def test_missing_fields_yield_empty_string(self, document):
        assert extract_reply_text(document) == ""


def test_payload_envelope():
    assert build_payload("why?") == {"contents": [{"parts": [{"text": "why?"}]}]}
