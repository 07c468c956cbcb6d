"""Unit tests for record identifiers."""

import pytest

from qna.domain.error import InvalidIdentifierError
from qna.domain.value import MAX_IDENTIFIER, AnswerId, QuestionId


class TestParse:
    """Tests for Identifier.parse."""

    def test_parses_query_string(self):
        assert QuestionId.parse("42") == QuestionId(42)

    def test_strips_whitespace(self):
        assert QuestionId.parse(" 7 ") == QuestionId(7)

    def test_accepts_int(self):
        assert QuestionId.parse(3).root == 3

    def test_returns_same_instance_for_identifier(self):
        question_id = QuestionId(5)
        assert QuestionId.parse(question_id) is question_id

    @pytest.mark.parametrize("raw", ["", "   ", "abc", "1.5", "-1", 2.0, True])
    def test_rejects_invalid_values(self, raw):
        with pytest.raises(InvalidIdentifierError):
            QuestionId.parse(raw)

    def test_rejects_values_beyond_32_bits(self):
        with pytest.raises(InvalidIdentifierError, match="must not exceed"):
            QuestionId.parse(str(MAX_IDENTIFIER + 1))

    def test_error_names_the_raw_value(self):
        with pytest.raises(InvalidIdentifierError, match="'abc'"):
            QuestionId.parse("abc")


class TestOrdering:
    """Identifiers order numerically."""

    def test_numeric_not_lexicographic(self):
        assert QuestionId(9) < QuestionId(10)
        assert QuestionId(10) > QuestionId(9)

    def test_inclusive_comparisons(self):
        assert QuestionId(3) <= QuestionId(3)
        assert QuestionId(3) >= QuestionId(3)

    def test_sorting(self):
        ids = [QuestionId(10), QuestionId(2), QuestionId(33)]
        assert sorted(ids) == [QuestionId(2), QuestionId(10), QuestionId(33)]


class TestValueSemantics:
    """Identifiers are immutable values."""

    def test_equal_ids_hash_equal(self):
        assert {QuestionId(1): "a"}[QuestionId(1)] == "a"

    def test_next(self):
        assert QuestionId(1).next() == QuestionId(2)

    def test_str(self):
        assert str(AnswerId(12)) == "12"
