"""Tests for speedtype.core.comparison – per-character classification."""

from __future__ import annotations

import pytest

from speedtype.core.comparison import CharState, Comparison, classify

C = CharState.CORRECT
X = CharState.INCORRECT
U = CharState.UNTYPED


# ---------------------------------------------------------------------------
# classify – basic cases
# ---------------------------------------------------------------------------

class TestClassify:
    def test_last_char_wrong(self):
        result = classify("abc", "abx")
        assert result.states == (C, C, X)
        assert result.correct_count == 2

    def test_perfect_match(self):
        result = classify("cat", "cat")
        assert result.states == (C, C, C)
        assert result.correct_count == 3

    def test_nothing_typed(self):
        result = classify("cat", "")
        assert result.states == (U, U, U)
        assert result.correct_count == 0

    def test_partially_typed(self):
        result = classify("hello", "hx")
        assert result.states == (C, X, U, U, U)
        assert result.correct_count == 1

    def test_both_empty(self):
        assert classify("", "") == Comparison(states=(), correct_count=0)

    def test_empty_target_ignores_typed(self):
        result = classify("", "abc")
        assert result.states == ()
        assert result.correct_count == 0

    def test_case_sensitive(self):
        result = classify("The", "the")
        assert result.states == (X, C, C)

    def test_whitespace_compared_like_any_char(self):
        result = classify("a b", "a_b")
        assert result.states == (C, X, C)


# ---------------------------------------------------------------------------
# classify – over-typing and invariants
# ---------------------------------------------------------------------------

class TestClassifyBounds:
    def test_extra_typed_chars_ignored(self):
        result = classify("ab", "abcdef")
        assert result.states == (C, C)
        assert result.correct_count == 2

    def test_output_length_equals_target(self):
        for typed in ("", "q", "quick", "quick brown fox jumps"):
            assert len(classify("quick", typed).states) == 5

    def test_correct_count_matches_pairs(self):
        target = "The quick brown fox"
        typed = "Thx quack brown"
        expected = sum(1 for i in range(len(typed)) if typed[i] == target[i])
        result = classify(target, typed)
        assert result.correct_count == expected
        assert result.states.count(C) == expected

    def test_indices_past_typed_are_untyped(self):
        result = classify("abcdef", "abc")
        assert all(state is U for state in result.states[3:])
        assert U not in result.states[:3]

    def test_result_is_frozen(self):
        result = classify("a", "a")
        with pytest.raises(AttributeError):
            result.correct_count = 5  # type: ignore[misc]
