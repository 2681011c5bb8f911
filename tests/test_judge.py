"""Tests for the regex match judge (``inputStr @Regex pattern``)."""

import logging

from textrules.result import Message
from textrules.text.judge import (
    FORMAT_ERROR,
    INVALID_PATTERN,
    MATCH_FAILED,
    MATCH_SUCCEEDED,
    PROMPT_MESSAGE,
    judge_regex,
    split_on_marker,
)


class TestMatchVerdict:
    """Well-formed selections produce a match verdict."""

    def test_match_succeeded(self):
        test_cases = [
            "123qwe @Regex [0-9]+",
            "abc @Regex ^[a-z]+$",
            "  123 @Regex \\d+  ",
            "hello world @Regex wor",
            "a@Regexa",
        ]

        for selection in test_cases:
            result = judge_regex(selection)
            assert result == Message(MATCH_SUCCEEDED), f"'{selection}' should match, got '{result.text}'"

    def test_match_failed(self):
        test_cases = [
            "abc @Regex [0-9]+",
            "abc1 @Regex ^[a-z]+$",
            "ABC @Regex abc",
            "a@Regexb",
        ]

        for selection in test_cases:
            result = judge_regex(selection)
            assert result == Message(MATCH_FAILED), f"'{selection}' should not match, got '{result.text}'"

    def test_search_is_unanchored(self):
        """A match anywhere in the input counts."""
        assert judge_regex("xx42yy @Regex 42").text == MATCH_SUCCEEDED
        assert judge_regex("xx42yy @Regex ^42").text == MATCH_FAILED


class TestFormatErrors:
    """Selections that are not ``inputStr @Regex pattern`` are rejected."""

    def test_missing_marker(self):
        for selection in ["no marker here", "123qwe [0-9]+", "123 @regex [0-9]+"]:
            assert judge_regex(selection).text == FORMAT_ERROR

    def test_empty_side(self):
        for selection in ["@Regex [0-9]+", "abc @Regex", "  @Regex  "]:
            assert judge_regex(selection).text == FORMAT_ERROR

    def test_more_than_one_marker(self):
        for selection in ["a @Regex b @Regex c", "a @Regex @Regex b"]:
            assert judge_regex(selection).text == FORMAT_ERROR

    def test_split_keeps_whitespace_pieces(self):
        assert split_on_marker("a @Regex b") == ["a ", " b"]
        assert split_on_marker("a @Regex @Regex b") == ["a ", " ", " b"]
        assert split_on_marker("a@Regex@Regexb") == ["a", "b"]


class TestPromptAndInvalidPattern:
    def test_blank_selection_prompts(self):
        for selection in ["", "   ", "\n\t "]:
            result = judge_regex(selection)
            assert result.text == PROMPT_MESSAGE
            assert result.text != FORMAT_ERROR

    def test_invalid_pattern_is_reported(self, caplog):
        with caplog.at_level(logging.WARNING, logger="textrules.text.judge"):
            for selection in ["abc @Regex [0-9", "abc @Regex (", "abc @Regex *a"]:
                assert judge_regex(selection).text == INVALID_PATTERN

        assert "Invalid pattern" in caplog.text
