"""Tests for right pattern parsing."""

import pytest

from rightsgate.errors import PatternError
from rightsgate.pattern import format_pattern, is_pattern, parse_pattern


class TestParsePattern:
    def test_valid_pattern(self):
        assert parse_pattern("read:own/post") == ("read", "own", "post")

    def test_word_characters(self):
        assert parse_pattern("bulk_edit:team_2/blog_post1") == ("bulk_edit", "team_2", "blog_post1")

    @pytest.mark.parametrize(
        "pattern",
        [
            "not-a-pattern",
            "",
            "read:own",
            "read/own/post",
            "read:own/",
            ":own/post",
            "read::own/post",
            " read:own/post",
            "read:own/post ",
            "read:own/post\n",
            "read:own/post/extra",
            "xx read:own/post",
            "read:own/blog-post",
        ],
    )
    def test_malformed_patterns_rejected(self, pattern):
        with pytest.raises(PatternError) as exc_info:
            parse_pattern(pattern)
        assert exc_info.value.pattern == pattern

    def test_non_string_rejected(self):
        with pytest.raises(PatternError):
            parse_pattern(None)  # type: ignore[arg-type]

    def test_pattern_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_pattern("nope")


class TestIsPattern:
    def test_valid(self):
        assert is_pattern("delete:any/comment") is True

    def test_invalid(self):
        assert is_pattern("delete:any") is False
        assert is_pattern(42) is False  # type: ignore[arg-type]


class TestFormatPattern:
    def test_format(self):
        assert format_pattern("read", "own", "post") == "read:own/post"
