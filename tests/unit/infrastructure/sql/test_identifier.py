"""
Unit tests for SQL identifier quoting and literal escaping.
"""

import pytest

from globals_ddl.infrastructure.sql.core.identifier import (
    RESERVED_KEYWORDS,
    escape_string,
    needs_quoting,
    quote_identifier,
    quote_literal,
)


@pytest.mark.unit
class TestQuoteIdentifier:
    """Tests for quote_identifier function."""

    @pytest.mark.parametrize("name", ["testdb", "testrole1", "_private", "pg_default", "a1_b2"])
    def test_simple_names_stay_bare(self, name):
        """Lowercase names of letters, digits and underscores are not quoted."""
        assert quote_identifier(name) == name

    def test_mixed_case_is_quoted(self):
        assert quote_identifier("testRole2") == '"testRole2"'

    def test_leading_digit_is_quoted(self):
        assert quote_identifier("1queue") == '"1queue"'

    def test_special_characters_are_quoted(self):
        assert quote_identifier("my-db") == '"my-db"'
        assert quote_identifier("my db") == '"my db"'

    def test_non_ascii_is_quoted(self):
        assert quote_identifier("年金") == '"年金"'

    @pytest.mark.parametrize("keyword", ["user", "group", "table", "select", "all"])
    def test_reserved_keywords_are_quoted(self, keyword):
        assert keyword in RESERVED_KEYWORDS
        assert quote_identifier(keyword) == f'"{keyword}"'

    def test_non_reserved_keyword_stays_bare(self):
        """Unreserved keywords such as 'role' are valid bare identifiers."""
        assert quote_identifier("role") == "role"

    def test_embedded_double_quote_is_doubled(self):
        assert quote_identifier('my"db') == '"my""db"'

    def test_empty_name_is_quoted(self):
        assert quote_identifier("") == '""'

    def test_idempotent_on_safe_names(self):
        once = quote_identifier("testdb")
        assert quote_identifier(once) == once

    def test_needs_quoting(self):
        assert needs_quoting("Mixed")
        assert not needs_quoting("lower")


@pytest.mark.unit
class TestLiterals:
    """Tests for string literal escaping."""

    def test_escape_single_quote(self):
        assert escape_string("It's a comment") == "It''s a comment"

    def test_escape_leaves_double_quotes(self):
        assert escape_string('say "hi"') == 'say "hi"'

    def test_quote_literal(self):
        assert quote_literal("O'Brien") == "'O''Brien'"
