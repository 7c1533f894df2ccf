"""
SQL identifier and literal handling utilities.

Provides functions for quoting identifiers only where PostgreSQL would
otherwise fold or reject them, and for escaping text placed inside
single-quoted string literals.
"""

import re

_SIMPLE_IDENTIFIER = re.compile(r"^[a-z_][a-z0-9_]*$")

# PostgreSQL keywords that are reserved in every context
RESERVED_KEYWORDS = frozenset(
    {
        "all", "analyse", "analyze", "and", "any", "array", "as", "asc",
        "asymmetric", "both", "case", "cast", "check", "collate", "column",
        "constraint", "create", "current_catalog", "current_date",
        "current_role", "current_time", "current_timestamp", "current_user",
        "default", "deferrable", "desc", "distinct", "do", "else", "end",
        "except", "false", "fetch", "for", "foreign", "from", "grant",
        "group", "having", "in", "initially", "intersect", "into", "lateral",
        "leading", "limit", "localtime", "localtimestamp", "not", "null",
        "offset", "on", "only", "or", "order", "placing", "primary",
        "references", "returning", "select", "session_user", "some",
        "symmetric", "table", "then", "to", "trailing", "true", "union",
        "unique", "user", "using", "variadic", "when", "where", "window",
        "with",
    }
)


def needs_quoting(name: str) -> bool:
    """Return True if ``name`` cannot appear bare in a SQL statement."""
    return not _SIMPLE_IDENTIFIER.match(name) or name in RESERVED_KEYWORDS


def quote_identifier(name: str) -> str:
    """
    Quote a SQL identifier if PostgreSQL requires it.

    Names made only of lowercase letters, digits and underscores, not starting
    with a digit and not reserved, are returned unchanged. Anything else is
    wrapped in double quotes with embedded double quotes doubled.

    Examples:
        >>> quote_identifier("testrole1")
        'testrole1'
        >>> quote_identifier("testRole2")
        '"testRole2"'
        >>> quote_identifier("user")
        '"user"'
        >>> quote_identifier('my"db')
        '"my""db"'
    """
    if not needs_quoting(name):
        return name
    escaped = name.replace('"', '""')
    return f'"{escaped}"'


def escape_string(value: str) -> str:
    """
    Escape text for use inside a single-quoted SQL string literal.

    Examples:
        >>> escape_string("it's")
        "it''s"
    """
    return value.replace("'", "''")


def quote_literal(value: str) -> str:
    """Wrap escaped text in single quotes."""
    return f"'{escape_string(value)}'"
