"""
SQL module for centralized SQL text generation.

This module provides reusable utilities for building SQL statements with
proper identifier quoting, literal escaping and privilege diffing.
"""

from .core.identifier import escape_string, quote_identifier, quote_literal
from .core.privileges import ACL, diff_acl, diff_privileges, render_privileges

__all__ = [
    "quote_identifier",
    "escape_string",
    "quote_literal",
    "ACL",
    "diff_acl",
    "diff_privileges",
    "render_privileges",
]
