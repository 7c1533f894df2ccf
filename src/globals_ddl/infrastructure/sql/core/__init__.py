"""Core SQL utilities package."""

from .identifier import escape_string, quote_identifier, quote_literal
from .privileges import ACL, diff_acl, diff_privileges, render_privileges

__all__ = [
    "quote_identifier",
    "escape_string",
    "quote_literal",
    "ACL",
    "diff_acl",
    "diff_privileges",
    "render_privileges",
]
