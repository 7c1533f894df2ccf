"""
Infrastructure Layer

Reusable SQL rendering services that turn catalog records into DDL text.

Components:
- sql: identifier quoting and privilege diffing
- schema: catalog records, per-kind statement builders and printers

Usage:
    from globals_ddl.infrastructure.schema import print_statements
    from globals_ddl.infrastructure.sql import quote_identifier
"""

__all__: list[str] = []
