"""
globals-ddl - Catalog globals to DDL serialization.

Renders databases, tablespaces, resource queues, roles and role memberships,
together with their owners, comments and privileges, as the ordered SQL
statements that recreate them on a target cluster.
"""

__version__ = "0.1.0"
