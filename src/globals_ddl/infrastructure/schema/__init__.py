"""Catalog global objects and their DDL rendering.

Records live in ``core``, per-kind builders and the block assembler in
``ddl_generator``, the record-type dispatch table in ``registry`` and the
sink-writing printers in ``printer``.
"""

from .core import (
    ACL,
    BlockSet,
    CatalogObject,
    CatalogPreconditionError,
    Database,
    MetadataMap,
    ObjectKind,
    ObjectMetadata,
    ResourceQueue,
    Role,
    RoleMember,
    SessionGUCs,
    Tablespace,
    TimeConstraint,
    UnsupportedObjectError,
)
from .ddl_generator import (
    assemble,
    build_database,
    build_database_privileges,
    build_resource_queue,
    build_role,
    build_role_member,
    build_tablespace,
)
from .printer import (
    SupportsWrite,
    print_create_database_statement,
    print_create_resource_queue_statements,
    print_create_role_statements,
    print_create_tablespace_statements,
    print_database_gucs,
    print_role_membership_statements,
    print_session_gucs,
    print_statements,
    render,
)
from .registry import get_builder, list_kinds, register_builder, unregister_builder

__all__ = [
    "ACL",
    "BlockSet",
    "CatalogObject",
    "CatalogPreconditionError",
    "Database",
    "MetadataMap",
    "ObjectKind",
    "ObjectMetadata",
    "ResourceQueue",
    "Role",
    "RoleMember",
    "SessionGUCs",
    "Tablespace",
    "TimeConstraint",
    "UnsupportedObjectError",
    "assemble",
    "build_database",
    "build_database_privileges",
    "build_resource_queue",
    "build_role",
    "build_role_member",
    "build_tablespace",
    "SupportsWrite",
    "print_create_database_statement",
    "print_create_resource_queue_statements",
    "print_create_role_statements",
    "print_create_tablespace_statements",
    "print_database_gucs",
    "print_role_membership_statements",
    "print_session_gucs",
    "print_statements",
    "render",
    "get_builder",
    "list_kinds",
    "register_builder",
    "unregister_builder",
]
