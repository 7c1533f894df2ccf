"""Printers that write rendered global-object DDL to an output sink.

A sink is anything with a ``write(str)`` method: an ``io.StringIO`` in tests,
an open file or a socket wrapper in the backup tool. Every printer renders all
of its objects before writing, so a precondition failure leaves the sink
untouched for that call.
"""

from __future__ import annotations

from io import StringIO
from typing import Any, Iterable, List, Optional, Protocol, Sequence

from globals_ddl.config import Settings, get_settings
from globals_ddl.infrastructure.sql.core.identifier import (
    escape_string,
    quote_identifier,
)
from globals_ddl.utils.logging import get_logger

from .core import (
    CatalogObject,
    CatalogPreconditionError,
    Database,
    MetadataMap,
    ObjectKind,
    ResourceQueue,
    Role,
    RoleMember,
    SessionGUCs,
    Tablespace,
)
from .ddl_generator import assemble, build_database, build_database_privileges
from .registry import get_builder

logger = get_logger(__name__)


class SupportsWrite(Protocol):
    """Write-only text stream."""

    def write(self, text: str) -> Any: ...


def _render_objects(
    objects: Iterable[CatalogObject],
    metadata_map: MetadataMap,
    settings: Settings,
) -> List[tuple]:
    rendered = []
    for obj in objects:
        entry = get_builder(obj)
        oid = getattr(obj, "oid", None)
        metadata = metadata_map.get(oid) if oid is not None else None
        text = assemble(entry.build(obj, metadata, settings))
        logger.debug("object_rendered", kind=entry.kind.value, oid=oid)
        rendered.append((entry.kind, text))
    return rendered


def print_statements(
    sink: SupportsWrite,
    objects: Iterable[CatalogObject],
    metadata_map: Optional[MetadataMap] = None,
    settings: Optional[Settings] = None,
) -> int:
    """
    Render ``objects`` in order and write them to ``sink``.

    Successive objects are separated by one blank line; consecutive role
    memberships are written on consecutive lines.

    Returns:
        Number of objects written
    """
    settings = settings or get_settings()
    rendered = _render_objects(objects, metadata_map or {}, settings)

    previous_kind = None
    for kind, text in rendered:
        member_run = kind is ObjectKind.ROLE_MEMBER and previous_kind is ObjectKind.ROLE_MEMBER
        if previous_kind is not None and not member_run:
            sink.write("\n")
        sink.write(text + "\n")
        previous_kind = kind

    logger.info("statements_printed", objects=len(rendered))
    return len(rendered)


def render(
    objects: Iterable[CatalogObject],
    metadata_map: Optional[MetadataMap] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Render ``objects`` to a string."""
    buffer = StringIO()
    print_statements(buffer, objects, metadata_map, settings)
    return buffer.getvalue()


def print_session_gucs(sink: SupportsWrite, gucs: SessionGUCs) -> None:
    """Write the session settings a restore runs under."""
    sink.write(
        "SET statement_timeout = 0;\n"
        "SET check_function_bodies = false;\n"
        "SET client_min_messages = error;\n"
        f"SET client_encoding = '{escape_string(gucs.client_encoding)}';\n"
        f"SET standard_conforming_strings = {gucs.standard_conforming_strings};\n"
        f"SET default_with_oids = {gucs.default_with_oids};\n"
    )


def print_create_database_statement(
    sink: SupportsWrite,
    dbname: str,
    databases: Sequence[Database],
    metadata_map: Optional[MetadataMap] = None,
    include_other_privileges: bool = False,
    settings: Optional[Settings] = None,
) -> None:
    """
    Write the full block set for ``dbname``.

    With ``include_other_privileges``, the privilege block of every other
    database in ``databases`` follows; those databases are not created and get
    no comment or owner statements.
    """
    settings = settings or get_settings()
    metadata_map = metadata_map or {}

    target = next((db for db in databases if db.name == dbname), None)
    if target is None:
        logger.error("database_not_found", dbname=dbname)
        raise CatalogPreconditionError(
            ObjectKind.DATABASE,
            None,
            "name",
            f"{dbname!r} is not among the {len(databases)} databases supplied",
        )

    sections = [assemble(build_database(target, metadata_map.get(target.oid), settings))]
    if include_other_privileges:
        for database in databases:
            if database is target:
                continue
            lines = build_database_privileges(database, metadata_map.get(database.oid))
            if lines:
                sections.append("\n".join(lines))

    sink.write("\n\n".join(sections) + "\n")
    logger.info("statements_printed", kind=ObjectKind.DATABASE.value, objects=len(sections))


def print_database_gucs(sink: SupportsWrite, gucs: Iterable[str], dbname: str) -> None:
    """Write one ``ALTER DATABASE ... <guc>;`` per database-level setting."""
    name = quote_identifier(dbname)
    lines = [f"ALTER DATABASE {name} {guc};" for guc in gucs]
    if lines:
        sink.write("\n".join(lines) + "\n")


def print_create_tablespace_statements(
    sink: SupportsWrite,
    tablespaces: Iterable[Tablespace],
    metadata_map: Optional[MetadataMap] = None,
    settings: Optional[Settings] = None,
) -> int:
    return print_statements(sink, tablespaces, metadata_map, settings)


def print_create_resource_queue_statements(
    sink: SupportsWrite,
    queues: Iterable[ResourceQueue],
    metadata_map: Optional[MetadataMap] = None,
    settings: Optional[Settings] = None,
) -> int:
    return print_statements(sink, queues, metadata_map, settings)


def print_create_role_statements(
    sink: SupportsWrite,
    roles: Iterable[Role],
    metadata_map: Optional[MetadataMap] = None,
    settings: Optional[Settings] = None,
) -> int:
    return print_statements(sink, roles, metadata_map, settings)


def print_role_membership_statements(
    sink: SupportsWrite, members: Iterable[RoleMember]
) -> int:
    return print_statements(sink, members)


__all__ = [
    "SupportsWrite",
    "print_statements",
    "render",
    "print_session_gucs",
    "print_create_database_statement",
    "print_database_gucs",
    "print_create_tablespace_statements",
    "print_create_resource_queue_statements",
    "print_create_role_statements",
    "print_role_membership_statements",
]
