"""DDL SQL generation for catalog global objects.

One builder per object kind maps a record and its optional metadata to a
BlockSet; ``assemble`` lays the blocks out as text. Builders are pure: the same
record, metadata and settings always give the same statements.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, List, Optional

from globals_ddl.config import Settings, get_settings
from globals_ddl.infrastructure.constants import (
    MAX_DAY,
    MIN_DAY,
    PRIORITY_LEVELS,
    UNLIMITED_CONNECTIONS,
    UNSET_ACTIVE_STATEMENTS,
    UNSET_MAX_COST,
    UNSET_MEMORY_LIMIT,
    UNSET_MIN_COST,
)
from globals_ddl.infrastructure.sql.core.identifier import (
    escape_string,
    quote_identifier,
)
from globals_ddl.infrastructure.sql.core.privileges import (
    diff_privileges,
    render_privileges,
)
from globals_ddl.utils.logging import get_logger

from .core import (
    BlockSet,
    CatalogPreconditionError,
    Database,
    ObjectKind,
    ObjectMetadata,
    ResourceQueue,
    Role,
    RoleMember,
    Tablespace,
    TimeConstraint,
)

logger = get_logger(__name__)

# Metadata blocks each kind can carry
SUPPORTED_BLOCKS: Dict[ObjectKind, FrozenSet[str]] = {
    ObjectKind.DATABASE: frozenset({"comment", "owner", "privileges"}),
    ObjectKind.TABLESPACE: frozenset({"comment", "owner", "privileges"}),
    ObjectKind.RESOURCE_QUEUE: frozenset({"comment"}),
    ObjectKind.ROLE: frozenset({"comment"}),
}

# (Role attribute, CREATEEXTTABLE arguments), in emission order
EXTERNAL_TABLE_GRANTS = (
    ("createrexthttp", "protocol='http'"),
    ("createrextgpfd", "protocol='gpfdist', type='readable'"),
    ("createwextgpfd", "protocol='gpfdist', type='writable'"),
    ("createrexthdfs", "protocol='gphdfs', type='readable'"),
    ("createwexthdfs", "protocol='gphdfs', type='writable'"),
)


def _precondition_failed(
    kind: ObjectKind, oid: Optional[int], field_name: str, reason: str
) -> CatalogPreconditionError:
    logger.error(
        "precondition_violation",
        kind=kind.value,
        oid=oid,
        field=field_name,
        reason=reason,
    )
    return CatalogPreconditionError(kind, oid, field_name, reason)


def _check_oid(kind: ObjectKind, oid: object) -> None:
    if isinstance(oid, bool) or not isinstance(oid, int) or oid < 0:
        raise _precondition_failed(kind, None, "oid", f"must be a non-negative integer, got {oid!r}")


def _require_text(kind: ObjectKind, oid: Optional[int], field_name: str, value: object) -> str:
    if not isinstance(value, str) or not value:
        raise _precondition_failed(kind, oid, field_name, "must be a non-empty string")
    return value


def _object_name(kind: ObjectKind, obj: object) -> str:
    """Validate the record's key fields and return its quoted name."""
    oid = getattr(obj, "oid")
    _check_oid(kind, oid)
    return quote_identifier(_require_text(kind, oid, "name", getattr(obj, "name")))


def _apply_metadata(
    blocks: BlockSet,
    kind: ObjectKind,
    oid: int,
    name: str,
    metadata: Optional[ObjectMetadata],
) -> BlockSet:
    """Fill the comment, owner and privilege blocks from ``metadata``."""
    if metadata is None:
        return blocks

    supported = SUPPORTED_BLOCKS[kind]
    present = {
        "comment": bool(metadata.comment),
        "owner": bool(metadata.owner),
        "privileges": bool(metadata.privileges),
    }
    for block, is_present in present.items():
        if is_present and block not in supported:
            logger.warning(
                "metadata_block_ignored", kind=kind.value, oid=oid, block=block
            )

    if present["comment"] and "comment" in supported:
        blocks.comment = (
            f"COMMENT ON {kind.value} {name} IS '{escape_string(metadata.comment)}';"
        )
    if present["owner"] and "owner" in supported:
        blocks.owner = f"ALTER {kind.value} {name} OWNER TO {metadata.owner};"
    if present["privileges"] and "privileges" in supported:
        diff = diff_privileges(kind.value, metadata.privileges)
        blocks.privileges = render_privileges(kind.value, name, diff)
    return blocks


def build_database(
    database: Database,
    metadata: Optional[ObjectMetadata] = None,
    settings: Optional[Settings] = None,
) -> BlockSet:
    """CREATE DATABASE, with TABLESPACE unless it is the system default."""
    settings = settings or get_settings()
    name = _object_name(ObjectKind.DATABASE, database)

    statement = f"CREATE DATABASE {name}"
    if database.tablespace and database.tablespace != settings.default_tablespace:
        statement += f" TABLESPACE {quote_identifier(database.tablespace)}"

    blocks = BlockSet(primary=[statement + ";"])
    return _apply_metadata(blocks, ObjectKind.DATABASE, database.oid, name, metadata)


def build_database_privileges(
    database: Database, metadata: Optional[ObjectMetadata] = None
) -> List[str]:
    """Only the privilege statements of a database, for databases not being created."""
    name = _object_name(ObjectKind.DATABASE, database)
    if metadata is None or not metadata.privileges:
        return []
    diff = diff_privileges(ObjectKind.DATABASE.value, metadata.privileges)
    return render_privileges(ObjectKind.DATABASE.value, name, diff)


def build_tablespace(
    tablespace: Tablespace,
    metadata: Optional[ObjectMetadata] = None,
    settings: Optional[Settings] = None,
) -> BlockSet:
    name = _object_name(ObjectKind.TABLESPACE, tablespace)
    filespace = _require_text(
        ObjectKind.TABLESPACE, tablespace.oid, "filespace", tablespace.filespace
    )
    blocks = BlockSet(
        primary=[f"CREATE TABLESPACE {name} FILESPACE {quote_identifier(filespace)};"]
    )
    return _apply_metadata(blocks, ObjectKind.TABLESPACE, tablespace.oid, name, metadata)


def _resource_queue_attributes(queue: ResourceQueue, settings: Settings) -> List[str]:
    priority = queue.priority.lower() if isinstance(queue.priority, str) else queue.priority
    if priority not in PRIORITY_LEVELS:
        raise _precondition_failed(
            ObjectKind.RESOURCE_QUEUE,
            queue.oid,
            "priority",
            f"must be one of {list(PRIORITY_LEVELS)}, got {queue.priority!r}",
        )

    attributes: List[str] = []
    if queue.max_cost != UNSET_MAX_COST:
        attributes.append(f"MAX_COST={queue.max_cost}")
    if queue.cost_overcommit:
        attributes.append("COST_OVERCOMMIT=TRUE")
    if queue.min_cost != UNSET_MIN_COST:
        attributes.append(f"MIN_COST={queue.min_cost}")
    if priority != settings.default_priority:
        attributes.append(f"PRIORITY={priority.upper()}")
    if queue.memory_limit != UNSET_MEMORY_LIMIT:
        attributes.append(f"MEMORY_LIMIT='{escape_string(queue.memory_limit)}'")

    # ACTIVE_STATEMENTS is kept even at its default of 1; at least one
    # attribute is required in the WITH clause.
    if queue.active_statements != UNSET_ACTIVE_STATEMENTS or not attributes:
        attributes.insert(0, f"ACTIVE_STATEMENTS={queue.active_statements}")
    return attributes


def build_resource_queue(
    queue: ResourceQueue,
    metadata: Optional[ObjectMetadata] = None,
    settings: Optional[Settings] = None,
) -> BlockSet:
    """CREATE RESOURCE QUEUE, or ALTER for the reserved default queue."""
    settings = settings or get_settings()
    name = _object_name(ObjectKind.RESOURCE_QUEUE, queue)

    verb = "ALTER" if queue.name == settings.default_resource_queue else "CREATE"
    attributes = ", ".join(_resource_queue_attributes(queue, settings))
    blocks = BlockSet(primary=[f"{verb} RESOURCE QUEUE {name} WITH ({attributes});"])
    return _apply_metadata(blocks, ObjectKind.RESOURCE_QUEUE, queue.oid, name, metadata)


def _role_attributes(role: Role) -> List[str]:
    attributes = [
        "SUPERUSER" if role.superuser else "NOSUPERUSER",
        "INHERIT" if role.inherit else "NOINHERIT",
        "CREATEROLE" if role.create_role else "NOCREATEROLE",
        "CREATEDB" if role.create_db else "NOCREATEDB",
        "LOGIN" if role.can_login else "NOLOGIN",
    ]
    if role.connection_limit < UNLIMITED_CONNECTIONS:
        raise _precondition_failed(
            ObjectKind.ROLE,
            role.oid,
            "connection_limit",
            f"must be -1 or greater, got {role.connection_limit}",
        )
    if role.connection_limit != UNLIMITED_CONNECTIONS:
        attributes.append(f"CONNECTION LIMIT {role.connection_limit}")
    if role.password:
        attributes.append(f"PASSWORD '{escape_string(role.password)}'")
    if role.valid_until:
        attributes.append(f"VALID UNTIL '{escape_string(role.valid_until)}'")

    res_queue = _require_text(ObjectKind.ROLE, role.oid, "res_queue", role.res_queue)
    attributes.append(f"RESOURCE QUEUE {quote_identifier(res_queue)}")

    for flag, arguments in EXTERNAL_TABLE_GRANTS:
        if getattr(role, flag):
            attributes.append(f"CREATEEXTTABLE ({arguments})")
    return attributes


def _deny_statement(role: Role, name: str, constraint: TimeConstraint) -> str:
    for field_name in ("start_day", "end_day"):
        day = getattr(constraint, field_name)
        if isinstance(day, bool) or not isinstance(day, int) or not MIN_DAY <= day <= MAX_DAY:
            raise _precondition_failed(
                ObjectKind.ROLE,
                role.oid,
                f"time_constraints.{field_name}",
                f"must be between {MIN_DAY} and {MAX_DAY}, got {day!r}",
            )
    return (
        f"ALTER ROLE {name} DENY BETWEEN DAY {constraint.start_day} "
        f"TIME '{constraint.start_time}' AND DAY {constraint.end_day} "
        f"TIME '{constraint.end_time}';"
    )


def build_role(
    role: Role,
    metadata: Optional[ObjectMetadata] = None,
    settings: Optional[Settings] = None,
) -> BlockSet:
    """CREATE ROLE plus one combined ALTER ROLE and a DENY per time constraint."""
    name = _object_name(ObjectKind.ROLE, role)

    primary = [
        f"CREATE ROLE {name};",
        f"ALTER ROLE {name} WITH {' '.join(_role_attributes(role))};",
    ]
    primary.extend(_deny_statement(role, name, tc) for tc in role.time_constraints)
    return _apply_metadata(BlockSet(primary=primary), ObjectKind.ROLE, role.oid, name, metadata)


def build_role_member(
    membership: RoleMember,
    metadata: Optional[ObjectMetadata] = None,
    settings: Optional[Settings] = None,
) -> BlockSet:
    """Single GRANT line; role, member and grantor are written as given."""
    for field_name in ("role", "member", "grantor"):
        _require_text(ObjectKind.ROLE_MEMBER, None, field_name, getattr(membership, field_name))

    admin = " WITH ADMIN OPTION" if membership.is_admin else ""
    return BlockSet(
        primary=[
            f"GRANT {membership.role} TO {membership.member}{admin} "
            f"GRANTED BY {membership.grantor};"
        ]
    )


def assemble(blocks: BlockSet) -> str:
    """
    Lay out a BlockSet as text.

    Primary statements go one per line; each present optional block follows
    after exactly one blank line. Absent blocks leave no trace.
    """
    sections = [
        "\n".join(blocks.primary),
        blocks.comment,
        blocks.owner,
        "\n".join(blocks.privileges),
    ]
    return "\n\n".join(section for section in sections if section)


__all__ = [
    "SUPPORTED_BLOCKS",
    "EXTERNAL_TABLE_GRANTS",
    "build_database",
    "build_database_privileges",
    "build_tablespace",
    "build_resource_queue",
    "build_role",
    "build_role_member",
    "assemble",
]
