"""Catalog record types for global objects.

Immutable value records handed over by the catalog extraction step, plus the
per-object metadata side map and the block set every builder returns.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Mapping, Optional, Tuple, Union

from globals_ddl.infrastructure.constants import DEFAULT_RESOURCE_QUEUE
from globals_ddl.infrastructure.sql.core.privileges import ACL


class ObjectKind(str, Enum):
    """Kinds of global objects; the value is the SQL keyword form."""

    DATABASE = "DATABASE"
    TABLESPACE = "TABLESPACE"
    RESOURCE_QUEUE = "RESOURCE QUEUE"
    ROLE = "ROLE"
    ROLE_MEMBER = "ROLE MEMBER"


class CatalogPreconditionError(ValueError):
    """Raised when a catalog record violates the invariants of its kind.

    This signals a defect in the upstream extraction step; rendering stops
    rather than emitting partially correct SQL.
    """

    def __init__(
        self,
        kind: Optional[ObjectKind],
        oid: Optional[int],
        field_name: str,
        reason: str,
    ):
        self.kind = kind
        self.oid = oid
        self.field = field_name
        self.reason = reason
        label = kind.value if kind is not None else "unknown object"
        super().__init__(f"{label} (oid={oid}): {field_name} {reason}")


class UnsupportedObjectError(CatalogPreconditionError):
    """Raised when no statement builder is registered for a record type."""


@dataclass(frozen=True)
class Database:
    oid: int
    name: str
    tablespace: str


@dataclass(frozen=True)
class Tablespace:
    oid: int
    name: str
    filespace: str


@dataclass(frozen=True)
class ResourceQueue:
    """Resource queue limits, costs kept as the catalog's text rendering."""

    oid: int
    name: str
    active_statements: int
    max_cost: str
    cost_overcommit: bool
    min_cost: str
    priority: str
    memory_limit: str


@dataclass(frozen=True)
class TimeConstraint:
    """A window during which the role may not log in.

    Days run 0 (Sunday) to 6; times are ``HH:MM:SS``.
    """

    start_day: int
    start_time: str
    end_day: int
    end_time: str


@dataclass(frozen=True)
class Role:
    oid: int
    name: str
    superuser: bool = False
    inherit: bool = False
    create_role: bool = False
    create_db: bool = False
    can_login: bool = False
    connection_limit: int = -1
    password: str = ""
    valid_until: str = ""
    res_queue: str = DEFAULT_RESOURCE_QUEUE
    createrexthttp: bool = False
    createrextgpfd: bool = False
    createwextgpfd: bool = False
    createrexthdfs: bool = False
    createwexthdfs: bool = False
    time_constraints: Tuple[TimeConstraint, ...] = ()


@dataclass(frozen=True)
class RoleMember:
    """Membership of ``member`` in ``role``; names are already rendered."""

    role: str
    member: str
    grantor: str
    is_admin: bool = False


@dataclass(frozen=True)
class ObjectMetadata:
    """Owner, comment and ACL of one object; the owner is already rendered."""

    owner: Optional[str] = None
    comment: Optional[str] = None
    privileges: Tuple[ACL, ...] = ()


MetadataMap = Mapping[int, ObjectMetadata]

CatalogObject = Union[Database, Tablespace, ResourceQueue, Role, RoleMember]


@dataclass(frozen=True)
class SessionGUCs:
    """Session settings captured from the source connection."""

    client_encoding: str
    standard_conforming_strings: str
    default_with_oids: str


@dataclass
class BlockSet:
    """Statements for one object, grouped into the blocks the assembler spaces."""

    primary: List[str] = field(default_factory=list)
    comment: Optional[str] = None
    owner: Optional[str] = None
    privileges: List[str] = field(default_factory=list)


__all__ = [
    "ObjectKind",
    "CatalogPreconditionError",
    "UnsupportedObjectError",
    "Database",
    "Tablespace",
    "ResourceQueue",
    "TimeConstraint",
    "Role",
    "RoleMember",
    "ObjectMetadata",
    "MetadataMap",
    "CatalogObject",
    "SessionGUCs",
    "BlockSet",
    "ACL",
]
