"""Statement builder registry keyed by catalog record type.

Each record type maps to its ObjectKind and the builder that renders it, so
the printers dispatch on the record instead of branching per kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Type

from globals_ddl.config import Settings

from .core import (
    BlockSet,
    Database,
    ObjectKind,
    ObjectMetadata,
    ResourceQueue,
    Role,
    RoleMember,
    Tablespace,
    UnsupportedObjectError,
)
from .ddl_generator import (
    build_database,
    build_resource_queue,
    build_role,
    build_role_member,
    build_tablespace,
)

Builder = Callable[[object, Optional[ObjectMetadata], Optional[Settings]], BlockSet]


@dataclass(frozen=True)
class BuilderEntry:
    kind: ObjectKind
    build: Builder


_BUILDER_REGISTRY: Dict[type, BuilderEntry] = {}


def register_builder(record_type: Type, kind: ObjectKind, build: Builder) -> None:
    """Register the builder for a record type."""
    if record_type in _BUILDER_REGISTRY:
        raise ValueError(
            f"A builder for '{record_type.__name__}' is already registered. "
            "Unregister it first."
        )
    _BUILDER_REGISTRY[record_type] = BuilderEntry(kind, build)


def unregister_builder(record_type: Type) -> None:
    _BUILDER_REGISTRY.pop(record_type, None)


def get_builder(obj: object) -> BuilderEntry:
    """Retrieve the builder entry for a record instance."""
    try:
        return _BUILDER_REGISTRY[type(obj)]
    except KeyError:
        available = sorted(t.__name__ for t in _BUILDER_REGISTRY)
        raise UnsupportedObjectError(
            None,
            getattr(obj, "oid", None),
            "type",
            f"{type(obj).__name__} has no registered builder. Available: {available}",
        ) from None


def list_kinds() -> List[ObjectKind]:
    """List the object kinds that have a registered builder."""
    return [entry.kind for entry in _BUILDER_REGISTRY.values()]


register_builder(Database, ObjectKind.DATABASE, build_database)
register_builder(Tablespace, ObjectKind.TABLESPACE, build_tablespace)
register_builder(ResourceQueue, ObjectKind.RESOURCE_QUEUE, build_resource_queue)
register_builder(Role, ObjectKind.ROLE, build_role)
register_builder(RoleMember, ObjectKind.ROLE_MEMBER, build_role_member)


__all__ = [
    "Builder",
    "BuilderEntry",
    "register_builder",
    "unregister_builder",
    "get_builder",
    "list_kinds",
]
