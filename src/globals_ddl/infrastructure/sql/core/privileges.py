"""
GRANT/REVOKE generation from access-control entries.

A freshly created object carries implicit default privileges, so replaying an
ACL means revoking everything first and granting back exactly what the entry
holds. The per-kind permission tables below are the only kind-specific input;
the diffing itself does not branch on object kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from globals_ddl.infrastructure.constants import PUBLIC_GRANTEE

# (ACL attribute, SQL keyword) in the order the keywords are emitted
PRIVILEGE_KEYWORDS: Dict[str, Tuple[Tuple[str, str], ...]] = {
    "DATABASE": (
        ("create", "CREATE"),
        ("connect", "CONNECT"),
        ("temporary", "TEMPORARY"),
    ),
    "TABLESPACE": (("create", "CREATE"),),
}

# Kinds whose CREATE implicitly grants something to PUBLIC
PUBLIC_DEFAULT_KINDS: FrozenSet[str] = frozenset({"DATABASE", "TABLESPACE"})


@dataclass(frozen=True)
class ACL:
    """One grantee's permission set on an object.

    An empty grantee stands for PUBLIC. The grantor is informational only and
    does not appear in the rendered statements.
    """

    grantee: str
    grantor: Optional[str] = None
    create: bool = False
    connect: bool = False
    temporary: bool = False


@dataclass(frozen=True)
class PrivilegeStatement:
    verb: str
    label: str
    grantee: str


@dataclass(frozen=True)
class PrivilegeDiff:
    public_revoke_needed: bool
    statements: Tuple[PrivilegeStatement, ...]


def _keywords_for(kind: str) -> Tuple[Tuple[str, str], ...]:
    try:
        return PRIVILEGE_KEYWORDS[kind]
    except KeyError:
        raise ValueError(
            f"{kind} objects carry no privileges. "
            f"Known kinds: {sorted(PRIVILEGE_KEYWORDS)}"
        ) from None


def grantee_name(acl: ACL) -> str:
    """Rendered grantee, mapping the empty grantee to PUBLIC."""
    return acl.grantee or PUBLIC_GRANTEE


def held_privileges(kind: str, acl: ACL) -> List[str]:
    """Keywords the entry holds, in the kind's canonical order."""
    return [keyword for attr, keyword in _keywords_for(kind) if getattr(acl, attr)]


def diff_acl(kind: str, acl: ACL) -> List[PrivilegeStatement]:
    """
    Statements that move one grantee from the default state to ``acl``.

    The grantee is always revoked first. A grantee holding the kind's full
    permission set gets ``ALL``; a partial set is granted as one comma-joined
    list; an empty set leaves only the revoke.

    Examples:
        >>> acl = ACL("bob", create=True, temporary=True)
        >>> [(s.verb, s.label) for s in diff_acl("DATABASE", acl)]
        [('REVOKE', 'ALL'), ('GRANT', 'CREATE,TEMPORARY')]
    """
    grantee = grantee_name(acl)
    statements = [PrivilegeStatement("REVOKE", "ALL", grantee)]

    held = held_privileges(kind, acl)
    if not held:
        return statements
    if len(held) == len(_keywords_for(kind)):
        statements.append(PrivilegeStatement("GRANT", "ALL", grantee))
    else:
        statements.append(PrivilegeStatement("GRANT", ",".join(held), grantee))
    return statements


def diff_privileges(kind: str, acls: Iterable[ACL]) -> PrivilegeDiff:
    """
    Diff a whole ACL list for one object.

    ``public_revoke_needed`` is set when the kind grants PUBLIC defaults and
    there is at least one entry. Each grantee is revoked once, before its first
    grant, however many entries name it.
    """
    acls = list(acls)
    public_revoke_needed = bool(acls) and kind in PUBLIC_DEFAULT_KINDS
    revoked = {PUBLIC_GRANTEE} if public_revoke_needed else set()

    statements: List[PrivilegeStatement] = []
    for acl in acls:
        for statement in diff_acl(kind, acl):
            if statement.verb == "REVOKE":
                if statement.grantee in revoked:
                    continue
                revoked.add(statement.grantee)
            statements.append(statement)
    return PrivilegeDiff(public_revoke_needed, tuple(statements))


def render_privileges(kind: str, name: str, diff: PrivilegeDiff) -> List[str]:
    """
    Render a diff as SQL for the object ``name`` (already quoted).

    Examples:
        >>> diff = diff_privileges("TABLESPACE", [ACL("testrole", create=True)])
        >>> render_privileges("TABLESPACE", "ts", diff)
        ['REVOKE ALL ON TABLESPACE ts FROM PUBLIC;', 'REVOKE ALL ON TABLESPACE ts FROM testrole;', 'GRANT ALL ON TABLESPACE ts TO testrole;']
    """
    lines: List[str] = []
    if diff.public_revoke_needed:
        lines.append(f"REVOKE ALL ON {kind} {name} FROM {PUBLIC_GRANTEE};")
    for statement in diff.statements:
        preposition = "TO" if statement.verb == "GRANT" else "FROM"
        lines.append(
            f"{statement.verb} {statement.label} ON {kind} {name} "
            f"{preposition} {statement.grantee};"
        )
    return lines
