"""Shared catalog fixtures for schema rendering tests."""

from __future__ import annotations

from typing import Callable, Dict

import pytest

from globals_ddl.infrastructure.schema import (
    ACL,
    ObjectMetadata,
    Role,
    TimeConstraint,
)

COMMENTS = {
    "DATABASE": "This is a database comment.",
    "TABLESPACE": "This is a tablespace comment.",
    "RESOURCE QUEUE": "This is a resource queue comment.",
    "ROLE": "This is a role comment.",
}


def default_metadata_map(
    kind: str, privileges: bool, owner: bool, comment: bool
) -> Dict[int, ObjectMetadata]:
    """Metadata for OID 1: testrole owns it and holds every privilege."""
    return {
        1: ObjectMetadata(
            owner="testrole" if owner else None,
            comment=COMMENTS[kind] if comment else None,
            privileges=(
                (ACL("testrole", create=True, connect=True, temporary=True),)
                if privileges
                else ()
            ),
        )
    }


@pytest.fixture
def metadata_map() -> Callable[..., Dict[int, ObjectMetadata]]:
    return default_metadata_map


@pytest.fixture
def testrole1() -> Role:
    return Role(
        oid=1,
        name="testrole1",
        superuser=False,
        inherit=False,
        create_role=False,
        create_db=False,
        can_login=False,
        connection_limit=-1,
        password="",
        valid_until="",
        res_queue="pg_default",
        time_constraints=(),
    )


@pytest.fixture
def testrole2() -> Role:
    return Role(
        oid=1,
        name="testRole2",
        superuser=True,
        inherit=True,
        create_role=True,
        create_db=True,
        can_login=True,
        connection_limit=4,
        password="md5a8b2c77dfeba4705f29c094592eb3369",
        valid_until="2099-01-01 00:00:00-08",
        res_queue="testQueue",
        createrexthttp=True,
        createrextgpfd=True,
        createwextgpfd=True,
        createrexthdfs=True,
        createwexthdfs=True,
        time_constraints=(
            TimeConstraint(start_day=0, start_time="13:30:00", end_day=3, end_time="14:30:00"),
            TimeConstraint(start_day=5, start_time="00:00:00", end_day=5, end_time="24:00:00"),
        ),
    )


@pytest.fixture
def testrole1_ddl() -> str:
    return (
        "CREATE ROLE testrole1;\n"
        "ALTER ROLE testrole1 WITH NOSUPERUSER NOINHERIT NOCREATEROLE NOCREATEDB NOLOGIN "
        "RESOURCE QUEUE pg_default;"
    )


@pytest.fixture
def testrole2_ddl() -> str:
    return (
        'CREATE ROLE "testRole2";\n'
        'ALTER ROLE "testRole2" WITH SUPERUSER INHERIT CREATEROLE CREATEDB LOGIN '
        "CONNECTION LIMIT 4 PASSWORD 'md5a8b2c77dfeba4705f29c094592eb3369' "
        "VALID UNTIL '2099-01-01 00:00:00-08' RESOURCE QUEUE \"testQueue\" "
        "CREATEEXTTABLE (protocol='http') "
        "CREATEEXTTABLE (protocol='gpfdist', type='readable') "
        "CREATEEXTTABLE (protocol='gpfdist', type='writable') "
        "CREATEEXTTABLE (protocol='gphdfs', type='readable') "
        "CREATEEXTTABLE (protocol='gphdfs', type='writable');\n"
        "ALTER ROLE \"testRole2\" DENY BETWEEN DAY 0 TIME '13:30:00' AND DAY 3 TIME '14:30:00';\n"
        "ALTER ROLE \"testRole2\" DENY BETWEEN DAY 5 TIME '00:00:00' AND DAY 5 TIME '24:00:00';"
    )
