"""Shared catalog constants for the infrastructure layer.

Sentinel and default values read from the catalog that decide whether a clause
is emitted or omitted from the generated DDL.
"""

# System defaults
DEFAULT_TABLESPACE = "pg_default"
DEFAULT_RESOURCE_QUEUE = "pg_default"

# Resource queue priority levels, lowest to highest
PRIORITY_LEVELS = ("min", "low", "medium", "high", "max")
DEFAULT_PRIORITY = "medium"

# Resource queue "unset" sentinels
UNSET_ACTIVE_STATEMENTS = -1
UNSET_MAX_COST = "-1.00"
UNSET_MIN_COST = "0.00"
UNSET_MEMORY_LIMIT = "-1"

# Role sentinels
UNLIMITED_CONNECTIONS = -1

# Time constraint day range (0 = Sunday)
MIN_DAY = 0
MAX_DAY = 6

# An ACL entry with an empty grantee applies to PUBLIC
PUBLIC_GRANTEE = "PUBLIC"
