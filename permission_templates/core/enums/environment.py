"""Runtime environment types.

Used by Settings and the container to pick environment-specific behavior
(log rendering, SQL echo).
"""

from enum import Enum


class Environment(str, Enum):
    """Where the process runs; drives log rendering and SQL echo."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
