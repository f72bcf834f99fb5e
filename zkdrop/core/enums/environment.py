"""Client runtime environments.

Used by Settings to pick logging output and token storage defaults.
"""

from enum import Enum


class Environment(str, Enum):
    """Client runtime environment."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"
