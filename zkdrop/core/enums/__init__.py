"""Core enums package.

Usage:
    from zkdrop.core.enums import ErrorCode, Environment
"""

from zkdrop.core.enums.environment import Environment
from zkdrop.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
