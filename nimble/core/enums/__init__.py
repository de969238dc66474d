"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from nimble.core.enums import ErrorCode, Environment
"""

from nimble.core.enums.environment import Environment
from nimble.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
