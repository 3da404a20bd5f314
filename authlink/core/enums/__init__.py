"""Core enums package.

Usage:
    from authlink.core.enums import ErrorCode, Environment
"""

from authlink.core.enums.environment import Environment
from authlink.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
