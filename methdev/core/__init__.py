"""
Core infrastructure for methdev.

This module provides:
- Application bootstrap and the service container
- Settings loading (TOML + environment)
- Custom exception hierarchy
"""

from .bootstrap import bootstrap, reset
from .exceptions import (
    FilesystemFailure,
    MethDevException,
    ParseError,
    SubprocessFailure,
)

__all__ = [
    "FilesystemFailure",
    "MethDevException",
    "ParseError",
    "SubprocessFailure",
    "bootstrap",
    "reset",
]
