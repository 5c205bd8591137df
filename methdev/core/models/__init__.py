"""
Pydantic models for methdev.

All models use Pydantic v2.
"""

from .config import (
    ConfigBaseModel,
    LoggingConfig,
    MethDevConfig,
    OutputConfig,
    SandboxConfig,
    ToolsConfig,
)
from .options import DEFAULT_SANDBOX_SUBPATH, FIXED_INPUT_PATH, Configuration

__all__ = [
    "DEFAULT_SANDBOX_SUBPATH",
    "FIXED_INPUT_PATH",
    "ConfigBaseModel",
    "Configuration",
    "LoggingConfig",
    "MethDevConfig",
    "OutputConfig",
    "SandboxConfig",
    "ToolsConfig",
]
