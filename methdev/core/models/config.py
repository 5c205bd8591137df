"""
Configuration models.

Provides Pydantic models for the methdev settings sections.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["debug", "info", "warning", "error"]


def _split_list(v: Any) -> Any:
    """Accept a whitespace or comma separated string where a list is expected."""
    if isinstance(v, str):
        return [x for x in v.replace(",", " ").split() if x]
    return v


class ConfigBaseModel(BaseModel):
    """Settings section; unknown keys in config files are ignored."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)


class ToolsConfig(ConfigBaseModel):
    """External tools invoked by methdev."""

    build_command: list[str] = Field(default_factory=lambda: ["shards", "build"])
    debugger: str = "gdb"
    executable: str = "bin/meth"

    @field_validator("build_command", mode="before")
    @classmethod
    def parse_build_command(cls, v: Any) -> Any:
        """Allow `build_command = "shards build --release"`."""
        return _split_list(v)

    @field_validator("build_command")
    @classmethod
    def require_program(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("build_command must name a program")
        return v


class SandboxConfig(ConfigBaseModel):
    """Termux sandbox deployment section."""

    # Relative to the home directory
    destination: str = "temp/crystal/meth"
    # Forwarded as -L<path> link flags when running in the sandbox,
    # e.g. ["/system/lib64", "/apex/com.android.runtime/lib64/bionic"]
    lib_paths: list[str] = Field(default_factory=list)

    @field_validator("lib_paths", mode="before")
    @classmethod
    def parse_lib_paths(cls, v: Any) -> Any:
        return _split_list(v)

    @field_validator("destination")
    @classmethod
    def strip_leading_slash(cls, v: str) -> str:
        """Keep the destination home-relative."""
        return v.strip().lstrip("/") or "temp/crystal/meth"


class OutputConfig(ConfigBaseModel):
    """User-facing output section."""

    echo_commands: bool = True
    color: bool = True


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = True


class MethDevConfig(ConfigBaseModel):
    """All settings sections, as handed to Orchestrator.from_settings()."""

    tools: ToolsConfig = Field(default_factory=ToolsConfig)
    sandbox: SandboxConfig = Field(default_factory=SandboxConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

