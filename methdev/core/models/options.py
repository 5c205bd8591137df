"""
Parsed command-line configuration.

A Configuration is produced once by FlagParser and read by both the build
phase and the run phase. It is frozen; nothing mutates it after parsing.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

# Canonical test input, relative to the invocation directory
FIXED_INPUT_PATH = "test/main.mh"

DEFAULT_SANDBOX_SUBPATH = "temp/crystal/meth"


class Configuration(BaseModel):
    """Flags and derived paths for one methdev invocation.

    Attributes:
        build: Run the build phase
        run_after_build: Run bin/meth after the build phase
        use_debugger: Run bin/meth under the debugger
        sandbox_mode: Stage into and run from destination_dir
        keep_intermediate_files: Forward --keep to bin/meth
        display_tokens: Forward --display-tokens to bin/meth
        display_ast: Forward --display-ast to bin/meth
        extra_link_flags: Unrecognized '-' tokens, in the order given
        fixed_input_path: Source file passed as the first argument
        destination_dir: Sandbox root (only used when sandbox_mode is set)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    build: bool = False
    run_after_build: bool = False
    use_debugger: bool = False
    sandbox_mode: bool = False
    keep_intermediate_files: bool = False
    display_tokens: bool = False
    display_ast: bool = False
    extra_link_flags: tuple[str, ...] = ()
    fixed_input_path: str = FIXED_INPUT_PATH
    destination_dir: Path = Field(
        default_factory=lambda: Path.home() / DEFAULT_SANDBOX_SUBPATH
    )

    @property
    def has_work(self) -> bool:
        """Whether any phase was requested."""
        return self.build or self.run_after_build
