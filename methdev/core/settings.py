"""
Settings for methdev.

Values come from, highest priority first: METHDEV_<SECTION>__<FIELD>
environment variables, the nearest .methdev.toml or pyproject.toml
[tool.methdev] table, and the model defaults. A config file that can't be
read or validated is reported and ignored rather than aborting the run.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from pydantic import PrivateAttr, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from .di import get_logger
from .models.config import (
    LoggingConfig,
    MethDevConfig,
    OutputConfig,
    SandboxConfig,
    ToolsConfig,
)

CONFIG_FILE_NAME = ".methdev.toml"


def _methdev_table(path: Path) -> dict[str, Any] | None:
    """The methdev settings in path, or None for a pyproject without them."""
    with open(path, "rb") as f:
        data = tomllib.load(f)
    if path.name == "pyproject.toml":
        return data.get("tool", {}).get("methdev")
    return data


def find_config_file(start_dir: str | None = None) -> Path | None:
    """
    Walk up from start_dir (or cwd) to the first methdev config file.

    A pyproject.toml only counts when it has a [tool.methdev] table; one
    that can't be parsed is skipped.
    """
    start = Path(start_dir) if start_dir else Path.cwd()

    for parent in [start, *start.parents]:
        candidate = parent / CONFIG_FILE_NAME
        if candidate.exists():
            return candidate

        pyproject = parent / "pyproject.toml"
        if not pyproject.exists():
            continue
        try:
            if _methdev_table(pyproject) is not None:
                return pyproject
        except (tomllib.TOMLDecodeError, OSError) as e:
            get_logger().debug("Skipping %s: %s", pyproject, e)

    return None


class MethDevSettings(BaseSettings):
    """Merged methdev settings; see load_settings()."""

    model_config = SettingsConfigDict(
        env_prefix="METHDEV_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    tools: ToolsConfig = ToolsConfig()
    sandbox: SandboxConfig = SandboxConfig()
    output: OutputConfig = OutputConfig()
    logging: LoggingConfig = LoggingConfig()

    _config_file: str | None = PrivateAttr(default=None)
    _config_error: str | None = PrivateAttr(default=None)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # load_settings() passes the config file table as init values,
        # so the environment has to come first to override it
        return (env_settings, init_settings)

    @property
    def config_file(self) -> str | None:
        """Path of the TOML file the settings were read from, if any."""
        return self._config_file

    @property
    def config_error(self) -> str | None:
        """Why a config file that was found got ignored."""
        return self._config_error

    def to_config(self) -> MethDevConfig:
        """Snapshot the settings as a plain MethDevConfig."""
        return MethDevConfig(
            tools=self.tools,
            sandbox=self.sandbox,
            output=self.output,
            logging=self.logging,
        )


def load_settings(start_dir: str | None = None) -> MethDevSettings:
    """
    Load methdev settings for a run started in start_dir (default: cwd).

    Returns:
        MethDevSettings; config_file names the file used and config_error
        explains a file that was found but ignored.
    """
    path = find_config_file(start_dir)
    if path is None:
        return MethDevSettings()

    try:
        settings = MethDevSettings(**(_methdev_table(path) or {}))
    except (tomllib.TOMLDecodeError, OSError, ValidationError) as e:
        get_logger().warning("Ignoring config file %s: %s", path, e)
        settings = MethDevSettings()
        settings._config_error = f"Ignoring config file {path}: {e}"
        return settings

    settings._config_file = str(path)
    return settings
