"""
Tests for methdev settings loading.

Tests verify:
- Defaults match the Pydantic model defaults
- .methdev.toml and pyproject.toml [tool.methdev] are discovered
- Environment variables override file values
- A broken or invalid config file is reported, not fatal
"""

from pathlib import Path

import pytest

from methdev.core.models.config import MethDevConfig, SandboxConfig, ToolsConfig
from methdev.core.settings import find_config_file, load_settings


class TestDefaults:
    def test_defaults_without_config_file(self, tmp_path: Path) -> None:
        settings = load_settings(start_dir=str(tmp_path))

        assert settings.tools.build_command == ["shards", "build"]
        assert settings.tools.debugger == "gdb"
        assert settings.tools.executable == "bin/meth"
        assert settings.sandbox.destination == "temp/crystal/meth"
        assert settings.sandbox.lib_paths == []
        assert settings.output.echo_commands is True
        assert settings.config_file is None

    def test_settings_match_model_defaults(self, tmp_path: Path) -> None:
        settings = load_settings(start_dir=str(tmp_path))
        expected = MethDevConfig().model_dump()
        expected["logging"]["file"] = False  # set by the test environment

        assert settings.to_config().model_dump() == expected


class TestConfigDiscovery:
    def test_finds_methdev_toml_in_parent(self, tmp_path: Path) -> None:
        (tmp_path / ".methdev.toml").write_text('[tools]\ndebugger = "lldb"\n')
        nested = tmp_path / "src" / "deep"
        nested.mkdir(parents=True)

        assert find_config_file(str(nested)) == tmp_path / ".methdev.toml"

    def test_loads_methdev_toml(self, tmp_path: Path) -> None:
        (tmp_path / ".methdev.toml").write_text(
            "[tools]\n"
            'build_command = ["shards", "build", "--release"]\n'
            "\n"
            "[sandbox]\n"
            'destination = "sandbox/meth"\n'
            'lib_paths = ["/system/lib64", "/apex/com.android.runtime/lib64/bionic"]\n'
        )

        settings = load_settings(start_dir=str(tmp_path))

        assert settings.tools.build_command == ["shards", "build", "--release"]
        assert settings.sandbox.destination == "sandbox/meth"
        assert settings.sandbox.lib_paths == [
            "/system/lib64",
            "/apex/com.android.runtime/lib64/bionic",
        ]
        assert settings.config_file == str(tmp_path / ".methdev.toml")

    def test_loads_pyproject_tool_table(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[project]\nname = "x"\n\n[tool.methdev.output]\necho_commands = false\n'
        )

        settings = load_settings(start_dir=str(tmp_path))

        assert settings.output.echo_commands is False
        assert settings.config_file == str(tmp_path / "pyproject.toml")

    def test_ignores_pyproject_without_tool_table(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n')

        assert find_config_file(str(tmp_path)) != tmp_path / "pyproject.toml"

    def test_broken_toml_is_reported(self, tmp_path: Path) -> None:
        (tmp_path / ".methdev.toml").write_text("[tools\n")

        settings = load_settings(start_dir=str(tmp_path))

        assert settings.config_error is not None
        assert settings.tools.debugger == "gdb"

    def test_invalid_values_are_reported(self, tmp_path: Path) -> None:
        (tmp_path / ".methdev.toml").write_text("[tools]\nbuild_command = []\n")

        settings = load_settings(start_dir=str(tmp_path))

        assert "build_command" in settings.config_error
        assert settings.tools.build_command == ["shards", "build"]
        assert settings.config_file is None


class TestEnvironmentOverrides:
    def test_env_beats_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / ".methdev.toml").write_text('[tools]\ndebugger = "lldb"\n')
        monkeypatch.setenv("METHDEV_TOOLS__DEBUGGER", "cgdb")

        settings = load_settings(start_dir=str(tmp_path))

        assert settings.tools.debugger == "cgdb"

    def test_logging_from_env(self, tmp_path: Path) -> None:
        settings = load_settings(start_dir=str(tmp_path))

        assert settings.logging.file is False


class TestSectionValidation:
    def test_build_command_from_string(self) -> None:
        assert ToolsConfig(build_command="make  -j4").build_command == ["make", "-j4"]

    def test_empty_build_command_rejected(self) -> None:
        with pytest.raises(ValueError):
            ToolsConfig(build_command=[])

    def test_lib_paths_from_comma_string(self) -> None:
        config = SandboxConfig(lib_paths="/system/lib64, /apex/lib")

        assert config.lib_paths == ["/system/lib64", "/apex/lib"]

    def test_destination_stays_home_relative(self) -> None:
        assert SandboxConfig(destination="/temp/meth").destination == "temp/meth"

