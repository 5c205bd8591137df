"""
Unit tests for Orchestrator phase sequencing.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from methdev.core.exceptions import FilesystemFailure, SubprocessFailure
from methdev.core.models.config import MethDevConfig
from methdev.core.models.options import Configuration
from methdev.services.orchestrator import Orchestrator

SANDBOX = Path("/home/dev/temp/crystal/meth")


@pytest.fixture
def resolver():
    resolver = MagicMock()
    resolver.resolve_root.side_effect = lambda config: (
        config.destination_dir if config.sandbox_mode else Path("/proj")
    )
    return resolver


@pytest.fixture
def runner():
    return MagicMock()


@pytest.fixture
def orchestrator(resolver, runner):
    return Orchestrator(resolver, runner, presenter=MagicMock(), logger=MagicMock())


def _config(**flags) -> Configuration:
    return Configuration(destination_dir=SANDBOX, **flags)


class TestPhases:
    def test_build_only_never_runs_program(self, orchestrator, resolver, runner):
        assert orchestrator.execute(_config(build=True)) == 0

        resolver.build.assert_called_once()
        runner.run_program.assert_not_called()

    def test_run_only_reuses_previous_build(self, orchestrator, resolver, runner):
        orchestrator.execute(_config(run_after_build=True))

        resolver.build.assert_not_called()
        runner.run_program.assert_called_once()
        assert runner.run_program.call_args.args[1] == Path("/proj")

    def test_build_then_run(self, orchestrator, resolver, runner):
        calls = []
        resolver.build.side_effect = lambda config: calls.append("build")
        runner.run_program.side_effect = lambda config, root: calls.append("run")

        orchestrator.execute(_config(build=True, run_after_build=True))

        assert calls == ["build", "run"]

    def test_nothing_requested(self, orchestrator, resolver, runner):
        assert orchestrator.execute(_config(keep_intermediate_files=True)) == 0

        resolver.build.assert_not_called()
        runner.run_program.assert_not_called()
        orchestrator.presenter.print.assert_called_once()


class TestFailures:
    @pytest.mark.parametrize("sandbox_mode", [False, True])
    @pytest.mark.parametrize("use_debugger", [False, True])
    def test_failed_build_prevents_run(
        self, orchestrator, resolver, runner, sandbox_mode, use_debugger
    ):
        resolver.build.side_effect = SubprocessFailure("shards build failed!", returncode=1)
        config = _config(
            build=True,
            run_after_build=True,
            sandbox_mode=sandbox_mode,
            use_debugger=use_debugger,
        )

        with pytest.raises(SubprocessFailure):
            orchestrator.execute(config)

        runner.run_program.assert_not_called()

    def test_staging_failure_prevents_run(self, orchestrator, resolver, runner):
        resolver.build.side_effect = FilesystemFailure("copy failed")

        with pytest.raises(FilesystemFailure):
            orchestrator.execute(_config(build=True, run_after_build=True, sandbox_mode=True))

        runner.run_program.assert_not_called()

    def test_run_failure_propagates(self, orchestrator, runner):
        runner.run_program.side_effect = SubprocessFailure("bin/meth failed!", returncode=4)

        with pytest.raises(SubprocessFailure) as exc_info:
            orchestrator.execute(_config(run_after_build=True))

        assert exc_info.value.exit_code == 4


class TestSandboxRoot:
    def test_build_and_run_share_sandbox_root(self, orchestrator, resolver, runner):
        config = _config(build=True, run_after_build=True, sandbox_mode=True)

        orchestrator.execute(config)

        resolver.build.assert_called_once_with(config)
        runner.run_program.assert_called_once_with(config, SANDBOX)

    def test_sandbox_run_without_build_uses_sandbox_root(self, orchestrator, resolver, runner):
        """--termux --run without --build runs the last sandbox build, no staging."""
        config = _config(run_after_build=True, sandbox_mode=True)

        orchestrator.execute(config)

        resolver.build.assert_not_called()
        resolver.stage.assert_not_called()
        runner.run_program.assert_called_once_with(config, SANDBOX)


class TestFromSettings:
    def test_wires_tools_and_sandbox_sections(self):
        settings = MethDevConfig.model_validate(
            {
                "tools": {
                    "build_command": "shards build --release",
                    "debugger": "lldb",
                    "executable": "bin/methc",
                },
                "sandbox": {"lib_paths": ["/system/lib64"]},
                "output": {"echo_commands": False},
            }
        )

        orchestrator = Orchestrator.from_settings(settings, presenter=MagicMock(), logger=MagicMock())

        assert orchestrator._resolver.build_command == ["shards", "build", "--release"]
        assert orchestrator._runner.debugger == "lldb"
        assert orchestrator._runner.executable == "bin/methc"
        assert orchestrator._runner.lib_paths == ("/system/lib64",)
        assert orchestrator._runner.echo_commands is False
