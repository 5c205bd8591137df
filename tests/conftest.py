"""
Shared pytest fixtures for methdev tests.

This module provides fixtures for testing methdev without the real toolchain:
- isolated_env: Temporary HOME, file logging off, fresh DI container
- project_dir: A minimal meth project checkout to run from
- fake_tools: Stand-ins for `shards` and `gdb` on PATH that record calls
"""

import os
import stat
from pathlib import Path

import pytest

from methdev.core.bootstrap import reset

FAKE_SHARDS = """#!/bin/sh
# Records where it ran, then "compiles" bin/meth.
pwd > "$FAKE_TOOLS_LOG/build_cwd"
echo "$@" > "$FAKE_TOOLS_LOG/build_args"
if [ -n "$FAKE_BUILD_EXIT" ]; then
    exit "$FAKE_BUILD_EXIT"
fi
mkdir -p bin
cat > bin/meth <<'EOS'
#!/bin/sh
pwd > "$FAKE_TOOLS_LOG/run_cwd"
echo "$0 $@" > "$FAKE_TOOLS_LOG/run_args"
exit "${FAKE_RUN_EXIT:-0}"
EOS
chmod +x bin/meth
"""

FAKE_GDB = """#!/bin/sh
echo "$@" > "$FAKE_TOOLS_LOG/gdb_args"
"""


def _write_script(path: Path, content: str) -> Path:
    path.write_text(content)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Give every test its own HOME and a clean container.

    Returns:
        The temporary home directory
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("METHDEV_LOGGING__FILE", "false")
    for var in ("FAKE_BUILD_EXIT", "FAKE_RUN_EXIT"):
        monkeypatch.delenv(var, raising=False)

    reset()
    yield home
    reset()


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Create a small meth project and chdir into it.

    Layout:
        shard.yml, .hidden, src/meth.cr, test/main.mh
    """
    project = tmp_path / "meth"
    (project / "src").mkdir(parents=True)
    (project / "test").mkdir()
    (project / "shard.yml").write_text("name: meth\n")
    (project / ".hidden").write_text("dotfile\n")
    (project / "src" / "meth.cr").write_text("puts 1\n")
    (project / "test" / "main.mh").write_text("fn main() {}\n")
    monkeypatch.chdir(project)
    return project


@pytest.fixture
def fake_tools(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Put fake `shards` and `gdb` first on PATH.

    Each writes what it saw into the returned log directory.
    """
    bin_dir = tmp_path / "fake-bin"
    bin_dir.mkdir()
    log_dir = tmp_path / "tool-log"
    log_dir.mkdir()

    _write_script(bin_dir / "shards", FAKE_SHARDS)
    _write_script(bin_dir / "gdb", FAKE_GDB)

    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")
    monkeypatch.setenv("FAKE_TOOLS_LOG", str(log_dir))
    return log_dir
