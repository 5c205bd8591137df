"""
Deployment resolver for methdev.

Decides where the program is built and run from, and for Termux sandbox
mode copies the project tree into the sandbox before building there.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from ..core.exceptions import FilesystemFailure
from ..core.interfaces.logger import ILogger
from .runner import CommandRunner

if TYPE_CHECKING:
    from ..core.models.options import Configuration

REFLEXIVE_ENTRIES = frozenset({".", ".."})


@contextmanager
def working_directory(path: Path) -> Iterator[Path]:
    """Enter path for the duration of the block, restoring the old cwd on exit."""
    previous = Path.cwd()
    os.chdir(path)
    try:
        yield path
    finally:
        os.chdir(previous)


def is_reflexive_entry(name: str) -> bool:
    """True only for the exact '.' and '..' names."""
    return name in REFLEXIVE_ENTRIES


def list_tree_entries(source: Path) -> list[str]:
    """Top-level entry names of source, hidden ones included, sorted."""
    return sorted(name for name in os.listdir(source) if not is_reflexive_entry(name))


def _is_within(path: Path, parent: Path) -> bool:
    try:
        path.relative_to(parent)
    except ValueError:
        return False
    return True


def _remove_existing(target: Path) -> None:
    if target.is_symlink() or not target.is_dir():
        target.unlink()
    else:
        shutil.rmtree(target)


class DeploymentResolver:
    """
    Resolves the deployment root and runs the build phase.

    Usage:
        resolver = DeploymentResolver(runner)
        resolver.build(config)
        root = resolver.resolve_root(config)
    """

    def __init__(
        self,
        runner: CommandRunner,
        build_command: list[str] | None = None,
        logger: ILogger | None = None,
    ) -> None:
        """
        Initialize deployment resolver.

        Args:
            runner: Runner used for the build command
            build_command: External build command (default: shards build)
            logger: Optional logger
        """
        self._runner = runner
        self.build_command = list(build_command or ["shards", "build"])
        self._logger = logger

    @property
    def logger(self) -> ILogger:
        """Logger given at construction, else the bootstrapped one."""
        if self._logger is None:
            from ..core.di import get_logger

            self._logger = get_logger()
        return self._logger

    def resolve_root(self, config: Configuration) -> Path:
        """Directory holding bin/meth: the sandbox in sandbox mode, else cwd."""
        if config.sandbox_mode:
            return config.destination_dir
        return Path.cwd()

    def build(self, config: Configuration) -> None:
        """
        Run the build phase.

        In sandbox mode the tree is staged first and the build runs inside
        destination_dir; the working directory is restored afterwards even
        if the build fails.

        Raises:
            FilesystemFailure: If staging fails
            SubprocessFailure: If the build command fails
        """
        if not config.sandbox_mode:
            self.logger.info("Building in %s", Path.cwd())
            self._runner.run_command(self.build_command)
            return

        destination = config.destination_dir
        self.stage(Path.cwd(), destination)
        with working_directory(destination):
            self.logger.info("Building in sandbox %s", destination)
            self._runner.run_command(self.build_command)

    def stage(self, source: Path, destination: Path) -> list[str]:
        """
        Copy every entry of source into destination.

        Existing destination entries with the same name are removed first,
        so each copied entry replaces rather than merges. Entries already in
        destination but absent from source are left alone. Every entry is
        checked before anything is created, removed or copied.

        Returns:
            Names of the copied entries

        Raises:
            FilesystemFailure: If destination can't be created, overlaps the
                project tree, or a copy fails
        """
        source = source.resolve()
        destination = destination.resolve()

        try:
            entries = list_tree_entries(source)
        except OSError as e:
            raise FilesystemFailure(
                f"Cannot list project tree: {e.strerror or e}", path=str(source), cause=e
            ) from e

        if destination == source:
            raise FilesystemFailure(
                "Sandbox directory is the project directory", path=str(destination)
            )
        if _is_within(destination, source):
            raise FilesystemFailure(
                "Sandbox directory is inside the project directory; copying would recurse into itself",
                path=str(destination),
            )
        for name in entries:
            if _is_within(source, destination / name):
                raise FilesystemFailure(
                    f"Project directory is inside the sandbox entry {name!r}; "
                    "replacing it would delete the project",
                    path=str(source),
                )

        try:
            destination.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FilesystemFailure(
                f"Cannot create sandbox directory: {e.strerror or e}",
                path=str(destination),
                cause=e,
            ) from e

        self.logger.info("Staging %d entries from %s to %s", len(entries), source, destination)
        for name in entries:
            src = source / name
            dst = destination / name
            try:
                if dst.exists() or dst.is_symlink():
                    _remove_existing(dst)
                if src.is_dir() and not src.is_symlink():
                    shutil.copytree(src, dst, symlinks=True)
                else:
                    shutil.copy2(src, dst, follow_symlinks=False)
            except OSError as e:
                self.logger.error("Copy failed for %s: %s", src, e)
                raise FilesystemFailure(f"Failed to copy {name!r}: {e}", path=str(src), cause=e) from e
            self.logger.debug("Copied %s", name)

        return entries
