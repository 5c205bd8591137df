"""
Custom exception hierarchy for methdev.

Every failure in methdev is fatal. The CLI catches MethDevException,
prints the message and exits with the exception's exit_code.
"""

from __future__ import annotations


class MethDevException(Exception):
    """
    Base exception for all methdev errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (paths, commands, etc.)
        exit_code: Exit code the CLI terminates with (default: 1)
    """

    exit_code: int = 1

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Command-line Errors
# =============================================================================


class ParseError(MethDevException):
    """
    An argument that is neither a known flag nor a link flag.

    Raised before any subprocess runs; no partial configuration is used.
    """

    def __init__(
        self,
        message: str,
        *,
        token: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.token = token
        super().__init__(message, context=context, cause=cause)


# =============================================================================
# Execution Errors
# =============================================================================


class SubprocessFailure(MethDevException):
    """
    An external command exited non-zero or could not be started.

    The CLI exits with the same code the command returned.
    """

    def __init__(
        self,
        message: str,
        *,
        command: list[str] | None = None,
        returncode: int = 1,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.command = list(command) if command else []
        self.returncode = returncode
        # A child killed by a signal reports a negative code
        self.exit_code = returncode if returncode > 0 else 1
        super().__init__(message, context=context, cause=cause)


class FilesystemFailure(MethDevException):
    """
    Directory creation or tree copy failed while staging the sandbox.

    No rollback is attempted; the destination may be partially updated.
    """

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if path:
            ctx["path"] = path
        super().__init__(message, context=ctx, cause=cause)
