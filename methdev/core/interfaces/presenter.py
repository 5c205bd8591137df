"""
Presenter interface for user-facing output.

Keeps terminal formatting out of the build and run services.
"""

from abc import ABC, abstractmethod


class IPresenter(ABC):
    """
    Interface for output presentation.

    Implementations decide how commands, errors and notices reach the user.
    """

    @abstractmethod
    def print(self, message: str) -> None:
        """Print a message to output."""
        pass

    @abstractmethod
    def print_command(self, command: list[str]) -> None:
        """Echo an external command before it runs."""
        pass

    @abstractmethod
    def print_error(self, message: str) -> None:
        """Print an error message."""
        pass

    @abstractmethod
    def print_warning(self, message: str) -> None:
        """Print a warning message."""
        pass
