"""
Diagnostics logger interface.

Records what methdev did (staging, commands, exit codes) for later
inspection. What the user sees on the terminal goes through IPresenter.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """%-style diagnostics sink used by every methdev service."""

    @abstractmethod
    def debug(self, message: str, *args: Any) -> None: ...

    @abstractmethod
    def info(self, message: str, *args: Any) -> None: ...

    @abstractmethod
    def warning(self, message: str, *args: Any) -> None: ...

    @abstractmethod
    def error(self, message: str, *args: Any) -> None: ...
