"""
Interface definitions for methdev services.
"""

from .logger import ILogger
from .presenter import IPresenter

__all__ = ["ILogger", "IPresenter"]
