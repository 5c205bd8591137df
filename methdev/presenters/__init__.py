"""
Output presenters for the methdev CLI.
"""

from .console import ConsolePresenter

__all__ = ["ConsolePresenter"]
