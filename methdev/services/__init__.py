"""
Services for methdev: flag parsing, deployment, command execution.
"""

from .deployment import DeploymentResolver, working_directory
from .flags import FlagParser
from .orchestrator import Orchestrator
from .runner import CommandRunner, assemble_arguments, format_arguments

__all__ = [
    "CommandRunner",
    "DeploymentResolver",
    "FlagParser",
    "Orchestrator",
    "assemble_arguments",
    "format_arguments",
    "working_directory",
]
