"""List parent/child process relationships through the host shell."""

from .command_runner import CommandRunner, SubprocessCommandRunner
from .exceptions import (
    ApplicationError,
    ListingExecutionError,
    ListingExitCodeError,
    ParseError,
    ProbeExecutionError,
    ProcessQueryError,
)
from .models import CommandResult, ProcessLink
from .powershell import get_processes, get_processes_sync

__version__ = "0.1.0"

__all__ = [
    "ApplicationError",
    "CommandResult",
    "CommandRunner",
    "ListingExecutionError",
    "ListingExitCodeError",
    "ParseError",
    "ProbeExecutionError",
    "ProcessLink",
    "ProcessQueryError",
    "SubprocessCommandRunner",
    "get_processes",
    "get_processes_sync",
]
