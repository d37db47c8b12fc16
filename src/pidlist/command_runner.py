"""
Command runner used to talk to the host shell.

The runner executes a program, captures its standard output as text and its
exit status, and reports spawn failures through ``CommandResult.error`` rather
than raising. Blocking ``subprocess`` calls are pushed to a worker thread so the
event loop stays responsive while the shell runs.
"""

from __future__ import annotations

import asyncio
import locale
import logging
import subprocess
import sys
from typing import Any, Dict, List, Protocol, Sequence, Union

from .models import CommandResult

logger = logging.getLogger(__name__)

_SW_HIDE = 0


class CommandRunner(Protocol):
    """Minimal contract for anything able to execute a shell command."""

    async def run(
        self,
        executable: str,
        arguments: Sequence[str],
        *,
        hide_window: bool = False,
        verbatim_arguments: bool = False,
    ) -> CommandResult: ...


def build_command_line(
    executable: str,
    arguments: Sequence[str],
    *,
    verbatim_arguments: bool,
    platform: str = sys.platform,
) -> Union[str, List[str]]:
    """
    Build the ``args`` value handed to :func:`subprocess.run`.

    Windows receives a single command line; when ``verbatim_arguments`` is set
    the pieces are joined with single spaces and no quoting, so text such as
    pipelines reaches the shell unaltered. POSIX platforms always receive an
    argv list, which the kernel passes through untouched.

    Args:
        executable: Program to run
        arguments: Arguments for the program
        verbatim_arguments: Skip quoting on Windows
        platform: Value compared against ``"win32"`` (defaults to ``sys.platform``)

    Returns:
        Command line string on verbatim Windows invocations, argv list otherwise
    """
    argv = [executable, *arguments]
    if verbatim_arguments and platform == "win32":
        return " ".join(argv)
    return argv


def _hidden_window_kwargs() -> Dict[str, Any]:
    if sys.platform != "win32":
        return {}
    startupinfo = subprocess.STARTUPINFO()
    startupinfo.dwFlags |= subprocess.STARTF_USESHOWWINDOW
    startupinfo.wShowWindow = _SW_HIDE
    return {"startupinfo": startupinfo, "creationflags": subprocess.CREATE_NO_WINDOW}


class SubprocessCommandRunner:
    """Run commands with :mod:`subprocess` on a worker thread."""

    def __init__(self, encoding: str | None = None) -> None:
        self.encoding = encoding or locale.getpreferredencoding(False)

    async def run(
        self,
        executable: str,
        arguments: Sequence[str],
        *,
        hide_window: bool = False,
        verbatim_arguments: bool = False,
    ) -> CommandResult:
        command = build_command_line(executable, arguments, verbatim_arguments=verbatim_arguments)
        popen_kwargs = _hidden_window_kwargs() if hide_window else {}
        logger.debug("Running %s with %d argument(s)", executable, len(arguments))

        try:
            completed = await asyncio.to_thread(
                subprocess.run,
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                check=False,
                **popen_kwargs,
            )
        except (OSError, ValueError) as exc:
            # ValueError covers arguments subprocess rejects outright, e.g. embedded NUL
            return CommandResult(error=exc)

        # Decoded by hand: text mode would fold CRLF and break line splitting
        stdout = (completed.stdout or b"").decode(self.encoding, errors="replace")
        return CommandResult(stdout=stdout, exit_code=completed.returncode)


__all__ = ["CommandRunner", "SubprocessCommandRunner", "build_command_line"]
