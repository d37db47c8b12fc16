"""
PowerShell Process Listing

Lists ``(parent_pid, pid)`` pairs for every process on a Windows host. The
PowerShell version is probed first so the listing can use ``Get-CimInstance``
where available and fall back to ``Get-WmiObject`` on older shells.

Usage:
    from pidlist.powershell import get_processes

    links = await get_processes()
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import List, Optional

from .command_runner import CommandRunner, SubprocessCommandRunner
from .config import PowerShellConfig, load_powershell_config
from .exceptions import ListingExecutionError, ListingExitCodeError
from .models import ProcessLink
from .powershell_helpers import parse_process_links, probe_major_version, select_dialect

logger = logging.getLogger(__name__)


async def get_processes(
    runner: Optional[CommandRunner] = None,
    config: Optional[PowerShellConfig] = None,
    *,
    line_separator: str = os.linesep,
) -> List[ProcessLink]:
    """
    Return the parentage of every running process.

    Two PowerShell processes are spawned in sequence: the version probe, then
    the listing query. The first failure stops the sequence.

    Args:
        runner: Command runner; defaults to :class:`SubprocessCommandRunner`
        config: PowerShell settings; defaults to :func:`load_powershell_config`
        line_separator: Line terminator of the listing output

    Returns:
        Links in the order PowerShell printed them

    Raises:
        ProbeExecutionError: If the version probe could not be started
        ListingExecutionError: If the listing query could not be started
        ListingExitCodeError: If the listing query exited with a non-zero status
        ParseError: If the listing output is structurally unreadable
        ConfigurationError: If ``config`` is omitted and the environment holds a malformed value
    """
    runner = runner if runner is not None else SubprocessCommandRunner()
    config = config if config is not None else load_powershell_config()

    major_version = await probe_major_version(runner, config)
    dialect = select_dialect(major_version)
    logger.debug("PowerShell %d detected; listing processes with %s", major_version, dialect.name)

    result = await runner.run(
        config.executable,
        dialect.arguments(),
        hide_window=config.hide_window,
        verbatim_arguments=True,
    )
    if result.error is not None:
        raise ListingExecutionError(cause=result.error) from result.error
    if result.exit_code != 0:
        raise ListingExitCodeError(exit_code=result.exit_code)

    links = parse_process_links(result.stdout, line_separator=line_separator)
    logger.debug("Parsed %d process link(s)", len(links))
    return links


def get_processes_sync(
    runner: Optional[CommandRunner] = None,
    config: Optional[PowerShellConfig] = None,
) -> List[ProcessLink]:
    """Synchronously list process links.

    Intended for scripts that have no event loop of their own. It spins a
    short-lived event loop to await :func:`get_processes`.

    Raises:
        RuntimeError: If called while an event loop is already running.
    """

    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        # Absence of running loop - expected when called from synchronous context
        loop = None

    if loop is not None and loop.is_running():
        raise RuntimeError("get_processes_sync cannot run inside an active event loop. " "Use the async get_processes API instead.")

    return asyncio.run(get_processes(runner, config))
