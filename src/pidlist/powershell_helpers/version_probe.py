"""Detect the major version of the host PowerShell."""

from __future__ import annotations

import logging

from ..command_runner import CommandRunner
from ..config import PowerShellConfig
from ..exceptions import ProbeExecutionError
from .dialects import POWERSHELL_BASE_ARGUMENTS

logger = logging.getLogger(__name__)

VERSION_QUERY = "$PSVersionTable.PSVersion.Major"

UNKNOWN_VERSION = 0


def parse_major_version(text: str) -> int:
    """Read the probe output as an integer, or ``UNKNOWN_VERSION`` if it is not one."""
    stripped = text.strip()
    try:
        return int(stripped, 10)
    except ValueError:
        logger.debug("Unreadable PowerShell version %r; assuming %d", stripped, UNKNOWN_VERSION)
        return UNKNOWN_VERSION


async def probe_major_version(runner: CommandRunner, config: PowerShellConfig) -> int:
    """
    Ask PowerShell for its major version.

    Args:
        runner: Command runner used to spawn PowerShell
        config: Executable and window settings

    Returns:
        Major version, or ``UNKNOWN_VERSION`` when the output is not an integer

    Raises:
        ProbeExecutionError: If PowerShell could not be started
    """
    result = await runner.run(
        config.executable,
        [*POWERSHELL_BASE_ARGUMENTS, VERSION_QUERY],
        hide_window=config.hide_window,
    )
    if result.error is not None:
        raise ProbeExecutionError(cause=result.error) from result.error

    return parse_major_version(result.stdout)
