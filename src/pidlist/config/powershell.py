"""
PowerShell invocation settings.

Values come from the environment (or a ``.env`` file) with defaults that match
a stock Windows install:

- ``PIDLIST_POWERSHELL_EXECUTABLE``: program used for the probe and the listing
- ``PIDLIST_HIDE_WINDOW``: suppress the console window of spawned shells
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial

from .runtime import env_bool, env_str

DEFAULT_POWERSHELL_EXECUTABLE = "powershell"


def _executable_from_env() -> str:
    value = env_str("PIDLIST_POWERSHELL_EXECUTABLE", or_value=DEFAULT_POWERSHELL_EXECUTABLE)
    return value if value is not None else DEFAULT_POWERSHELL_EXECUTABLE


@dataclass(frozen=True)
class PowerShellConfig:
    """
    Settings shared by every PowerShell invocation.

    Attributes:
        executable: Name or path of the PowerShell binary
        hide_window: Whether spawned shells should run without a visible console
    """

    executable: str = field(default_factory=_executable_from_env)
    hide_window: bool = field(default_factory=partial(env_bool, "PIDLIST_HIDE_WINDOW", True))


def load_powershell_config() -> PowerShellConfig:
    """Build a :class:`PowerShellConfig` from the current environment."""
    return PowerShellConfig()
