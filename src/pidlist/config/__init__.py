"""Shared configuration helpers and dataclasses."""

from .errors import ConfigurationError
from .powershell import DEFAULT_POWERSHELL_EXECUTABLE, PowerShellConfig, load_powershell_config
from .runtime import env_bool, env_str, reset_default_values

__all__ = [
    "ConfigurationError",
    "DEFAULT_POWERSHELL_EXECUTABLE",
    "PowerShellConfig",
    "env_bool",
    "env_str",
    "load_powershell_config",
    "reset_default_values",
]
