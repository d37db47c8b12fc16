"""Process listing queries keyed by PowerShell version."""

from __future__ import annotations

from enum import Enum
from typing import Tuple

POWERSHELL_BASE_ARGUMENTS: Tuple[str, ...] = ("-NoProfile", "-NonInteractive", "-Command")

_PROCESS_COLUMNS = "Select-Object ParentProcessId, ProcessId | Format-Table -HideTableHeaders"


class QueryDialect(Enum):
    """Listing query variants.

    Each member carries the lowest PowerShell major version able to run it and
    the query text. Both queries print the same header-less two-column table.
    Members are declared newest first; selection takes the first match.
    """

    CIM = (3, f"Get-CimInstance -ClassName Win32_Process | {_PROCESS_COLUMNS}")
    WMI = (0, f"Get-WmiObject -Class Win32_Process | {_PROCESS_COLUMNS}")

    def __init__(self, min_version: int, query: str) -> None:
        self.min_version = min_version
        self.query = query

    def supports(self, major_version: int) -> bool:
        return major_version >= self.min_version

    def arguments(self) -> Tuple[str, ...]:
        return (*POWERSHELL_BASE_ARGUMENTS, self.query)


def select_dialect(major_version: int) -> QueryDialect:
    """Return the newest dialect the given PowerShell major version supports.

    Anything below the CIM threshold, including the ``0`` produced for an
    unreadable version, falls back to the WMI dialect.
    """
    for dialect in QueryDialect:
        if dialect.supports(major_version):
            return dialect
    return QueryDialect.WMI
