from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ProcessLink:
    """Parentage of a single process as reported by the host."""

    parent_pid: int
    pid: int

    def as_tuple(self) -> tuple[int, int]:
        return (self.parent_pid, self.pid)


@dataclass(frozen=True)
class CommandResult:
    """Captured outcome of one external command.

    ``error`` is set when the command could not be spawned at all; in that case
    ``stdout`` is empty and ``exit_code`` is ``None``.
    """

    stdout: str = ""
    exit_code: Optional[int] = None
    error: Optional[BaseException] = None
