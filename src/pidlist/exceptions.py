"""Exception classes for process listing.

All package exceptions inherit from :class:`ApplicationError` so callers can
catch the whole family at once.

Exception classes support two patterns:
1. No-argument raise: raise ParseError()
2. Contextual attributes: err = ListingExitCodeError(exit_code=1); raise err
"""

from typing import Any, Optional


class ApplicationError(Exception):
    """Base exception for all application errors.

    Supports keyword arguments that are stored as attributes for debugging.
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = self.__class__.__doc__ or "Application error occurred"
        super().__init__(message)
        for key, value in kwargs.items():
            setattr(self, key, value)


class ProcessQueryError(ApplicationError):
    """Process query failed."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Process query failed"
        super().__init__(message, **kwargs)


class ProbeExecutionError(ProcessQueryError):
    """PowerShell version probe could not be run."""

    def __init__(self, message: str = "", *, cause: Optional[BaseException] = None, **kwargs: Any) -> None:
        if not message:
            message = "pidlist PowerShell version probe failed"
            if cause is not None:
                message += f": {cause}"
        super().__init__(message, cause=cause, **kwargs)


class ListingExecutionError(ProcessQueryError):
    """PowerShell process listing command could not be run."""

    def __init__(self, message: str = "", *, cause: Optional[BaseException] = None, **kwargs: Any) -> None:
        if not message:
            message = "pidlist PowerShell command failed"
            if cause is not None:
                message += f": {cause}"
        super().__init__(message, cause=cause, **kwargs)


class ListingExitCodeError(ProcessQueryError):
    """PowerShell process listing command exited with a non-zero status."""

    def __init__(self, message: str = "", *, exit_code: Optional[int] = None, **kwargs: Any) -> None:
        if not message:
            message = f"pidlist PowerShell command exited with code {exit_code}"
        super().__init__(message, exit_code=exit_code, **kwargs)


class ParseError(ProcessQueryError):
    """Process listing output could not be parsed."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        if not message:
            message = "Process listing output could not be parsed"
        super().__init__(message, **kwargs)


__all__ = [
    "ApplicationError",
    "ListingExecutionError",
    "ListingExitCodeError",
    "ParseError",
    "ProbeExecutionError",
    "ProcessQueryError",
]
