"""Helpers for querying processes through Windows PowerShell."""

from .dialects import POWERSHELL_BASE_ARGUMENTS, QueryDialect, select_dialect
from .output_parser import parse_process_links
from .version_probe import VERSION_QUERY, parse_major_version, probe_major_version

__all__ = [
    "POWERSHELL_BASE_ARGUMENTS",
    "QueryDialect",
    "VERSION_QUERY",
    "parse_major_version",
    "parse_process_links",
    "probe_major_version",
    "select_dialect",
]
