"""Parse the two-column table printed by the listing queries."""

from __future__ import annotations

import os
import re
from typing import List, Optional, Sequence

from ..exceptions import ParseError
from ..models import ProcessLink

_WHITESPACE = re.compile(r"\s+")
# Whole token must be digits; a numeric prefix such as "777abc" does not count
_DECIMAL = re.compile(r"[0-9]+")


def _parse_decimal(token: str) -> Optional[int]:
    if not _DECIMAL.fullmatch(token):
        return None
    return int(token, 10)


def _parse_line(line: str) -> Optional[ProcessLink]:
    stripped = line.strip()
    if not stripped:
        return None

    tokens: Sequence[str] = _WHITESPACE.split(stripped)
    if len(tokens) < 2:
        return None

    parent_pid = _parse_decimal(tokens[0])
    pid = _parse_decimal(tokens[1])
    if parent_pid is None or pid is None:
        return None
    return ProcessLink(parent_pid=parent_pid, pid=pid)


def parse_process_links(text: str, *, line_separator: str = os.linesep) -> List[ProcessLink]:
    """
    Convert listing output into process links.

    Lines are split on ``line_separator`` and kept in order. Blank lines, lines
    with fewer than two columns, and lines whose first two columns are not
    non-negative decimal integers are skipped. Columns past the second are
    ignored.

    Args:
        text: Captured standard output of the listing query
        line_separator: Line terminator of the host that produced ``text``

    Returns:
        One link per valid line, as ``(parent_pid, pid)``

    Raises:
        ParseError: If ``text`` cannot be split into lines at all
    """
    try:
        lines = text.split(line_separator)
        links: List[ProcessLink] = []
        for line in lines:
            link = _parse_line(line)
            if link is not None:
                links.append(link)
    except (AttributeError, TypeError, ValueError) as exc:
        raise ParseError(f"Process listing output could not be parsed: {exc}") from exc
    return links
