"""
Line parsing for geralt's rendered output.

geralt prints task lines as ``[<state>] (<id>[:<alias>]) <description>``,
usually indented under tree drawing characters. Everything that depends on
that format lives here, so a structured output mode can replace the regular
expressions without touching callers.

Known limitation: the id group is found by scanning backward from the end of
the line, so a description or alias containing ``(<digits>)`` or a stray
``)`` can resolve to the wrong group. geralt does not guarantee a stricter
grammar, so none is assumed.
"""

import re

from geralt_tui.buffer import CompletionState
from geralt_tui.errors import NoStateMarker

TASK_ID_RE = re.compile(r"\((\d+)(?::.*)?\)")
STATE_RE = re.compile(r"\[([ ~x*])\]")

STATE_CHARS = {
    " ": CompletionState.INACTIVE,
    "~": CompletionState.IN_PROGRESS,
    "x": CompletionState.COMPLETED,
    "*": CompletionState.COMPLETED,
}


def line_bounds(text: str, cursor_offset: int) -> tuple[int, int]:
    """Return ``(start, end)`` of the line containing ``cursor_offset``.

    ``end`` excludes the newline.
    """
    cursor_offset = max(0, min(cursor_offset, len(text)))
    start = text.rfind("\n", 0, cursor_offset) + 1
    end = text.find("\n", cursor_offset)
    if end == -1:
        end = len(text)
    return start, end


def current_line(text: str, cursor_offset: int) -> str:
    """Return the line of ``text`` that contains ``cursor_offset``."""
    start, end = line_bounds(text, cursor_offset)
    return text[start:end]


def resolve_task_id(text: str, cursor_offset: int) -> int | None:
    """Return the task id on the line under the cursor, or None.

    Scans backward from the end of the line and returns the id of the first
    position where ``(<digits>[:<anything>])`` matches.
    """
    line = current_line(text, cursor_offset)
    for pos in range(len(line) - 1, -1, -1):
        if line[pos] != "(":
            continue
        match = TASK_ID_RE.match(line, pos)
        if match:
            return int(match.group(1))
    return None


def resolve_state(line_text: str) -> CompletionState:
    """Return the completion state of the first marker on the line.

    Raises:
        NoStateMarker: the line carries none of the four markers.
    """
    match = STATE_RE.search(line_text)
    if not match:
        raise NoStateMarker(f"no completion marker in {line_text!r}")
    return STATE_CHARS[match.group(1)]
