"""
View buffer model.

A view buffer holds the latest render of one view. Which view it is
(main or scoped to a root task) is carried by an explicit descriptor
rather than decoded from the buffer's display name.
"""

from __future__ import annotations

import re
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

BUFFER_PREFIX = "*geralt"
ROOT_MARKER = " root:"
BUFFER_SUFFIX = "*"

_ROOT_NAME_RE = re.compile(re.escape(ROOT_MARKER) + r"(\d+)")


class CompletionState(Enum):
    """Completion state shown by a task's bracketed marker."""

    INACTIVE = "inactive"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


@dataclass(frozen=True)
class ViewDescriptor:
    """Which view a buffer shows: the main view, or the tree under ``root``."""

    root: int | None = None

    @classmethod
    def main(cls) -> ViewDescriptor:
        return cls()

    @classmethod
    def scoped(cls, root: int) -> ViewDescriptor:
        return cls(root=root)

    @classmethod
    def from_buffer_name(cls, name: str) -> ViewDescriptor:
        """Recover a descriptor from a buffer name such as ``*geralt root:42*``."""
        match = _ROOT_NAME_RE.search(name)
        if match:
            return cls(root=int(match.group(1)))
        return cls()

    @property
    def is_scoped(self) -> bool:
        return self.root is not None

    @property
    def buffer_name(self) -> str:
        if self.root is None:
            return f"{BUFFER_PREFIX}{BUFFER_SUFFIX}"
        return f"{BUFFER_PREFIX}{ROOT_MARKER}{self.root}{BUFFER_SUFFIX}"


@dataclass
class ViewBuffer:
    """Mutable text region with a cursor offset and a read-only flag."""

    descriptor: ViewDescriptor = field(default_factory=ViewDescriptor)
    text: str = ""
    cursor: int = 0
    read_only: bool = True

    @property
    def name(self) -> str:
        return self.descriptor.buffer_name

    def replace(self, text: str) -> None:
        """Replace the whole content, keeping the cursor's character offset.

        The offset is clamped to the new length.
        """
        if self.read_only:
            raise PermissionError(f"buffer {self.name} is read-only")
        offset = min(self.cursor, len(text))
        self.text = text
        assert 0 <= offset <= len(self.text), "cursor out of bounds after replace"
        self.cursor = offset

    def move_cursor(self, offset: int) -> None:
        self.cursor = max(0, min(offset, len(self.text)))


@contextmanager
def writable(buffer: ViewBuffer) -> Iterator[ViewBuffer]:
    """Lift ``read_only`` for the block; always restore it on exit."""
    previous = buffer.read_only
    buffer.read_only = False
    try:
        yield buffer
    finally:
        buffer.read_only = previous


def location_to_offset(text: str, location: tuple[int, int]) -> int:
    """Convert a ``(row, column)`` location into a character offset."""
    row, column = location
    lines = text.split("\n")
    row = max(0, min(row, len(lines) - 1))
    column = max(0, min(column, len(lines[row])))
    return sum(len(line) + 1 for line in lines[:row]) + column


def offset_to_location(text: str, offset: int) -> tuple[int, int]:
    """Convert a character offset into a ``(row, column)`` location."""
    offset = max(0, min(offset, len(text)))
    row = text.count("\n", 0, offset)
    column = offset - (text.rfind("\n", 0, offset) + 1)
    return row, column
