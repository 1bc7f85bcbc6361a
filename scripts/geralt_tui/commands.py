"""
Command dispatch: user intents to geralt invocations.

Every command is a blocking round trip (build argv, run geralt, refresh
the buffer). Commands that need a task resolve it from the line under the
cursor first and abort before running anything when there is none.
"""

from __future__ import annotations

import logging
from enum import Enum

from geralt_tui.buffer import CompletionState, ViewBuffer, ViewDescriptor
from geralt_tui.errors import EmptyInput, NoTaskAtCursor
from geralt_tui.line_parser import current_line, resolve_state, resolve_task_id
from geralt_tui.renderer import refresh
from geralt_tui.task_source import TaskSource

logger = logging.getLogger(__name__)


class Placement(Enum):
    """Where ``add`` attaches a new task."""

    TOP = "top"
    ROOT = "root"
    UNDER_CURSOR = "under-cursor"


class CommandDispatcher:
    """Runs geralt commands against a view buffer."""

    def __init__(self, source: TaskSource) -> None:
        self.source = source

    def task_at_cursor(self, buffer: ViewBuffer) -> int:
        """Return the task id under the cursor.

        Raises:
            NoTaskAtCursor: the cursor line is not a task line.
        """
        task_id = resolve_task_id(buffer.text, buffer.cursor)
        if task_id is None:
            raise NoTaskAtCursor(f"no task on line {current_line(buffer.text, buffer.cursor)!r}")
        return task_id

    def refresh(self, buffer: ViewBuffer) -> None:
        refresh(buffer, self.source.run)

    def _run_and_refresh(self, buffer: ViewBuffer, *args: str) -> None:
        logger.info("geralt %s (from %s)", " ".join(args), buffer.name)
        self.source.run(*args)
        self.refresh(buffer)

    def add(
        self,
        buffer: ViewBuffer,
        description: str,
        placement: Placement = Placement.UNDER_CURSOR,
    ) -> None:
        description = description.strip()
        if not description:
            raise EmptyInput("task description required")

        args = ["add"]
        if placement is Placement.ROOT:
            args.append("--root")
        elif placement is Placement.UNDER_CURSOR:
            parent = resolve_task_id(buffer.text, buffer.cursor)
            if parent is None:
                parent = buffer.descriptor.root
            if parent is not None:
                args.append(f"--predecessor={parent}")
        args.append(description)
        self._run_and_refresh(buffer, *args)

    def toggle(self, buffer: ViewBuffer) -> None:
        task_id = self.task_at_cursor(buffer)
        state = resolve_state(current_line(buffer.text, buffer.cursor))
        subcommand = "uncheck" if state is CompletionState.COMPLETED else "check"
        self._run_and_refresh(buffer, subcommand, str(task_id))

    def remove(self, buffer: ViewBuffer) -> None:
        """Remove the task under the cursor; its children are orphaned, not removed."""
        task_id = self.task_at_cursor(buffer)
        self._run_and_refresh(buffer, "rm", str(task_id))

    def alias(self, buffer: ViewBuffer, alias: str) -> None:
        task_id = self.task_at_cursor(buffer)
        alias = alias.strip()
        if not alias:
            raise EmptyInput("alias required")
        self._run_and_refresh(buffer, "alias", str(task_id), alias)

    def unalias(self, buffer: ViewBuffer) -> None:
        task_id = self.task_at_cursor(buffer)
        self._run_and_refresh(buffer, "unalias", str(task_id))

    def open_scoped(self, buffer: ViewBuffer) -> ViewDescriptor:
        """Return the descriptor of the view rooted at the task under the cursor.

        Local only: nothing is run until the returned view is rendered.
        """
        return ViewDescriptor.scoped(self.task_at_cursor(buffer))
