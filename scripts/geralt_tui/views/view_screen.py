"""View screen: one geralt view buffer shown in a read-only text area."""

from __future__ import annotations

import logging
from typing import Callable

from textual import events
from textual.app import ComposeResult
from textual.screen import Screen
from textual.widgets import Header, TextArea

from geralt_tui.buffer import ViewBuffer, location_to_offset, offset_to_location
from geralt_tui.commands import CommandDispatcher, Placement
from geralt_tui.errors import (
    EmptyInput,
    ExecutableNotFound,
    NoStateMarker,
    NoTaskAtCursor,
    SubprocessFailure,
)
from geralt_tui.keymap import CommandTable
from geralt_tui.views.widgets import PromptScreen

logger = logging.getLogger(__name__)


class ViewScreen(Screen):
    """Shows a view buffer and runs commands from the command table."""

    DEFAULT_CSS = """
    ViewScreen #view {
        height: 1fr;
        border: none;
    }
    """

    def __init__(
        self,
        buffer: ViewBuffer,
        dispatcher: CommandDispatcher,
        commands: CommandTable,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.buffer = buffer
        self._dispatcher = dispatcher
        self._commands = commands

    def compose(self) -> ComposeResult:
        yield Header()
        yield TextArea(
            self.buffer.text,
            read_only=True,
            soft_wrap=False,
            show_line_numbers=False,
            id="view",
        )

    def on_mount(self) -> None:
        self.title = self.buffer.name
        self.sub_title = "? for keys"
        self.refresh_view()

    @property
    def text_area(self) -> TextArea:
        return self.query_one("#view", TextArea)

    # -------------------- buffer <-> text area --------------------
    def _pull_cursor(self) -> None:
        """Copy the text area cursor into the buffer offset."""
        location = self.text_area.cursor_location
        self.buffer.move_cursor(location_to_offset(self.buffer.text, location))

    def _show_buffer(self) -> None:
        text_area = self.text_area
        if text_area.text != self.buffer.text:
            text_area.load_text(self.buffer.text)
        text_area.cursor_location = offset_to_location(self.buffer.text, self.buffer.cursor)

    def _execute(self, command: Callable[..., object], *args: object) -> None:
        """Run a dispatcher command and show the result.

        Errors are scoped to this command; the buffer keeps its previous
        content when geralt fails.
        """
        self._pull_cursor()
        try:
            command(*args)
        except (NoTaskAtCursor, NoStateMarker) as e:
            logger.debug("aborted: %s", e)
            return
        except SubprocessFailure as e:
            self.notify(e.output.strip() or str(e), title="geralt", severity="error")
        except ExecutableNotFound as e:
            self.notify(str(e), title="geralt", severity="error")
        except EmptyInput as e:
            self.notify(str(e), severity="warning")
            return
        self._show_buffer()

    def refresh_view(self) -> None:
        self._execute(self._dispatcher.refresh, self.buffer)

    def _prompt(self, prompt: str, then: Callable[[str], None], value: str = "") -> None:
        def on_result(result: str | None) -> None:
            if result is None or not result.strip():
                return
            then(result)

        self.app.push_screen(PromptScreen(prompt, value), on_result)

    def _require_task(self) -> int | None:
        self._pull_cursor()
        try:
            return self._dispatcher.task_at_cursor(self.buffer)
        except NoTaskAtCursor as e:
            logger.debug("aborted: %s", e)
            return None

    # -------------------- key handling --------------------
    async def on_key(self, event: events.Key) -> None:
        action = self._commands.action_for(event.key)
        if action is None:
            return
        event.stop()
        event.prevent_default()
        await self.run_action(action)

    # -------------------- actions --------------------
    def action_refresh(self) -> None:
        self.refresh_view()

    def action_add_task(self) -> None:
        self._pull_cursor()
        self._prompt(
            "New task:",
            lambda text: self._execute(self._dispatcher.add, self.buffer, text, Placement.UNDER_CURSOR),
        )

    def action_add_root_task(self) -> None:
        self._prompt(
            "New root task:",
            lambda text: self._execute(self._dispatcher.add, self.buffer, text, Placement.ROOT),
        )

    def action_toggle(self) -> None:
        self._execute(self._dispatcher.toggle, self.buffer)

    def action_remove(self) -> None:
        self._execute(self._dispatcher.remove, self.buffer)

    def action_alias(self) -> None:
        task_id = self._require_task()
        if task_id is None:
            return
        self._prompt(
            f"Alias for task {task_id}:",
            lambda text: self._execute(self._dispatcher.alias, self.buffer, text),
        )

    def action_unalias(self) -> None:
        self._execute(self._dispatcher.unalias, self.buffer)

    def action_open_scoped(self) -> None:
        self._pull_cursor()
        try:
            descriptor = self._dispatcher.open_scoped(self.buffer)
        except NoTaskAtCursor as e:
            logger.debug("aborted: %s", e)
            return
        self.app.open_view(descriptor)

    def action_help(self) -> None:
        self.notify("\n".join(self._commands.help_lines()), title="Keys", timeout=10)

    def action_close_view(self) -> None:
        self.app.close_view(self.buffer.descriptor)
