"""
geralt TUI application.

Main entry point for the terminal user interface.
"""

from __future__ import annotations

import logging

from textual.app import App

from geralt_tui.buffer import ViewBuffer, ViewDescriptor
from geralt_tui.commands import CommandDispatcher
from geralt_tui.keymap import CommandTable, build_command_table
from geralt_tui.task_source import TaskSource
from geralt_tui.views.view_screen import ViewScreen

logger = logging.getLogger(__name__)


class GeraltApp(App):
    """Main geralt TUI application.

    View buffers outlive their screens: raising a view that is already open
    shows a fresh screen over the same buffer, so its cursor is kept.
    """

    TITLE = "geralt"

    def __init__(
        self,
        source: TaskSource,
        commands: CommandTable | None = None,
        initial_view: ViewDescriptor | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.dispatcher = CommandDispatcher(source)
        self.commands = commands or build_command_table()
        self._initial_view = initial_view or ViewDescriptor.main()
        # open views, least recently raised first
        self._buffers: dict[ViewDescriptor, ViewBuffer] = {}

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.open_view(self._initial_view)

    @property
    def open_views(self) -> list[ViewDescriptor]:
        return list(self._buffers)

    def current_view(self) -> ViewScreen | None:
        return self.screen if isinstance(self.screen, ViewScreen) else None

    def open_view(self, descriptor: ViewDescriptor) -> None:
        """Open the view for ``descriptor``, or raise it if it is already open."""
        current = self.current_view()
        if current is not None and current.buffer.descriptor == descriptor:
            current.refresh_view()
            return

        buffer = self._buffers.pop(descriptor, None) or ViewBuffer(descriptor)
        self._buffers[descriptor] = buffer
        logger.debug("opening %s", buffer.name)

        screen = ViewScreen(buffer, self.dispatcher, self.commands)
        if current is None:
            self.push_screen(screen)
        else:
            self.switch_screen(screen)

    def close_view(self, descriptor: ViewDescriptor) -> None:
        """Discard a view; closing the last one exits."""
        self._buffers.pop(descriptor, None)
        logger.debug("closed %s", descriptor.buffer_name)
        if not self._buffers:
            self.exit()
            return
        previous = list(self._buffers)[-1]
        self.open_view(previous)


def run(
    source: TaskSource,
    commands: CommandTable | None = None,
    initial_view: ViewDescriptor | None = None,
) -> None:
    """Run the TUI application."""
    app = GeraltApp(source, commands=commands, initial_view=initial_view)
    app.run()
