"""
Buffer rendering.

The main view stacks three geralt listings under ``* `` headers; a scoped
view is the plain ``geralt tree <root>`` output.
"""

from __future__ import annotations

import logging
from typing import Callable

from geralt_tui.buffer import ViewBuffer, ViewDescriptor, writable

logger = logging.getLogger(__name__)

Invoke = Callable[..., str]

# (header, geralt arguments) in display order
MAIN_SECTIONS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Tree", ()),
    ("List", ("ls",)),
    ("List by date", ("lsd",)),
)


def _ensure_newline(output: str) -> str:
    if output and not output.endswith("\n"):
        return output + "\n"
    return output


def render_main(invoke: Invoke) -> str:
    """Render the unscoped tree, the flat list and the date-ordered list."""
    sections = []
    for header, args in MAIN_SECTIONS:
        output = invoke(*args)
        sections.append(f"* {header}\n{_ensure_newline(output)}")
    return "\n".join(sections)


def render_scoped(root_id: int, invoke: Invoke) -> str:
    """Render the tree under ``root_id``, without a header."""
    return invoke("tree", str(root_id))


def render(descriptor: ViewDescriptor, invoke: Invoke) -> str:
    if descriptor.root is not None:
        return render_scoped(descriptor.root, invoke)
    return render_main(invoke)


def refresh(buffer: ViewBuffer, invoke: Invoke) -> None:
    """Re-render ``buffer`` in place, keeping the cursor's character offset.

    Rendering finishes before the buffer is touched, so a failed invocation
    leaves the previous content and cursor as they were.
    """
    text = render(buffer.descriptor, invoke)
    with writable(buffer):
        buffer.replace(text)
    logger.debug("refreshed %s (%d chars, cursor %d)", buffer.name, len(text), buffer.cursor)
