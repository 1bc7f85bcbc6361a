"""Error taxonomy for the geralt front-end.

Every error is scoped to the single operation that raised it; none is
retried and none ends the application.
"""


class GeraltError(Exception):
    """Base class for all geralt front-end errors."""


class ExecutableNotFound(GeraltError):
    """The geralt executable cannot be located or executed."""

    def __init__(self, executable: str) -> None:
        super().__init__(f"geralt executable not found: {executable}")
        self.executable = executable


class SubprocessFailure(GeraltError):
    """An invocation exited non-zero, timed out, or produced unreadable output.

    ``output`` is the process's own text, shown to the user as-is.
    """

    def __init__(self, argv: list[str], output: str, returncode: int | None = None) -> None:
        super().__init__(output.strip() or f"{' '.join(argv)} failed")
        self.argv = argv
        self.output = output
        self.returncode = returncode


class NoTaskAtCursor(GeraltError):
    """The line under the cursor does not name a task."""


class NoStateMarker(GeraltError):
    """The line has no ``[ ]``, ``[~]``, ``[x]`` or ``[*]`` marker."""


class ConfigError(GeraltError):
    """A configuration value could not be understood."""


class EmptyInput(GeraltError):
    """A task description or alias was blank."""
