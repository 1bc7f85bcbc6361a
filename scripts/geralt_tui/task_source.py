"""
Access to the external geralt executable.

The protocol defines the interface; implementations can be swapped
for testing or for another way of reaching geralt.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Protocol

from geralt_tui.errors import ExecutableNotFound, SubprocessFailure

logger = logging.getLogger(__name__)


class TaskSource(Protocol):
    """Protocol for invoking geralt subcommands."""

    def run(self, *args: str) -> str:
        """Run ``geralt <args...>`` and return its standard output."""
        ...


class GeraltTaskSource:
    """TaskSource that shells out to the geralt executable."""

    def __init__(
        self,
        executable: str = "geralt",
        timeout: float | None = None,
        cwd: Path | None = None,
    ) -> None:
        self.executable = executable
        self.timeout = timeout
        self.cwd = cwd

    def check_available(self) -> str:
        """Return the resolved executable path.

        Raises:
            ExecutableNotFound: geralt is not on PATH or not executable.
        """
        resolved = shutil.which(self.executable)
        if resolved is None:
            raise ExecutableNotFound(self.executable)
        return resolved

    def run(self, *args: str) -> str:
        argv = [self.executable, *args]
        logger.debug("invoking %s", argv)
        if self.cwd is not None and not self.cwd.is_dir():
            raise SubprocessFailure(argv, f"working directory not found: {self.cwd}")
        try:
            result = subprocess.run(
                argv,
                cwd=self.cwd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise ExecutableNotFound(self.executable) from e
        except PermissionError as e:
            raise ExecutableNotFound(self.executable) from e
        except subprocess.TimeoutExpired as e:
            logger.warning("%s timed out after %ss", argv, self.timeout)
            raise SubprocessFailure(
                argv, f"{' '.join(argv)} timed out after {self.timeout}s"
            ) from e
        except UnicodeDecodeError as e:
            raise SubprocessFailure(argv, f"unreadable output from {' '.join(argv)}: {e}") from e

        if result.returncode != 0:
            output = "\n".join(s for s in (result.stderr, result.stdout) if s.strip())
            logger.warning("%s exited with %d", argv, result.returncode)
            raise SubprocessFailure(argv, output, result.returncode)
        return result.stdout
