"""Shared fixtures for geralt view tests."""

import sys
from pathlib import Path

import pytest

# Add scripts to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))

from geralt_tui.errors import SubprocessFailure  # noqa: E402

TREE_OUTPUT = (
    "[ ] (1:home) Home\n"
    "├── [~] (2) Paint fence\n"
    "└── [x] (3:groceries) Buy groceries\n"
)
LS_OUTPUT = (
    "[ ] (1:home) Home\n"
    "[~] (2) Paint fence\n"
    "[x] (3:groceries) Buy groceries\n"
)
LSD_OUTPUT = (
    "2026-10-01 [x] (3:groceries) Buy groceries\n"
    "2026-10-02 [~] (2) Paint fence\n"
)
SUBTREE_OUTPUT = (
    "[ ] (1:home) Home\n"
    "├── [~] (2) Paint fence\n"
)


class FakeTaskSource:
    """TaskSource that records argv and returns canned output."""

    def __init__(self, outputs: dict[tuple[str, ...], str] | None = None) -> None:
        self.outputs = dict(outputs or {})
        self.calls: list[tuple[str, ...]] = []
        self.failures: dict[tuple[str, ...], str] = {}

    def run(self, *args: str) -> str:
        self.calls.append(args)
        if args in self.failures:
            raise SubprocessFailure(["geralt", *args], self.failures[args], 1)
        return self.outputs.get(args, "")

    def fail(self, args: tuple[str, ...], output: str) -> None:
        self.failures[args] = output


@pytest.fixture
def source() -> FakeTaskSource:
    """Fake geralt with a small three-task tree."""
    return FakeTaskSource(
        {
            (): TREE_OUTPUT,
            ("ls",): LS_OUTPUT,
            ("lsd",): LSD_OUTPUT,
            ("tree", "1"): SUBTREE_OUTPUT,
        }
    )
