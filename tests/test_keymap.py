"""Tests for keymap.py - the command table."""

import pytest

from geralt_tui.keymap import DEFAULT_COMMANDS, build_command_table


class TestBuildCommandTable:
    """Tests for build_command_table."""

    def test_default_keys(self) -> None:
        table = build_command_table()
        assert table.action_for("t") == "toggle"
        assert table.action_for("space") == "toggle"
        assert table.action_for("enter") == "open_scoped"
        assert table.action_for("A") == "add_root_task"
        assert table.action_for("z") is None

    def test_every_default_action_has_a_key(self) -> None:
        table = build_command_table()
        for command in DEFAULT_COMMANDS:
            assert table.keys_for(command.action)

    def test_override_replaces_keys(self) -> None:
        table = build_command_table({"remove": "x"})
        assert table.action_for("x") == "remove"
        assert table.action_for("D") is None
        assert table.keys_for("remove") == ("x",)

    def test_unknown_action_rejected(self) -> None:
        with pytest.raises(ValueError, match="explode"):
            build_command_table({"explode": "x"})

    def test_tables_are_independent(self) -> None:
        build_command_table({"remove": "x"})
        assert build_command_table().action_for("x") is None

    def test_help_lines(self) -> None:
        lines = build_command_table().help_lines()
        assert len(lines) == len(DEFAULT_COMMANDS)
        assert any("Toggle completion" in line for line in lines)

    def test_override_onto_taken_key_rejected(self) -> None:
        """A key cannot silently move away from the action that owns it."""
        with pytest.raises(ValueError, match="'a'"):
            build_command_table({"toggle": "a"})

    def test_two_overrides_on_one_key_rejected(self) -> None:
        with pytest.raises(ValueError):
            build_command_table({"remove": "x", "unalias": "x"})

    def test_swapped_keys_allowed(self) -> None:
        table = build_command_table({"remove": "t", "toggle": "D"})
        assert table.action_for("t") == "remove"
        assert table.action_for("D") == "toggle"
        assert table.keys_for("toggle") == ("D",)
