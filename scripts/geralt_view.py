#!/usr/bin/env python3
"""
geralt View

Terminal UI for browsing and editing geralt tasks.

Usage:
    geralt_view.py                 Launch interactive TUI on the main view
    geralt_view.py --root N        Launch on the tree under task N
    geralt_view.py --once          Print the view once and exit (no TUI)

Environment:
    GERALT_EXECUTABLE   geralt executable (default: geralt)
    GERALT_TIMEOUT      seconds before a geralt call is abandoned (default: none)
    GERALT_CWD          directory geralt runs in
    GERALT_KEYS         key overrides, e.g. "remove=x,toggle=c"

Requirements:
    pip install textual
"""

import argparse
import logging
import sys
from pathlib import Path

SCRIPT_DIR = Path(__file__).resolve().parent
if str(SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(SCRIPT_DIR))

from geralt_tui.buffer import ViewDescriptor  # noqa: E402
from geralt_tui.config import GeraltConfig, load_config  # noqa: E402
from geralt_tui.errors import (  # noqa: E402
    ConfigError,
    ExecutableNotFound,
    GeraltError,
    SubprocessFailure,
)
from geralt_tui.keymap import build_command_table  # noqa: E402
from geralt_tui.renderer import render  # noqa: E402
from geralt_tui.task_source import GeraltTaskSource  # noqa: E402

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool, log_file: Path | None, once: bool) -> None:
    """Route logs away from the terminal while the TUI owns it."""
    level = logging.DEBUG if verbose else logging.WARNING
    if log_file is not None:
        logging.basicConfig(filename=log_file, level=level, format=LOG_FORMAT)
    elif once:
        logging.basicConfig(stream=sys.stderr, level=level, format=LOG_FORMAT)
    else:
        logging.getLogger().addHandler(logging.NullHandler())


def print_view_once(source: GeraltTaskSource, descriptor: ViewDescriptor) -> int:
    """Print a rendered view and exit."""
    try:
        text = render(descriptor, source.run)
    except SubprocessFailure as e:
        print(e.output.strip() or str(e), file=sys.stderr)
        return 1
    except GeraltError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(text, end="" if text.endswith("\n") else "\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="geralt View",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--root",
        type=int,
        metavar="TASK_ID",
        help="Open the tree under this task instead of the main view",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Print the view once and exit (no TUI)",
    )
    parser.add_argument(
        "--executable",
        help="geralt executable (default: $GERALT_EXECUTABLE or geralt)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Seconds before a geralt call is abandoned (default: no timeout)",
    )
    parser.add_argument(
        "--cwd",
        type=Path,
        help="Directory to run geralt in",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every geralt invocation",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write logs to this file",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose, args.log_file, args.once)

    try:
        config: GeraltConfig = load_config().with_overrides(
            executable=args.executable,
            timeout=args.timeout,
            cwd=args.cwd,
        )
        commands = build_command_table(config.key_overrides)
    except (ConfigError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    if config.timeout is not None and config.timeout <= 0:
        print("Configuration error: --timeout must be positive", file=sys.stderr)
        return 2

    if config.cwd is not None and not config.cwd.is_dir():
        print(f"Configuration error: working directory not found: {config.cwd}", file=sys.stderr)
        return 2

    source = GeraltTaskSource(config.executable, timeout=config.timeout, cwd=config.cwd)
    try:
        source.check_available()
    except ExecutableNotFound as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    descriptor = (
        ViewDescriptor.scoped(args.root) if args.root is not None else ViewDescriptor.main()
    )

    if args.once:
        return print_view_once(source, descriptor)

    from geralt_tui.app import run

    run(source, commands=commands, initial_view=descriptor)
    return 0


if __name__ == "__main__":
    sys.exit(main())
