# Copyright 2026 Primer Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the Primer command-line interface."""

import argparse
import sys
from pathlib import Path

from yachalk import chalk

from primer.lessons.catalog import LESSONS, UnknownLessonError, run_lessons
from primer.lessons.config import (
    CONFIG_FILE_NAME,
    PlaygroundConfig,
    PlaygroundConfigError,
    load_playground_config,
)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the Primer CLI."""
    parser = argparse.ArgumentParser(
        prog="primer",
        description="Primer: runnable lessons on functions, closures, enums, and value types",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # list subcommand
    subparsers.add_parser(
        "list",
        help="List the available lessons",
        description="Print the slug and title of every lesson in catalog order.",
    )

    # run subcommand
    run_parser = subparsers.add_parser(
        "run",
        help="Run lessons and print their output",
        description=(
            "Run the named lessons, or the lessons listed in the playground "
            "configuration when none are named."
        ),
    )
    run_parser.add_argument(
        "lessons",
        nargs="*",
        metavar="SLUG",
        help="Lessons to run (default: from configuration, otherwise all)",
    )
    run_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Playground configuration file (default: ./{CONFIG_FILE_NAME} if present)",
    )
    run_parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable coloured output",
    )

    # serve subcommand
    serve_parser = subparsers.add_parser(
        "serve",
        help="Launch the interactive lesson viewer",
        description="Launch a web-based UI showing every lesson and its output.",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=8050,
        help="Port to run the server on (default: 8050)",
    )
    serve_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind the server to (default: 127.0.0.1)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "list":
        return _cmd_list(args)
    if args.command == "run":
        return _cmd_run(args)
    if args.command == "serve":
        return _cmd_serve(args)
    return 0


def _cmd_list(args: argparse.Namespace) -> int:
    """Handle the list subcommand."""
    width = max(len(lesson.slug) for lesson in LESSONS)
    for lesson in LESSONS:
        print(f"  {lesson.slug.ljust(width)}  {lesson.title}")
    return 0


def _cmd_run(args: argparse.Namespace) -> int:
    """Handle the run subcommand."""
    try:
        config = _load_config(args.config)
    except PlaygroundConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    slugs = args.lessons or config.lessons
    try:
        outputs = run_lessons(slugs)
    except UnknownLessonError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    color = config.color and not args.no_color
    for output in outputs:
        heading = f"== {output.lesson.title} =="
        print(chalk.blue(heading) if color else heading)
        for line in output.lines:
            print(f"  {line}")
        print()
    return 0


def _cmd_serve(args: argparse.Namespace) -> int:
    """Handle the serve subcommand."""
    from primer.webui.app import create_app

    print(f"Serving lessons at http://{args.host}:{args.port}/")
    app = create_app(LESSONS)
    app.run(host=args.host, port=args.port, debug=False)
    return 0


def _load_config(path: Path | None) -> PlaygroundConfig:
    """Load an explicit config file, the default one if present, or the defaults."""
    if path is not None:
        return load_playground_config(path)
    default_path = Path.cwd() / CONFIG_FILE_NAME
    if default_path.exists():
        return load_playground_config(default_path)
    return PlaygroundConfig()
