"""
Command-line interface for PatternGuide

Lists, runs and displays the creational pattern demos with rich terminal
output, or as JSON for scripts.
"""

import argparse
import json
import logging
import sys
from typing import Any, List, Optional, TextIO

from patternguide import __version__
from patternguide.catalog import default_catalog
from patternguide.cli.commands import cmd_config, cmd_list, cmd_run, cmd_show
from patternguide.cli.rich_output import set_rich_enabled
from patternguide.config import ConfigurationError, load_config
from patternguide.errors import PatternGuideError


def _is_machine_readable(args: Any) -> bool:
    return bool(getattr(args, "machine_readable", False))


def _json_stdout(args: Any) -> TextIO:
    """
    When --machine-readable is enabled, main() redirects sys.stdout -> sys.stderr
    to prevent accidental non-JSON output. This function returns the original stdout.
    """
    return getattr(args, "_json_stdout", sys.stdout)


def _print_json_to_stdout(args: Any, payload: Any) -> None:
    """Always print JSON to the original stdout in machine-readable mode."""
    s = json.dumps(payload, indent=2, ensure_ascii=False, default=str)
    print(s, file=_json_stdout(args))


def setup_logging(verbose: bool = False, level: str = "WARNING", fmt: Optional[str] = None) -> None:
    """Setup logging configuration."""
    numeric_level = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=numeric_level,
        format=fmt or "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="patternguide",
        description="PatternGuide - runnable demonstrations of the creational design patterns",
        epilog='Use "patternguide <command> --help" for detailed command help.',
    )

    parser.add_argument("--config", "-c", type=str, help="Path to configuration file")

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output and debug logging",
    )

    parser.add_argument(
        "--no-rich",
        action="store_true",
        help="Disable rich terminal output (use plain text)",
    )

    parser.add_argument(
        "--machine-readable",
        action="store_true",
        help="Output in machine-readable format (JSON)",
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("list", help="List the available pattern demos")

    run_parser = subparsers.add_parser("run", help="Run one or more pattern demos")
    run_parser.add_argument(
        "demos", nargs="*", help="Demo keys to run (default: every enabled demo)"
    )
    run_parser.add_argument("--all", action="store_true", help="Run every enabled demo")
    run_parser.add_argument(
        "--source", action="store_true", help="Print each demo's source after its transcript"
    )

    show_parser = subparsers.add_parser("show", help="Show a demo's summary and source code")
    show_parser.add_argument("demo", help="Demo key, e.g. builder")

    config_parser = subparsers.add_parser("config", help="Configuration management")
    config_subparsers = config_parser.add_subparsers(dest="config_action", required=True)

    config_subparsers.add_parser("show", help="Show current configuration")

    init_parser = config_subparsers.add_parser("init", help="Initialize configuration file")
    init_parser.add_argument(
        "--path", default="patternguide.json", help="Where to write the configuration file"
    )
    init_parser.add_argument(
        "--format", choices=["json", "yaml"], default="json", help="Configuration file format"
    )

    validate_parser = config_subparsers.add_parser("validate", help="Validate configuration file")
    validate_parser.add_argument("config_file", help="Configuration file to validate")

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    # In machine-readable mode only JSON goes to stdout; everything else is sent to stderr.
    original_stdout = sys.stdout
    if _is_machine_readable(args):
        args._json_stdout = original_stdout
        sys.stdout = sys.stderr

    try:
        _dispatch(args)
    finally:
        sys.stdout = original_stdout


def _dispatch(args: argparse.Namespace) -> None:
    # Config commands report their own configuration errors
    if args.command == "config":
        setup_logging(args.verbose)
        cmd_config(args)
        return

    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        if _is_machine_readable(args):
            _print_json_to_stdout(args, {"success": False, "error": str(e)})
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(args.verbose, config.logging_settings.level, config.logging_settings.format)

    use_rich = (
        config.output_settings.use_rich and not args.no_rich and not _is_machine_readable(args)
    )
    set_rich_enabled(use_rich)

    catalog = default_catalog()

    try:
        if args.command == "list":
            cmd_list(args, catalog)
        elif args.command == "run":
            cmd_run(args, catalog, config)
        elif args.command == "show":
            cmd_show(args, catalog)

    except KeyboardInterrupt:
        if _is_machine_readable(args):
            _print_json_to_stdout(args, {"success": False, "error": "cancelled_by_user"})
        print("\nOperation cancelled by user", file=sys.stderr)
        sys.exit(1)
    except PatternGuideError as e:
        if _is_machine_readable(args):
            _print_json_to_stdout(
                args,
                {"success": False, "error": str(e), "command": args.command},
            )
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
