"""
Configuration command handlers.

Handles ``config show``, ``config init`` and ``config validate``.
"""

import sys

from patternguide.config import ConfigurationError, PatternGuideConfig


def cmd_config(args) -> None:
    """Handle config command."""
    from patternguide.cli_entry import _is_machine_readable, _print_json_to_stdout

    if args.config_action == "show":
        try:
            config = PatternGuideConfig.load(getattr(args, "config", None))
        except ConfigurationError as e:
            if _is_machine_readable(args):
                _print_json_to_stdout(args, {"success": False, "error": str(e), "command": "config"})
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        if _is_machine_readable(args):
            _print_json_to_stdout(args, config.to_dict())
            return
        print("Current PatternGuide Configuration:")
        print(config.get_config_summary())

    elif args.config_action == "init":
        config = PatternGuideConfig.default()
        try:
            config.to_file(args.path, args.format)
        except ConfigurationError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"Default configuration file created at {args.path}")
        print("Edit the file to customize your PatternGuide settings.")

    elif args.config_action == "validate":
        try:
            PatternGuideConfig.load(args.config_file, use_env=False, validate=True)
        except ConfigurationError as e:
            print(f"Error: Configuration file is invalid: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"Configuration file {args.config_file} is valid")
