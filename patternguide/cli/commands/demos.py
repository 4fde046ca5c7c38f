"""
Demo command handlers.

This module contains command handlers for:
- Listing the catalog
- Running demos and rendering their transcripts
- Showing a demo's source code
"""

import inspect
import sys

from patternguide.catalog import DemoCatalog, DemoRunner
from patternguide.cli.formatters import (
    format_demo_listing,
    format_json,
    format_report_text,
    format_run_payload,
)
from patternguide.cli.rich_output import get_rich_output
from patternguide.config import PatternGuideConfig
from patternguide.errors import InvalidArgumentError


def cmd_list(args, catalog: DemoCatalog) -> None:
    """Handle list command."""
    from patternguide.cli_entry import _is_machine_readable, _print_json_to_stdout

    listing = format_demo_listing(catalog)

    if _is_machine_readable(args):
        _print_json_to_stdout(args, {"demos": listing})
        return

    output = get_rich_output()
    output.print_table(
        "Creational pattern demos",
        ["Key", "Pattern", "Summary"],
        [(item["key"], item["title"], item["summary"]) for item in listing],
    )


def cmd_run(args, catalog: DemoCatalog, config: PatternGuideConfig) -> None:
    """Handle run command."""
    from patternguide.cli_entry import _is_machine_readable, _print_json_to_stdout

    runner = DemoRunner(catalog, config.demo_settings)

    try:
        if args.all or not args.demos:
            reports = runner.run_all()
        else:
            reports = runner.run_many(args.demos)
    except InvalidArgumentError as e:
        if _is_machine_readable(args):
            _print_json_to_stdout(args, {"success": False, "error": str(e)})
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        # Only reachable with stop_on_error; otherwise failures land in the reports
        if _is_machine_readable(args):
            _print_json_to_stdout(
                args, {"success": False, "error": f"{type(e).__name__}: {e}"}
            )
        print(f"Error: {type(e).__name__}: {e}", file=sys.stderr)
        if getattr(args, "verbose", False):
            import traceback

            traceback.print_exc()
        sys.exit(1)

    payload = format_run_payload(reports)
    show_source = args.source or config.output_settings.show_source

    if _is_machine_readable(args) or config.output_settings.format == "json":
        if _is_machine_readable(args):
            _print_json_to_stdout(args, payload)
        else:
            print(format_json(payload))
    elif not get_rich_output().use_rich:
        for report in reports:
            print(format_report_text(report))
            if show_source:
                print(inspect.getsource(catalog.get(report.key).module))
            print()
    else:
        output = get_rich_output()
        for report in reports:
            output.print_section(report.title)
            output.print_lines(report.lines)
            if report.success:
                output.print_success(f"{report.key} finished in {report.duration_seconds:.4f}s")
            else:
                output.print_error(f"{report.key} failed: {report.error}")
            if show_source:
                output.print_code(inspect.getsource(catalog.get(report.key).module))

    if not payload["success"]:
        sys.exit(1)


def cmd_show(args, catalog: DemoCatalog) -> None:
    """Handle show command."""
    from patternguide.cli_entry import _is_machine_readable, _print_json_to_stdout

    try:
        demo = catalog.get(args.demo)
    except InvalidArgumentError as e:
        if _is_machine_readable(args):
            _print_json_to_stdout(args, {"success": False, "error": str(e)})
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    source = inspect.getsource(demo.module) if demo.module is not None else ""

    if _is_machine_readable(args):
        _print_json_to_stdout(
            args,
            {"key": demo.key, "title": demo.title, "summary": demo.summary, "source": source},
        )
        return

    output = get_rich_output()
    output.print_header(demo.title, demo.summary)
    if source:
        output.print_code(source, title=f"{demo.module.__name__}")
