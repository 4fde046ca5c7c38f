"""
Rich terminal output utilities for the PatternGuide CLI.

Provides panels, tables and syntax-highlighted source for demo transcripts,
with a plain-text mode for pipes and dumb terminals.
"""

import json
from typing import Any, List, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table


class RichOutputManager:
    """Manages rich terminal output with a plain text mode."""

    def __init__(self, use_rich: bool = True, console: Optional[Console] = None):
        """Initialize the output manager."""
        self.use_rich = use_rich
        if console is not None:
            self.console = console
        elif use_rich:
            self.console = Console()
        else:
            self.console = Console(
                no_color=True, highlight=False, markup=False, emoji=False, soft_wrap=True
            )

    def print_header(self, title: str, subtitle: Optional[str] = None) -> None:
        """Print a formatted header."""
        if self.use_rich:
            if subtitle:
                header_text = f"[bold blue]{escape(title)}[/bold blue]\n[dim]{escape(subtitle)}[/dim]"
            else:
                header_text = f"[bold blue]{escape(title)}[/bold blue]"

            self.console.print(Panel(header_text, border_style="blue", padding=(1, 2)))
        else:
            self.console.print(f"\n=== {title} ===")
            if subtitle:
                self.console.print(subtitle)
            self.console.print()

    def print_section(self, title: str) -> None:
        """Print a section separator."""
        if self.use_rich:
            self.console.rule(f"[bold]{escape(title)}[/bold]", style="blue")
        else:
            self.console.print(f"\n--- {title} ---")

    def print_success(self, message: str) -> None:
        if self.use_rich:
            self.console.print(f"[green]✓[/green] {escape(message)}")
        else:
            self.console.print(f"OK {message}")

    def print_warning(self, message: str) -> None:
        if self.use_rich:
            self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")
        else:
            self.console.print(f"WARNING {message}")

    def print_error(self, message: str) -> None:
        if self.use_rich:
            self.console.print(f"[red]✗[/red] {escape(message)}")
        else:
            self.console.print(f"ERROR {message}")

    def print_lines(self, lines: Sequence[str]) -> None:
        """Print transcript lines verbatim (no markup interpretation)."""
        for line in lines:
            self.console.print(line, markup=False, highlight=False)

    def print_table(self, title: str, columns: List[str], rows: Sequence[Sequence[Any]]) -> None:
        """Print a table, as a rich Table or as pipe-separated text."""
        if self.use_rich:
            table = Table(title=title, show_header=True, header_style="bold blue")
            for column in columns:
                table.add_column(column)
            for row in rows:
                table.add_row(*[escape(str(v)) for v in row])
            self.console.print(table)
            return

        self.console.print(f"\n{title}")
        self.console.print("-" * len(title))
        header = " | ".join(columns)
        self.console.print(header)
        self.console.print("-" * len(header))
        for row in rows:
            self.console.print(" | ".join(str(v) for v in row))
        self.console.print()

    def print_code(self, code: str, language: str = "python", title: Optional[str] = None) -> None:
        """Print code with syntax highlighting."""
        if title:
            self.print_section(title)

        if self.use_rich:
            syntax = Syntax(code, language, theme="monokai", line_numbers=True)
            self.console.print(syntax)
        else:
            self.console.print(code, markup=False, highlight=False)

    def print_json(self, data: Any, title: Optional[str] = None) -> None:
        if title:
            self.print_section(title)
        text = json.dumps(data, indent=2, default=str)
        if self.use_rich:
            self.console.print(Syntax(text, "json", theme="monokai"))
        else:
            self.console.print(text, markup=False, highlight=False)


# Global instance
rich_output = RichOutputManager()


def set_rich_enabled(enabled: bool) -> None:
    """Enable or disable rich output globally."""
    global rich_output
    rich_output = RichOutputManager(use_rich=enabled)


def get_rich_output() -> RichOutputManager:
    """Get the global rich output manager."""
    return rich_output
