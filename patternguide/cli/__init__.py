"""CLI helpers for PatternGuide: output rendering and command handlers."""

from .rich_output import RichOutputManager, get_rich_output, set_rich_enabled

__all__ = ["RichOutputManager", "get_rich_output", "set_rich_enabled"]
