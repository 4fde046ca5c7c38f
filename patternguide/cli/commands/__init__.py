"""Command handlers for the PatternGuide CLI."""

from .config import cmd_config
from .demos import cmd_list, cmd_run, cmd_show

__all__ = ["cmd_config", "cmd_list", "cmd_run", "cmd_show"]
