"""Interactive prompting helpers."""

from .commands import HTTP_METHODS, Command, parse_command

__all__ = ["HTTP_METHODS", "Command", "parse_command"]
