"""
Parsing of interactive command lines.

Grammar::

    <METHOD> <url> [-H 'Name: value']... [-d BODY] [--as buffer|response|json|text]
    trim <n>
    headers
    buffers
    show <id>
    help
    quit | exit | q
"""

from __future__ import annotations

import shlex
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ....schemas.errors import UsageError
from ....schemas.selectors import BufferTag, Projector, StructuredTag

HTTP_METHODS = ("GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS")

SELECTOR_NAMES = {
    "buffer": lambda: BufferTag,
    "response": lambda: StructuredTag,
    "json": Projector.json,
    "text": Projector.text,
}


@dataclass
class Command:
    """A parsed command line."""

    name: str
    args: List[str] = field(default_factory=list)
    method: Optional[str] = None
    url: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None
    selector: Any = BufferTag


def parse_command(line: str) -> Optional[Command]:
    """
    Parse one input line.

    Returns:
        The command, or None for a blank line.

    Raises:
        UsageError: If the line is malformed.
    """
    try:
        tokens = shlex.split(line)
    except ValueError as e:
        raise UsageError(f"Cannot parse input: {e}") from e
    if not tokens:
        return None

    head = tokens[0]
    if head.upper() in HTTP_METHODS:
        return _parse_request(head.upper(), tokens[1:])

    name = head.lower()
    if name in ("quit", "exit", "q", "headers", "buffers", "help"):
        return Command(name)
    if name in ("trim", "show"):
        if len(tokens) != 2 or not tokens[1].isdigit():
            raise UsageError(f"Usage: {name} <number>")
        return Command(name, args=[tokens[1]])
    raise UsageError(f"Unknown command {head!r}; type 'help' for a list")


def _parse_request(method: str, tokens: List[str]) -> Command:
    if not tokens:
        raise UsageError(f"Usage: {method} <url> [-H 'Name: value'] [-d BODY]")
    command = Command("request", method=method, url=tokens[0])
    rest = iter(tokens[1:])
    for token in rest:
        value = next(rest, None)
        if value is None:
            raise UsageError(f"Option {token} needs a value")
        if token in ("-H", "--header"):
            key, sep, header_value = value.partition(":")
            if not sep or not key.strip():
                raise UsageError(f"Header must look like 'Name: value', got {value!r}")
            command.headers[key.strip()] = header_value.strip()
        elif token in ("-d", "--data"):
            command.body = value
        elif token == "--as":
            factory = SELECTOR_NAMES.get(value)
            if factory is None:
                # Raw names fall through to dispatch, which rejects them.
                command.selector = value
            else:
                command.selector = factory()
        else:
            raise UsageError(f"Unknown option {token!r}")
    return command
