"""
Rich-backed buffer host: buffers are drawn to a terminal console.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from rich.console import Console, Group
from rich.rule import Rule
from rich.syntax import Syntax
from rich.text import Text

from ..buffer import Buffer
from ..theme import ICONS, SYNTAX_THEME, THEME
from .protocol import BufferHost

logger = logging.getLogger(__name__)

DISPLAY_ACTIONS = ("print", "summary", "none")


class ConsoleBufferHost(BufferHost):
    """Keep live buffers by name and print them on display."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self._buffers: Dict[str, Buffer] = {}
        self._anonymous: List[Buffer] = []
        self._focused: Optional[Buffer] = None

    def create_buffer(self, name: Optional[str] = None) -> Buffer:
        buffer = Buffer(name)
        if name is None:
            self._anonymous.append(buffer)
        else:
            self._buffers[name] = buffer
        return buffer

    def get_or_create(self, name: str) -> Buffer:
        buffer = self._buffers.get(name)
        if buffer is None or buffer.killed:
            buffer = self.create_buffer(name)
        return buffer

    def register(self, buffer: Buffer) -> None:
        if buffer in self._anonymous:
            self._anonymous.remove(buffer)
        if buffer.name:
            self._buffers[buffer.name] = buffer

    def kill_buffer(self, buffer: Buffer) -> None:
        if buffer.killed:
            return
        buffer.kill()
        if buffer.name and self._buffers.get(buffer.name) is buffer:
            del self._buffers[buffer.name]
        if buffer in self._anonymous:
            self._anonymous.remove(buffer)
        if self._focused is buffer:
            self._focused = None
        logger.debug("Killed buffer %s", buffer.name)

    def display(self, buffer: Buffer, action: str) -> None:
        if action not in DISPLAY_ACTIONS:
            logger.warning("Unknown display action %r, using 'print'", action)
            action = "print"
        self.register(buffer)
        self._focused = buffer
        if action == "none":
            return
        if action == "summary":
            self.console.print(self.render_header_line(buffer))
            return
        self.console.print(self.render(buffer))

    def redisplay(self, buffer: Buffer) -> None:
        if buffer.live:
            self.console.print(self.render(buffer))

    def message(self, text: str, level: str = "info") -> None:
        if level == "error":
            self.console.print(Text(f"{ICONS['error']} {text}", style=THEME["error"]))
        elif level == "warning":
            self.console.print(
                Text(f"{ICONS['warning']} {text}", style=THEME["warning"])
            )
        else:
            self.console.print(Text(text, style=THEME["muted"]))

    @property
    def focused(self) -> Optional[Buffer]:
        if self._focused is not None and self._focused.killed:
            self._focused = None
        return self._focused

    def buffers(self) -> List[Buffer]:
        return [b for b in self._buffers.values() if b.live]

    def render_header_line(self, buffer: Buffer) -> Text:
        """Render the buffer's overlay line, or its name when it has none."""
        if buffer.overlay is not None:
            line = buffer.overlay.render(buffer)
        else:
            line = Text()
        if buffer.name:
            prefix = Text(f"{buffer.name} ", style=THEME["field_key"])
            line = Text.assemble(prefix, line)
        return line

    def render_body(self, buffer: Buffer) -> Text:
        """Highlight the buffer text and style its decorated spans."""
        if buffer.lexer:
            body = Syntax(buffer.text, buffer.lexer, theme=SYNTAX_THEME).highlight(
                buffer.text
            )
        else:
            body = Text(buffer.text, style=THEME["text"])
        for deco in buffer.decorations:
            if deco.style:
                body.stylize(deco.style, deco.start, deco.end)
        return body

    def render(self, buffer: Buffer) -> Group:
        return Group(
            Rule(style=THEME["border"]),
            self.render_header_line(buffer),
            self.render_body(buffer),
        )
