"""
Header-line overlay attached to response buffers.

Each segment is recomputed from the buffer's attached response every time the
line is drawn. The reveal toggle writes the full header list either into a
shared headers buffer or inline at the top of the response buffer.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional, Sequence

from rich.text import Text

from ...schemas.errors import UsageError
from .buffer import Buffer
from .segments import BaseSegment, RevealToggleSegment, build_segments
from .theme import ICONS, THEME

if TYPE_CHECKING:
    from .host import BufferHost

logger = logging.getLogger(__name__)

HEADERS_TAG = "headers"


class HeaderOverlay:
    """Status line for one buffer, plus the full-header reveal action."""

    def __init__(
        self,
        segments: Sequence[BaseSegment],
        host: "BufferHost",
        headers_buffer: Optional[str] = None,
        display_action: str = "print",
    ):
        self.segments: List[BaseSegment] = list(segments)
        self.host = host
        self.headers_buffer = headers_buffer
        self.display_action = display_action

    @classmethod
    def from_fields(
        cls,
        fields: Sequence[str],
        host: "BufferHost",
        headers_buffer: Optional[str] = None,
        display_action: str = "print",
    ) -> "HeaderOverlay":
        return cls(build_segments(fields), host, headers_buffer, display_action)

    @property
    def keys(self) -> List[str]:
        return [segment.key for segment in self.segments]

    @property
    def has_toggle(self) -> bool:
        return any(isinstance(s, RevealToggleSegment) for s in self.segments)

    def render(self, buffer: Buffer) -> Text:
        line = Text()
        if buffer.response is None:
            return line
        separator = Text(f" {ICONS['separator']} ", style=THEME["separator"])
        parts = [
            segment.render(buffer.response)
            for segment in self.segments
            if segment.should_render(buffer.response)
        ]
        return separator.join(part for part in parts if part is not None)

    def render_plain(self, buffer: Buffer) -> str:
        return self.render(buffer).plain

    def reveal(self, buffer: Buffer) -> Buffer:
        """
        Render the full header list of ``buffer``'s response.

        Previously revealed headers at the insertion point are replaced, never
        duplicated, and point stays on the same text. Returns the buffer the
        headers were written to.
        """
        response = buffer.response
        if response is None:
            raise UsageError(f"Buffer {buffer.name} has no attached response")

        block = "\n".join(response.headers.format_lines()) + "\n"

        if self.headers_buffer:
            target = self.host.get_or_create(self.headers_buffer)
            target.erase()
            target.insert(
                block, at=0, tag=HEADERS_TAG, style=THEME["header_block"], read_only=True
            )
            target.response = response
            self.host.display(target, self.display_action)
            logger.debug("Revealed headers of %s in %s", buffer.name, target.name)
            return target

        previous = buffer.region_for(HEADERS_TAG)
        if previous is not None:
            buffer.delete_region(previous.start, previous.end)
        buffer.insert(
            block + "\n",
            at=0,
            tag=HEADERS_TAG,
            style=THEME["header_block"],
            read_only=True,
        )
        self.segments = [
            s for s in self.segments if not isinstance(s, RevealToggleSegment)
        ]
        self.host.redisplay(buffer)
        logger.debug("Revealed headers inline in %s", buffer.name)
        return buffer
