"""
Display buffer: an addressable, mutable text container shown by the host.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from ...schemas.response import Response
    from .overlay import HeaderOverlay


@dataclass
class Decoration:
    """A tagged span of buffer text with its own style."""

    start: int
    end: int
    tag: str
    style: Optional[str] = None
    read_only: bool = True

    def contains(self, pos: int) -> bool:
        return self.start <= pos < self.end


class Buffer:
    """
    Text buffer with a cursor, decorations and an attached response.

    Positions are character offsets into ``text``. Insertions and deletions
    keep ``point`` and every decoration anchored to the text around them.
    """

    def __init__(self, name: Optional[str] = None, text: str = ""):
        self.name = name
        self.text = text
        self.raw: bytes = b""
        self.point = 0
        self.mode = "fundamental"
        self.lexer: Optional[str] = None
        self.response: Optional["Response"] = None
        self.overlay: Optional["HeaderOverlay"] = None
        self.decorations: List[Decoration] = []
        self.killed = False

    def __repr__(self) -> str:
        return f"<Buffer {self.name or '(unnamed)'} len={len(self.text)}>"

    @property
    def live(self) -> bool:
        return not self.killed

    def goto(self, pos: int) -> None:
        self.point = max(0, min(pos, len(self.text)))

    def insert(
        self,
        content: str,
        at: Optional[int] = None,
        tag: Optional[str] = None,
        style: Optional[str] = None,
        read_only: bool = False,
    ) -> Decoration:
        """
        Insert text and return the span it occupies.

        Without ``at`` the text goes in at point and point moves past it.
        With ``at`` point is left on the same character it was on.
        """
        at_point = at is None
        pos = self.point if at_point else max(0, min(at, len(self.text)))
        size = len(content)
        self.text = self.text[:pos] + content + self.text[pos:]

        for deco in self.decorations:
            if deco.start >= pos:
                deco.start += size
                deco.end += size
            elif deco.end > pos:
                deco.end += size

        if at_point or self.point > pos:
            self.point += size

        span = Decoration(pos, pos + size, tag or "", style, read_only)
        if tag is not None:
            self.decorations.append(span)
        return span

    def delete_region(self, start: int, end: int) -> None:
        start = max(0, start)
        end = min(end, len(self.text))
        if end <= start:
            return
        size = end - start
        self.text = self.text[:start] + self.text[end:]

        if self.point >= end:
            self.point -= size
        elif self.point > start:
            self.point = start

        kept = []
        for deco in self.decorations:
            if deco.start >= start and deco.end <= end:
                continue
            if deco.end <= start:
                pass
            elif deco.start >= end:
                deco.start -= size
                deco.end -= size
            else:
                deco.start = min(deco.start, start)
                deco.end = deco.end - size if deco.end >= end else start
            kept.append(deco)
        self.decorations = kept

    def replace_text(self, content: str) -> None:
        """Replace the whole text, dropping decorations and resetting point."""
        self.text = content
        self.decorations = []
        self.point = 0

    def erase(self) -> None:
        self.replace_text("")

    def region_for(self, tag: str) -> Optional[Decoration]:
        for deco in self.decorations:
            if deco.tag == tag:
                return deco
        return None

    def is_read_only(self, pos: int) -> bool:
        return any(d.read_only and d.contains(pos) for d in self.decorations)

    def kill(self) -> None:
        self.killed = True
        self.overlay = None
        self.decorations = []
