"""
Overlay segments: status, single header fields and the reveal toggle.
"""

from typing import Optional

from rich.text import Text

from ....schemas.response import Response
from ..theme import THEME
from .base import BaseSegment


class StatusSegment(BaseSegment):
    """Protocol version and status code, styled by outcome."""

    key = "status"

    def render(self, response: Response) -> Optional[Text]:
        style = THEME["status_success"] if response.is_success else THEME["status_error"]
        return Text(f"{response.version} {response.status_code}", style=style)


class HeaderFieldSegment(BaseSegment):
    """One response header, shown only when the response carries it."""

    def __init__(self, header: str, label: Optional[str] = None):
        self.key = header.lower()
        self.header = header
        self.label = label or header

    def should_render(self, response: Response) -> bool:
        return self.header in response.headers

    def render(self, response: Response) -> Optional[Text]:
        value = response.header(self.header)
        if value is None:
            return None
        line = Text()
        line.append(f"{self.label}: ", style=THEME["field_key"])
        line.append(value, style=THEME["field_value"])
        return line


class RevealToggleSegment(BaseSegment):
    """Button that reveals the full header list."""

    key = "headers"

    def __init__(self, label: str = "[headers]"):
        self.label = label

    def render(self, response: Response) -> Optional[Text]:
        return Text(self.label, style=THEME["button"])
