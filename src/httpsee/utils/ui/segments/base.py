"""
Base segment class for header-line overlay fields.
"""

from abc import ABC, abstractmethod
from typing import Optional

from rich.text import Text

from ....schemas.response import Response


class BaseSegment(ABC):
    """Abstract base class for all overlay segments."""

    key: str = ""

    @abstractmethod
    def render(self, response: Response) -> Optional[Text]:
        """Render the segment for a response, or None when it has nothing to show."""
        pass

    def should_render(self, response: Response) -> bool:
        """Determine if the segment should be rendered."""
        return True

