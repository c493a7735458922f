"""
Host-agnostic contract for buffer and window display primitives.

The dispatcher and its collaborators only talk to the host through this
interface, so a terminal, a test recorder or an editor bridge can stand in.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..buffer import Buffer


class BufferHost(ABC):
    """
    Unified display contract.

    Implementations own the set of live buffers and know how to put one on
    screen according to a display action.
    """

    @abstractmethod
    def create_buffer(self, name: Optional[str] = None) -> Buffer:
        """
        Create a new, empty buffer.

        Args:
            name: Optional buffer name. Unnamed buffers are registered with the
                host once they are named.

        Returns:
            The new buffer.
        """
        ...

    @abstractmethod
    def get_or_create(self, name: str) -> Buffer:
        """Return the live buffer with this name, creating it if needed."""
        ...

    @abstractmethod
    def register(self, buffer: Buffer) -> None:
        """Track a buffer that was named after creation."""
        ...

    @abstractmethod
    def kill_buffer(self, buffer: Buffer) -> None:
        """Destroy a buffer. Killing a dead buffer is a no-op."""
        ...

    @abstractmethod
    def display(self, buffer: Buffer, action: str) -> None:
        """
        Show a buffer.

        Args:
            buffer: Buffer to show; it becomes the focused buffer.
            action: Display strategy name (print, summary, none).
        """
        ...

    @abstractmethod
    def redisplay(self, buffer: Buffer) -> None:
        """Redraw a buffer that is already shown."""
        ...

    @abstractmethod
    def message(self, text: str, level: str = "info") -> None:
        """Show a one-line diagnostic to the user."""
        ...

    @property
    @abstractmethod
    def focused(self) -> Optional[Buffer]:
        """The most recently displayed live buffer."""
        ...

    @abstractmethod
    def buffers(self) -> List[Buffer]:
        """All live buffers known to the host."""
        ...
