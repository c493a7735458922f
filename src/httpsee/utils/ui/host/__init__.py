"""Host display boundary exports."""

from .protocol import BufferHost
from .console_host import DISPLAY_ACTIONS, ConsoleBufferHost

__all__ = ["BufferHost", "ConsoleBufferHost", "DISPLAY_ACTIONS"]
