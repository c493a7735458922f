"""
Buffers, overlays and host display for response rendering.
"""

from .buffer import Buffer, Decoration
from .host import BufferHost, ConsoleBufferHost
from .overlay import HEADERS_TAG, HeaderOverlay
from .theme import ICONS, THEME

__all__ = [
    "Buffer",
    "Decoration",
    "BufferHost",
    "ConsoleBufferHost",
    "HEADERS_TAG",
    "HeaderOverlay",
    "ICONS",
    "THEME",
]
