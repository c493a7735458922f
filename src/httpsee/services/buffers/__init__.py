"""
Response buffer construction and retention.
"""

from .pool import BUFFER_NAME_FORMAT, BufferPool, BufferRecord
from .factory import DEFAULT_HEADER_LINE_FIELDS, ResponseBufferFactory

__all__ = [
    "BUFFER_NAME_FORMAT",
    "BufferPool",
    "BufferRecord",
    "DEFAULT_HEADER_LINE_FIELDS",
    "ResponseBufferFactory",
]
