"""
Interactive HTTP front-end that renders every response into a managed buffer.
"""

from .config import SeeConfig
from .schemas import (
    BufferTag,
    ErrorResult,
    Headers,
    HttpError,
    Projector,
    Response,
    StructuredTag,
    TransportError,
    UsageError,
)
from .services import (
    BufferPool,
    ContentTypeRegistry,
    HttpxEngine,
    RequestDispatcher,
    TransportEngine,
)
from .utils.ui import Buffer, BufferHost, ConsoleBufferHost, HeaderOverlay

__version__ = "0.1.0"

__all__ = [
    "SeeConfig",
    "BufferTag",
    "ErrorResult",
    "Headers",
    "HttpError",
    "Projector",
    "Response",
    "StructuredTag",
    "TransportError",
    "UsageError",
    "BufferPool",
    "ContentTypeRegistry",
    "HttpxEngine",
    "RequestDispatcher",
    "TransportEngine",
    "Buffer",
    "BufferHost",
    "ConsoleBufferHost",
    "HeaderOverlay",
]
