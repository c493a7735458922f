"""
Request dispatch, continuation adapting and buffer services.
"""

from .buffers import BufferPool, BufferRecord, ResponseBufferFactory
from .content_types import (
    ContentRenderer,
    ContentTypeRegistry,
    ContentTypeRule,
    ImageRenderer,
    JsonRenderer,
    SyntaxRenderer,
)
from .continuation import ContinuationAdapter
from .dispatcher import RequestDispatcher
from .engine import EngineRequest, HttpxEngine, TransportEngine

__all__ = [
    "BufferPool",
    "BufferRecord",
    "ResponseBufferFactory",
    "ContentRenderer",
    "ContentTypeRegistry",
    "ContentTypeRule",
    "ImageRenderer",
    "JsonRenderer",
    "SyntaxRenderer",
    "ContinuationAdapter",
    "RequestDispatcher",
    "EngineRequest",
    "HttpxEngine",
    "TransportEngine",
]
