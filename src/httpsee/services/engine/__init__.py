"""
Transport engine boundary and the default httpx implementation.
"""

from .protocol import (
    PASSTHROUGH_OPTIONS,
    CompletionCallback,
    EngineRequest,
    TransportEngine,
)
from .httpx_engine import HttpxEngine

__all__ = [
    "PASSTHROUGH_OPTIONS",
    "CompletionCallback",
    "EngineRequest",
    "TransportEngine",
    "HttpxEngine",
]
