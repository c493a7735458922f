"""
Schemas for responses, failure outcomes and result selectors.
"""

from .response import Headers, Response
from .errors import ErrorResult, HttpError, TransportError, UsageError
from .selectors import (
    BufferTag,
    Projector,
    ResultTag,
    Selector,
    StructuredTag,
    parse_selector,
)

__all__ = [
    "Headers",
    "Response",
    "ErrorResult",
    "HttpError",
    "TransportError",
    "UsageError",
    "BufferTag",
    "Projector",
    "ResultTag",
    "Selector",
    "StructuredTag",
    "parse_selector",
]
