"""Segments package exports."""

from typing import Callable, Dict, List, Sequence

from ....schemas.errors import UsageError
from .base import BaseSegment
from .fields import HeaderFieldSegment, RevealToggleSegment, StatusSegment

SEGMENT_TYPES: Dict[str, Callable[[], BaseSegment]] = {
    "status": StatusSegment,
    "content-type": lambda: HeaderFieldSegment("content-type"),
    "content-length": lambda: HeaderFieldSegment("content-length"),
    "headers": RevealToggleSegment,
}


def validate_fields(fields: Sequence[str]) -> None:
    """
    Check that every key names a known segment.

    Raises:
        UsageError: If a key names no known segment.
    """
    for key in fields:
        if key not in SEGMENT_TYPES:
            raise UsageError(
                f"Unknown header line field {key!r}; "
                f"expected one of {', '.join(SEGMENT_TYPES)}"
            )


def build_segments(fields: Sequence[str]) -> List[BaseSegment]:
    """Instantiate a fresh segment list from field keys."""
    validate_fields(fields)
    return [SEGMENT_TYPES[key]() for key in fields]


__all__ = [
    "BaseSegment",
    "HeaderFieldSegment",
    "RevealToggleSegment",
    "StatusSegment",
    "SEGMENT_TYPES",
    "build_segments",
    "validate_fields",
]
