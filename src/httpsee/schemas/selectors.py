"""
Result selectors: which representation of a completed request the caller wants.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Union

from .errors import UsageError

if TYPE_CHECKING:
    from ..utils.ui.buffer import Buffer


class ResultTag(Enum):
    """Built-in result representations."""

    BUFFER = "buffer"
    RESPONSE = "response"


BufferTag = ResultTag.BUFFER
StructuredTag = ResultTag.RESPONSE

RAW_SELECTORS = ("file", "binary", "string", "stream")


@dataclass(frozen=True)
class Projector:
    """
    Parse capability run against a scratch buffer holding the response body.

    The scratch buffer's point is at the start of the body and it is discarded
    once ``parse`` returns.
    """

    parse: Callable[["Buffer"], Any]

    def __call__(self, scratch: "Buffer") -> Any:
        return self.parse(scratch)

    @classmethod
    def text(cls) -> "Projector":
        return cls(lambda scratch: scratch.text[scratch.point :])

    @classmethod
    def json(cls) -> "Projector":
        return cls(lambda scratch: json.loads(scratch.text[scratch.point :]))


Selector = Union[ResultTag, Projector]


def parse_selector(value: Any) -> Selector:
    """
    Normalize a caller-supplied ``as`` value into a Selector.

    Raises:
        UsageError: For raw/unbuffered representations and unknown values.
    """
    if isinstance(value, (ResultTag, Projector)):
        return value
    if isinstance(value, tuple) and value and value[0] in RAW_SELECTORS:
        raise UsageError(
            f"Result representation {value[0]!r} is not supported: "
            "responses are always buffered"
        )
    if isinstance(value, str):
        if value in RAW_SELECTORS:
            raise UsageError(
                f"Result representation {value!r} is not supported: "
                "responses are always buffered"
            )
        try:
            return ResultTag(value)
        except ValueError:
            raise UsageError(f"Unknown result representation: {value!r}") from None
    if callable(value):
        return Projector(value)
    raise UsageError(f"Unknown result representation: {value!r}")
