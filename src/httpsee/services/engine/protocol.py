"""
Transport engine contract.

The engine performs the network call out of band and reports back through a
single completion callback per request: a Response for 2xx, an ErrorResult
otherwise.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Union

from ...schemas.errors import ErrorResult
from ...schemas.response import Response

CompletionCallback = Callable[[Union[Response, ErrorResult]], Any]

PASSTHROUGH_OPTIONS = (
    "body",
    "body_type",
    "decode",
    "connect_timeout",
    "timeout",
    "noquery",
    "finally",
)


@dataclass
class EngineRequest:
    """A fully resolved request handed to the engine."""

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    result_form: str = "response"
    options: Dict[str, Any] = field(default_factory=dict)


class TransportEngine(ABC):
    """Unified engine contract; implementations own all wire-level policy."""

    @abstractmethod
    def submit(self, request: EngineRequest, on_complete: CompletionCallback) -> Any:
        """
        Start a request without waiting for it.

        Args:
            request: Resolved method, url, headers and passthrough options
            on_complete: Invoked exactly once with the outcome

        Returns:
            An engine-specific handle for the in-flight request.
        """
        ...
