"""
Turn a completed request into the representation the caller asked for.
"""

import logging
from typing import Any, Callable, Optional, Union

from ..schemas.errors import ErrorResult, HttpError, TransportError
from ..schemas.response import Response
from ..schemas.selectors import Projector, ResultTag, Selector
from ..utils.ui.buffer import Buffer
from ..utils.ui.host import BufferHost
from .buffers.factory import ResponseBufferFactory

logger = logging.getLogger(__name__)

Continuation = Callable[[Any], Any]
Outcome = Union[Response, ErrorResult]


class ContinuationAdapter:
    """
    Route engine completions to continuations.

    Any obtained response, 2xx or not, is built into a buffer and displayed
    before a continuation runs. Transport failures only produce a diagnostic.
    """

    def __init__(
        self,
        factory: ResponseBufferFactory,
        host: BufferHost,
        display_action: str = "print",
    ):
        self.factory = factory
        self.host = host
        self.display_action = display_action

    def completion_handler(
        self,
        selector: Selector,
        then: Optional[Continuation] = None,
        else_: Optional[Continuation] = None,
    ) -> Callable[[Outcome], Any]:
        """Bind a selector and continuations into a one-shot engine callback."""

        def on_complete(outcome: Outcome) -> Any:
            return self.handle(outcome, selector, then, else_)

        return on_complete

    def handle(
        self,
        outcome: Outcome,
        selector: Selector,
        then: Optional[Continuation] = None,
        else_: Optional[Continuation] = None,
    ) -> Any:
        if isinstance(outcome, TransportError):
            logger.warning("Request failed: %s", outcome.describe())
            self.host.message(f"Request failed: {outcome.describe()}", level="error")
            return None

        if isinstance(outcome, HttpError):
            value = self.adapt(outcome.response, selector)
            continuation = else_ if else_ is not None else then
            logger.debug("HTTP error %s", outcome.describe())
        else:
            value = self.adapt(outcome, selector)
            continuation = then

        if continuation is None:
            return None
        return continuation(value)

    def adapt(self, response: Response, selector: Selector) -> Any:
        """Build and display the response buffer, then shape the result."""
        buffer = self.factory.build(response)
        self.host.display(buffer, self.display_action)

        if selector is ResultTag.BUFFER:
            return buffer
        if selector is ResultTag.RESPONSE:
            return response
        if isinstance(selector, Projector):
            return self._project(response, selector)
        raise TypeError(f"Unsupported selector {selector!r}")

    def _project(self, response: Response, projector: Projector) -> Any:
        scratch = Buffer(text=response.text)
        scratch.raw = response.content
        scratch.response = response
        try:
            return projector(scratch)
        finally:
            scratch.kill()
