"""
Top-level request entry point.

The dispatcher merges session configuration into each request, validates the
result selector before anything touches the network, and wires the engine's
single completion into the continuation adapter.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional

from ..schemas.errors import UsageError
from ..schemas.selectors import BufferTag, parse_selector
from ..utils.ui.buffer import Buffer
from ..utils.ui.host import BufferHost
from ..utils.ui.segments import validate_fields
from .buffers import BufferPool, BufferRecord, ResponseBufferFactory
from .content_types import ContentTypeRegistry
from .continuation import Continuation, ContinuationAdapter
from .engine import PASSTHROUGH_OPTIONS, EngineRequest, TransportEngine

if TYPE_CHECKING:
    from ..config.see_config import SeeConfig

logger = logging.getLogger(__name__)

PATH_ROOT = "/"


class RequestDispatcher:
    """
    Issue requests through an engine and render every response into a buffer.

    One dispatcher, and so one pool, exists per session.
    """

    def __init__(
        self,
        config: "SeeConfig",
        engine: TransportEngine,
        host: BufferHost,
        pool: Optional[BufferPool] = None,
        registry: Optional[ContentTypeRegistry] = None,
    ):
        validate_fields(config.header_line_fields)

        self.config = config
        self.engine = engine
        self.host = host
        self.pool = (
            pool if pool is not None else BufferPool(host, config.keep_buffers)
        )
        self.registry = (
            registry
            if registry is not None
            else ContentTypeRegistry.from_config(config.content_type_rules)
        )
        self.factory = ResponseBufferFactory(
            host,
            self.pool,
            self.registry,
            header_line_fields=config.header_line_fields,
            headers_buffer=config.headers_buffer,
            display_action=config.display_action,
        )
        self.adapter = ContinuationAdapter(
            self.factory, host, display_action=config.display_action
        )

    def resolve_url(self, url: str) -> str:
        if url.startswith(PATH_ROOT) and self.config.base_url:
            return self.config.base_url + url
        return url

    def merge_headers(self, headers: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        """Explicit headers win over configured defaults, compared case-insensitively."""
        explicit = dict(headers or {})
        overridden = {key.lower() for key in explicit}
        merged = {
            key: value
            for key, value in self.config.base_headers.items()
            if key.lower() not in overridden
        }
        merged.update(explicit)
        return merged

    def dispatch(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        as_: Any = BufferTag,
        then: Optional[Continuation] = None,
        else_: Optional[Continuation] = None,
        **options: Any,
    ) -> Any:
        """
        Start a request; continuations run when the engine completes it.

        Args:
            method: HTTP method
            url: Absolute url, or a path joined to ``base_url``
            headers: Per-request headers, overriding ``base_headers``
            as_: BufferTag, StructuredTag, a Projector or a callable
            then: Success continuation (also used for HTTP errors without ``else_``)
            else_: HTTP error continuation
            **options: Passed verbatim to the engine (body, body_type, decode,
                connect_timeout, timeout, noquery, finally / finally_)

        Returns:
            The engine's handle for the in-flight request.

        Raises:
            UsageError: For raw/unbuffered or unknown ``as_`` values.
        """
        selector = parse_selector(as_)
        for name, continuation in (("then", then), ("else", else_)):
            if continuation is not None and not callable(continuation):
                raise UsageError(f"'{name}' continuation must be callable")

        if "finally_" in options:
            options["finally"] = options.pop("finally_")
        unknown = sorted(set(options) - set(PASSTHROUGH_OPTIONS))
        if unknown:
            logger.debug("Forwarding unrecognized options: %s", ", ".join(unknown))

        request = EngineRequest(
            method=method.upper(),
            url=self.resolve_url(url),
            headers=self.merge_headers(headers),
            result_form="response",
            options=options,
        )
        logger.debug("Dispatching %s %s", request.method, request.url)
        return self.engine.submit(
            request, self.adapter.completion_handler(selector, then, else_)
        )

    def trim_buffers(self, n: int) -> List[BufferRecord]:
        """Keep the ``n`` most recent response buffers and destroy the rest."""
        evicted = self.pool.trim_to(n)
        logger.debug("Trimmed %d buffer(s), %d kept", len(evicted), len(self.pool))
        return evicted

    def reveal_headers(self, buffer: Optional[Buffer] = None) -> Buffer:
        """Reveal the full headers of ``buffer`` or of the focused buffer."""
        target = buffer if buffer is not None else self.host.focused
        if target is None or target.overlay is None or target.response is None:
            raise UsageError("No response buffer is focused")
        return target.overlay.reveal(target)
