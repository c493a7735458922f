"""
Build one display buffer from one response.
"""

import logging
from typing import Optional, Sequence

from ...schemas.response import Response
from ...utils.ui.buffer import Buffer
from ...utils.ui.host import BufferHost
from ...utils.ui.overlay import HeaderOverlay
from ..content_types import ContentTypeRegistry
from .pool import BufferPool

logger = logging.getLogger(__name__)

DEFAULT_HEADER_LINE_FIELDS = ("status", "content-type", "content-length", "headers")


class ResponseBufferFactory:
    """
    Fill a new buffer with a response body, render it, attach the response and
    overlay, then hand it to the pool.
    """

    def __init__(
        self,
        host: BufferHost,
        pool: BufferPool,
        registry: ContentTypeRegistry,
        header_line_fields: Sequence[str] = DEFAULT_HEADER_LINE_FIELDS,
        headers_buffer: Optional[str] = None,
        display_action: str = "print",
    ):
        self.host = host
        self.pool = pool
        self.registry = registry
        self.header_line_fields = list(header_line_fields)
        self.headers_buffer = headers_buffer
        self.display_action = display_action

    def build(self, response: Response) -> Buffer:
        buffer = self.host.create_buffer()
        buffer.raw = response.content
        buffer.response = response
        buffer.insert(response.text, at=0)

        rule = self.registry.apply(buffer, response.content_type)
        if rule is None:
            logger.debug("No renderer for content type %r", response.content_type)

        buffer.goto(0)
        buffer.overlay = HeaderOverlay.from_fields(
            self.header_line_fields,
            self.host,
            headers_buffer=self.headers_buffer,
            display_action=self.display_action,
        )
        self.pool.insert(buffer)
        return buffer
