"""
Default transport engine built on httpx's async client.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional, Set

import httpx

from ...schemas.errors import HttpError, TransportError
from ...schemas.response import Response
from .protocol import CompletionCallback, EngineRequest, TransportEngine

logger = logging.getLogger(__name__)


class HttpxEngine(TransportEngine):
    """
    Run each request as a task on the current event loop.

    Completions are delivered on the loop's thread, one callback per request.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
        max_redirects: int = 5,
    ):
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
            max_redirects=max_redirects,
        )
        self._tasks: Set[asyncio.Task] = set()
        self._errors: List[BaseException] = []

    def submit(
        self, request: EngineRequest, on_complete: CompletionCallback
    ) -> asyncio.Task:
        loop = asyncio.get_running_loop()
        task = loop.create_task(self._perform(request, on_complete))
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        return task

    def pop_errors(self) -> List[BaseException]:
        """Return and forget errors raised by completed requests so far."""
        errors, self._errors = self._errors, []
        return errors

    async def drain(self) -> None:
        """
        Wait for every in-flight request.

        Re-raises the first error raised by a completion callback, including
        requests that finished before ``drain`` was called. Remaining errors
        are logged.
        """
        while self._tasks:
            await asyncio.wait(list(self._tasks))
        errors = self.pop_errors()
        for error in errors[1:]:
            logger.error("Completion callback failed: %r", error)
        if errors:
            raise errors[0]

    def _on_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            self._errors.append(error)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _perform(self, request: EngineRequest, on_complete: CompletionCallback) -> Any:
        options = request.options
        finally_ = options.get("finally")
        try:
            outcome = await self._fetch(request)
            return on_complete(outcome)
        finally:
            if finally_ is not None:
                finally_()

    async def _fetch(self, request: EngineRequest):
        options = request.options
        if options.get("noquery"):
            logger.debug("Option 'noquery' has no effect with the httpx engine")

        kwargs: Dict[str, Any] = {"headers": request.headers}
        timeout = self._timeout(options)
        if timeout is not None:
            kwargs["timeout"] = timeout

        body = options.get("body")
        if isinstance(body, (dict, list)):
            kwargs["json"] = body
        elif body is not None:
            if options.get("body_type") == "binary" and isinstance(body, str):
                body = body.encode("utf-8")
            kwargs["content"] = body

        try:
            raw = await self._client.request(request.method, request.url, **kwargs)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.debug("Transport failure for %s %s: %r", request.method, request.url, e)
            return TransportError(code=type(e).__name__, message=str(e))

        response = Response(
            status_code=raw.status_code,
            version=raw.http_version,
            headers=list(raw.headers.multi_items()),
            body=raw.text if options.get("decode", True) else raw.content,
        )
        if not response.is_success:
            return HttpError(response=response)
        return response

    def _timeout(self, options: Dict[str, Any]) -> Optional[httpx.Timeout]:
        total = options.get("timeout")
        connect = options.get("connect_timeout")
        if total is None and connect is None:
            return None
        return httpx.Timeout(total, connect=connect if connect is not None else total)
