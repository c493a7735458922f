"""
Bounded, ordered registry of response buffers.

One pool exists per running session. It is an explicit value handed to the
dispatcher rather than module state, so tests can build a fresh one each time.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Iterator, List, Optional

from ...schemas.response import Response
from ...utils.ui.buffer import Buffer
from ...utils.ui.host import BufferHost

logger = logging.getLogger(__name__)

BUFFER_NAME_FORMAT = "*httpsee-{id}*"


@dataclass
class BufferRecord:
    """A displayed completion: its pool id, buffer and attached response."""

    id: int
    buffer: Buffer
    response: Optional[Response]


class BufferPool:
    """
    Most-recent-first list of buffers with an optional retention bound.

    Invariants after every mutation: ``records`` is sorted by descending id,
    and holds at most ``max_retained`` entries when a bound is set.
    """

    def __init__(
        self,
        host: BufferHost,
        max_retained: Optional[int] = None,
        name_format: str = BUFFER_NAME_FORMAT,
    ):
        if max_retained is not None and max_retained < 0:
            raise ValueError("max_retained must be non-negative or None")
        self.host = host
        self.max_retained = max_retained
        self.name_format = name_format
        self.next_id = 1
        self._records: List[BufferRecord] = []
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[BufferRecord]:
        return iter(list(self._records))

    @property
    def records(self) -> List[BufferRecord]:
        return list(self._records)

    def get(self, record_id: int) -> Optional[BufferRecord]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def insert(self, buffer: Buffer) -> BufferRecord:
        """Assign the next id, name the buffer and evict past the bound."""
        with self._lock:
            record = BufferRecord(self.next_id, buffer, buffer.response)
            self.next_id += 1
            buffer.name = self.name_format.format(id=record.id)
            self.host.register(buffer)
            self._records.insert(0, record)
            logger.debug("Registered %s", buffer.name)
            if self.max_retained is not None and len(self._records) > self.max_retained:
                self._evict_from(self.max_retained)
            return record

    def trim_to(self, n: int) -> List[BufferRecord]:
        """
        Keep the ``n`` most recent buffers and destroy the rest.

        Returns the evicted records; empty when ``n >= len(pool)``.
        """
        if n < 0:
            raise ValueError("Cannot keep a negative number of buffers")
        with self._lock:
            if n >= len(self._records):
                return []
            return self._evict_from(n)

    def clear(self) -> List[BufferRecord]:
        return self.trim_to(0)

    def _evict_from(self, keep: int) -> List[BufferRecord]:
        evicted = self._records[keep:]
        self._records = self._records[:keep]
        for record in evicted:
            self.host.kill_buffer(record.buffer)
        if evicted:
            logger.debug(
                "Evicted %d buffer(s): %s",
                len(evicted),
                ", ".join(r.buffer.name or "?" for r in evicted),
            )
        return evicted
