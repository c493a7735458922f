"""
Tests for buffer pool retention and eviction.
"""

import pytest
from hypothesis import given, strategies as st
from rich.console import Console

from httpsee.services.buffers import BufferPool
from httpsee.utils.ui.host import ConsoleBufferHost


def _fill(pool, host, count):
    buffers = []
    for _ in range(count):
        buffer = host.create_buffer()
        pool.insert(buffer)
        buffers.append(buffer)
    return buffers


def _fresh_host():
    return ConsoleBufferHost(Console(record=True, color_system=None))


@given(n=st.integers(min_value=0, max_value=30), k=st.integers(min_value=1, max_value=10))
def test_bounded_pool_holds_min_n_k_most_recent_first(n, k):
    host = _fresh_host()
    pool = BufferPool(host, max_retained=k)
    buffers = _fill(pool, host, n)

    ids = [record.id for record in pool]
    assert len(pool) == min(n, k)
    assert ids == sorted(ids, reverse=True)
    assert len(set(ids)) == len(ids)
    if n:
        assert ids[0] == n
    evicted = buffers[: max(0, n - k)]
    assert all(b.killed for b in evicted)
    assert all(b.live for b in buffers[len(evicted) :])


def test_insert_names_and_registers_buffer(host):
    pool = BufferPool(host)
    buffer = host.create_buffer()
    record = pool.insert(buffer)
    assert record.id == 1
    assert buffer.name == "*httpsee-1*"
    assert host.buffers() == [buffer]


def test_unbounded_pool_never_evicts_on_insert(host):
    pool = BufferPool(host, max_retained=None)
    _fill(pool, host, 25)
    assert len(pool) == 25


def test_trim_keeps_most_recent(host):
    pool = BufferPool(host)
    buffers = _fill(pool, host, 5)
    evicted = pool.trim_to(2)
    assert [r.id for r in pool] == [5, 4]
    assert [r.id for r in evicted] == [3, 2, 1]
    assert all(b.killed for b in buffers[:3])
    assert buffers[0].name not in {b.name for b in host.buffers()}


def test_trim_is_idempotent(host):
    pool = BufferPool(host)
    _fill(pool, host, 4)
    pool.trim_to(2)
    assert pool.trim_to(2) == []
    assert len(pool) == 2


def test_trim_beyond_size_is_noop(host):
    pool = BufferPool(host)
    _fill(pool, host, 3)
    assert pool.trim_to(10) == []
    assert len(pool) == 3


def test_ids_keep_increasing_after_trim(host):
    pool = BufferPool(host)
    _fill(pool, host, 3)
    pool.clear()
    record = pool.insert(host.create_buffer())
    assert record.id == 4


def test_negative_trim_rejected(host):
    pool = BufferPool(host)
    with pytest.raises(ValueError):
        pool.trim_to(-1)
