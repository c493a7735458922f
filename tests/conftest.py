"""
Pytest configuration and fixtures.
"""

import sys
from pathlib import Path
from typing import Any, Callable, List

import pytest
from rich.console import Console


def pytest_configure(config):
    """Configure pytest."""
    src_path = Path(__file__).parent.parent / "src"
    sys.path.insert(0, str(src_path))


class FakeEngine:
    """Engine double: records requests and completes them on demand."""

    def __init__(self):
        self.requests: List[Any] = []
        self.pending: List[Callable[[Any], Any]] = []

    def submit(self, request, on_complete):
        self.requests.append(request)
        self.pending.append(on_complete)
        return len(self.requests)

    def complete(self, outcome, index: int = 0):
        return self.pending.pop(index)(outcome)


@pytest.fixture
def console() -> Console:
    return Console(record=True, width=120, force_terminal=False, color_system=None)


@pytest.fixture
def host(console):
    from httpsee.utils.ui.host import ConsoleBufferHost

    return ConsoleBufferHost(console)


@pytest.fixture
def engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def make_response():
    from httpsee.schemas import Response

    def _make(status_code=200, body="", headers=None, version="HTTP/1.1"):
        return Response(
            status_code=status_code,
            version=version,
            headers=headers if headers is not None else {},
            body=body,
        )

    return _make


@pytest.fixture
def make_dispatcher(engine, host):
    from httpsee.config import SeeConfig
    from httpsee.services import RequestDispatcher

    def _make(**config_values):
        return RequestDispatcher(SeeConfig(**config_values), engine, host)

    return _make
