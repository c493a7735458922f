"""
Tests for the request dispatcher: url/header merging, validation and
secondary operations.
"""

from unittest.mock import Mock

import pytest

from httpsee.schemas import UsageError


class TestUrlResolution:
    def test_path_joined_to_base(self, make_dispatcher):
        dispatcher = make_dispatcher(base_url="http://h")
        assert dispatcher.resolve_url("/x") == "http://h/x"

    def test_absolute_url_unchanged(self, make_dispatcher):
        dispatcher = make_dispatcher(base_url="http://h")
        assert dispatcher.resolve_url("http://other/x") == "http://other/x"

    def test_no_base_leaves_path(self, make_dispatcher):
        assert make_dispatcher().resolve_url("/x") == "/x"

    def test_engine_receives_resolved_url(self, make_dispatcher, engine):
        make_dispatcher(base_url="http://h").dispatch("get", "/x")
        request = engine.requests[0]
        assert request.url == "http://h/x"
        assert request.method == "GET"
        assert request.result_form == "response"


class TestHeaderMerge:
    def test_explicit_wins_defaults_kept(self, make_dispatcher):
        dispatcher = make_dispatcher(base_headers={"A": "1", "C": "4"})
        merged = dispatcher.merge_headers({"A": "2", "B": "3"})
        assert merged == {"C": "4", "A": "2", "B": "3"}

    def test_collision_is_case_insensitive(self, make_dispatcher):
        dispatcher = make_dispatcher(base_headers={"Accept": "*/*"})
        assert dispatcher.merge_headers({"accept": "text/html"}) == {"accept": "text/html"}

    def test_override_and_addition(self, make_dispatcher, engine):
        dispatcher = make_dispatcher(base_headers={"A": "1"})
        dispatcher.dispatch("GET", "http://h", headers={"A": "2", "B": "3"})
        assert engine.requests[0].headers == {"A": "2", "B": "3"}

    def test_no_explicit_headers(self, make_dispatcher):
        dispatcher = make_dispatcher(base_headers={"A": "1"})
        assert dispatcher.merge_headers(None) == {"A": "1"}


class TestUsageErrors:
    @pytest.mark.parametrize("raw", ["file", ("file", "/tmp/x"), "binary", "string"])
    def test_raw_selector_rejected_before_network(self, make_dispatcher, engine, raw):
        dispatcher = make_dispatcher()
        with pytest.raises(UsageError):
            dispatcher.dispatch("GET", "http://h/x", as_=raw, then=Mock())
        assert engine.requests == []
        assert len(dispatcher.pool) == 0
        assert dispatcher.pool.next_id == 1

    def test_non_callable_continuation(self, make_dispatcher, engine):
        with pytest.raises(UsageError, match="then"):
            make_dispatcher().dispatch("GET", "http://h/x", then="nope")
        assert engine.requests == []

    def test_bad_header_line_fields_rejected_at_construction(self, make_dispatcher):
        with pytest.raises(UsageError):
            make_dispatcher(header_line_fields=["status", "nope"])


class TestPassthrough:
    def test_options_forwarded_verbatim(self, make_dispatcher, engine):
        done = Mock()
        make_dispatcher().dispatch(
            "POST",
            "http://h/x",
            body=b"payload",
            body_type="binary",
            decode=False,
            connect_timeout=1.5,
            timeout=10,
            noquery=True,
            finally_=done,
        )
        assert engine.requests[0].options == {
            "body": b"payload",
            "body_type": "binary",
            "decode": False,
            "connect_timeout": 1.5,
            "timeout": 10,
            "noquery": True,
            "finally": done,
        }

    def test_dispatch_returns_engine_handle(self, make_dispatcher):
        assert make_dispatcher().dispatch("GET", "http://h/x") == 1


class TestRetention:
    def test_keep_buffers_bounds_pool(self, make_dispatcher, engine, make_response):
        dispatcher = make_dispatcher(keep_buffers=2)
        for _ in range(4):
            dispatcher.dispatch("GET", "http://h/x")
            engine.complete(make_response())
        assert [r.id for r in dispatcher.pool] == [4, 3]

    def test_trim_buffers_idempotent(self, make_dispatcher, engine, make_response):
        dispatcher = make_dispatcher(keep_buffers=None)
        for _ in range(5):
            dispatcher.dispatch("GET", "http://h/x")
            engine.complete(make_response())
        assert len(dispatcher.trim_buffers(2)) == 3
        assert dispatcher.trim_buffers(2) == []
        assert [r.id for r in dispatcher.pool] == [5, 4]

    def test_unknown_charset_still_displayed(self, make_dispatcher, engine, make_response, console):
        then = Mock()
        dispatcher = make_dispatcher()
        dispatcher.dispatch("GET", "http://h/x", then=then)
        engine.complete(
            make_response(
                body="hello", headers={"Content-Type": "text/plain; charset=x-bogus"}
            )
        )

        buffer = dispatcher.pool.records[0].buffer
        assert buffer.raw == b"hello"
        assert buffer.text == "hello"
        then.assert_called_once_with(buffer)
        assert "hello" in console.export_text()


class TestRevealHeaders:
    def test_reveals_focused_buffer(self, make_dispatcher, engine, make_response):
        dispatcher = make_dispatcher()
        dispatcher.dispatch("GET", "http://h/x")
        engine.complete(make_response(body="body", headers={"Server": "demo"}))

        buffer = dispatcher.reveal_headers()
        dispatcher.reveal_headers()

        assert buffer is dispatcher.pool.records[0].buffer
        assert buffer.text == "Server: demo\n\nbody"

    def test_reveal_with_shared_headers_buffer(self, make_dispatcher, engine, make_response):
        dispatcher = make_dispatcher(headers_buffer="*httpsee-headers*")
        dispatcher.dispatch("GET", "http://h/x")
        engine.complete(make_response(body="body", headers={"Server": "demo"}))

        target = dispatcher.reveal_headers()

        assert target.name == "*httpsee-headers*"
        assert target.text == "Server: demo\n"
        assert dispatcher.pool.records[0].buffer.text == "body"

    def test_nothing_focused(self, make_dispatcher):
        with pytest.raises(UsageError, match="No response buffer"):
            make_dispatcher().reveal_headers()
