"""
Tests for interactive command parsing and execution.
"""

from unittest.mock import Mock

import pytest

from httpsee.main import _report_errors, run_command
from httpsee.schemas import BufferTag, Projector, StructuredTag, UsageError
from httpsee.utils.ui.prompting import parse_command


class TestParse:
    def test_blank_line(self):
        assert parse_command("   ") is None

    def test_request_with_options(self):
        command = parse_command(
            "post /items -H 'Content-Type: application/json' -d '{\"a\": 1}' --as response"
        )
        assert command.name == "request"
        assert command.method == "POST"
        assert command.url == "/items"
        assert command.headers == {"Content-Type": "application/json"}
        assert command.body == '{"a": 1}'
        assert command.selector is StructuredTag

    def test_default_selector_is_buffer(self):
        assert parse_command("GET http://h").selector is BufferTag

    def test_json_selector_is_projector(self):
        assert isinstance(parse_command("GET /x --as json").selector, Projector)

    def test_raw_selector_left_for_dispatch(self):
        assert parse_command("GET /x --as file").selector == "file"

    @pytest.mark.parametrize(
        "line",
        ["GET", "GET /x -H nocolon", "GET /x -d", "GET /x --bogus 1", "trim", "trim x", "frobnicate"],
    )
    def test_malformed(self, line):
        with pytest.raises(UsageError):
            parse_command(line)

    def test_simple_commands(self):
        assert parse_command("trim 3").args == ["3"]
        assert parse_command("headers").name == "headers"
        assert parse_command("Q").name == "q"


class TestRun:
    def test_quit(self, console):
        assert run_command(parse_command("quit"), Mock(), console) is False

    def test_request_dispatches(self, make_dispatcher, engine, console):
        dispatcher = make_dispatcher(base_url="http://h")
        assert run_command(parse_command("GET /x -H 'A: 1'"), dispatcher, console)
        request = engine.requests[0]
        assert request.url == "http://h/x"
        assert request.headers == {"A": "1"}

    def test_raw_request_raises_usage_error(self, make_dispatcher, engine, console):
        with pytest.raises(UsageError):
            run_command(parse_command("GET /x --as file"), make_dispatcher(), console)
        assert engine.requests == []

    def test_projector_result_printed(self, make_dispatcher, engine, console, make_response):
        dispatcher = make_dispatcher()
        run_command(parse_command("GET http://h/x --as json"), dispatcher, console)
        engine.complete(make_response(body='{"answer": 42}'))
        assert "'answer': 42" in console.export_text()

    def test_trim_and_buffers(self, make_dispatcher, engine, console, make_response):
        dispatcher = make_dispatcher()
        for _ in range(3):
            dispatcher.dispatch("GET", "http://h/x")
            engine.complete(make_response())
        run_command(parse_command("trim 1"), dispatcher, console)
        run_command(parse_command("buffers"), dispatcher, console)
        output = console.export_text()
        assert "2 buffer(s) evicted" in output
        assert "*httpsee-3*" in output

    def test_show_unknown_id(self, make_dispatcher, console):
        with pytest.raises(UsageError, match="No buffer"):
            run_command(parse_command("show 9"), make_dispatcher(), console)


def test_completion_errors_reported(host, console):
    engine = Mock()
    engine.pop_errors.return_value = [ValueError("not json")]

    _report_errors(engine, host)

    assert "Request handler failed: not json" in console.export_text()
    engine.pop_errors.assert_called_once_with()
