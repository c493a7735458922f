"""
Tests for the rich console host.
"""

from httpsee.utils.ui import HeaderOverlay


def _response_buffer(host, make_response, name="*httpsee-1*"):
    buffer = host.create_buffer(name)
    buffer.response = make_response(status_code=201, body="created")
    buffer.insert("created")
    buffer.overlay = HeaderOverlay.from_fields(["status"], host)
    return buffer


def test_print_action_draws_line_and_body(host, console, make_response):
    buffer = _response_buffer(host, make_response)
    host.display(buffer, "print")
    output = console.export_text()
    assert "*httpsee-1* HTTP/1.1 201" in output
    assert "created" in output
    assert host.focused is buffer


def test_summary_action_draws_only_line(host, console, make_response):
    buffer = _response_buffer(host, make_response)
    host.display(buffer, "summary")
    output = console.export_text()
    assert "HTTP/1.1 201" in output
    assert "created" not in output


def test_none_action_only_focuses(host, console, make_response):
    buffer = _response_buffer(host, make_response)
    host.display(buffer, "none")
    assert console.export_text() == ""
    assert host.focused is buffer


def test_unknown_action_falls_back_to_print(host, console, make_response, caplog):
    buffer = _response_buffer(host, make_response)
    host.display(buffer, "popup")
    assert "created" in console.export_text()
    assert "Unknown display action" in caplog.text


def test_killed_buffer_loses_focus(host, make_response):
    buffer = _response_buffer(host, make_response)
    host.display(buffer, "none")
    host.kill_buffer(buffer)
    assert host.focused is None
    assert host.buffers() == []
    host.kill_buffer(buffer)


def test_get_or_create_reuses_live_buffer(host):
    first = host.get_or_create("*shared*")
    assert host.get_or_create("*shared*") is first
    host.kill_buffer(first)
    assert host.get_or_create("*shared*") is not first


def test_message_levels(host, console):
    host.message("plain")
    host.message("careful", level="warning")
    host.message("broken", level="error")
    output = console.export_text()
    assert "plain" in output
    assert "⚠ careful" in output
    assert "✗ broken" in output
