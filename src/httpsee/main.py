"""
Main entry point for the interactive HTTP response viewer.
"""

import asyncio
from typing import Any, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.patch_stdout import patch_stdout
from pydantic import ValidationError
from rich.console import Console
from rich.pretty import Pretty
from rich.table import Table
from rich.text import Text

from .config import SeeConfig
from .schemas.errors import UsageError
from .schemas.response import Response
from .schemas.selectors import Projector
from .services import HttpxEngine, RequestDispatcher
from .utils.logging import setup_logging
from .utils.ui import Buffer, ConsoleBufferHost, ICONS, THEME
from .utils.ui.prompting import Command, parse_command

HELP_TEXT = """\
  GET|POST|PUT|PATCH|DELETE|HEAD|OPTIONS <url> [-H 'Name: value'] [-d BODY]
        [--as buffer|response|json|text]   send a request
  trim <n>      keep the n most recent response buffers
  headers       reveal all headers of the focused buffer
  buffers       list retained response buffers
  show <id>     redisplay a response buffer
  quit          leave"""


def _print_result(console: Console, value: Any) -> None:
    if isinstance(value, (Buffer, Response)):
        return
    console.print(Pretty(value))


def _report_errors(engine: HttpxEngine, host: ConsoleBufferHost) -> None:
    for error in engine.pop_errors():
        host.message(f"Request handler failed: {error}", level="error")


def _buffers_table(dispatcher: RequestDispatcher) -> Table:
    table = Table(show_header=True, header_style=THEME["field_key"], box=None)
    table.add_column("id", justify="right")
    table.add_column("buffer")
    table.add_column("status")
    table.add_column("content-type")
    for record in dispatcher.pool:
        response = record.response
        status_style = (
            THEME["status_success"] if response.is_success else THEME["status_error"]
        )
        table.add_row(
            str(record.id),
            record.buffer.name,
            Text(str(response.status_code), style=status_style),
            response.content_type or "",
        )
    return table


def run_command(
    command: Command, dispatcher: RequestDispatcher, console: Console
) -> bool:
    """
    Execute one parsed command.

    Returns:
        False when the session should end.
    """
    if command.name in ("quit", "exit", "q"):
        return False
    if command.name == "help":
        console.print(Text(HELP_TEXT, style=THEME["muted"]))
    elif command.name == "request":
        options = {}
        if command.body is not None:
            options["body"] = command.body
        then = None
        if isinstance(command.selector, Projector):
            then = lambda value: _print_result(console, value)  # noqa: E731
        dispatcher.dispatch(
            command.method,
            command.url,
            headers=command.headers,
            as_=command.selector,
            then=then,
            **options,
        )
    elif command.name == "trim":
        evicted = dispatcher.trim_buffers(int(command.args[0]))
        console.print(
            Text(f"{ICONS['success']} {len(evicted)} buffer(s) evicted", style=THEME["muted"])
        )
    elif command.name == "headers":
        dispatcher.reveal_headers()
    elif command.name == "buffers":
        console.print(_buffers_table(dispatcher))
    elif command.name == "show":
        record = dispatcher.pool.get(int(command.args[0]))
        if record is None:
            raise UsageError(f"No buffer with id {command.args[0]}")
        dispatcher.host.display(record.buffer, "print")
    return True


async def main(config: SeeConfig, console: Optional[Console] = None) -> None:
    """
    Interactive loop: read commands, dispatch requests, render responses.

    Args:
        config: Session configuration
        console: Rich console for output
    """
    console = console or Console()
    host = ConsoleBufferHost(console)
    engine = HttpxEngine()
    dispatcher = RequestDispatcher(config, engine, host)
    session: PromptSession = PromptSession(history=InMemoryHistory())

    console.print(Text("httpsee - type 'help' for commands", style=THEME["muted"]))

    try:
        with patch_stdout():
            while True:
                try:
                    line = await session.prompt_async(
                        FormattedText([(THEME["prompt"], f"{ICONS['arrow']} ")])
                    )
                except EOFError:
                    break
                try:
                    command = parse_command(line)
                    if command is not None and not run_command(
                        command, dispatcher, console
                    ):
                        break
                except UsageError as e:
                    host.message(str(e), level="warning")
                _report_errors(engine, host)
    finally:
        try:
            await engine.drain()
        finally:
            await engine.aclose()


def cli():
    """CLI entry point with argument parsing."""
    import argparse

    parser = argparse.ArgumentParser(
        description="httpsee - send HTTP requests and browse their responses",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output with detailed logs",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML configuration file",
    )
    parser.add_argument(
        "--base-url",
        type=str,
        default=None,
        help="Prefix for urls starting with '/'",
    )
    parser.add_argument(
        "--keep-buffers",
        type=str,
        default=None,
        help="Number of response buffers to keep ('none' for unbounded)",
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose)

    console = Console()
    try:
        config = SeeConfig.load(
            args.config, base_url=args.base_url, keep_buffers=args.keep_buffers
        )
    except (FileNotFoundError, ValueError, ValidationError) as e:
        parser.error(str(e))

    try:
        asyncio.run(main(config, console))
    except KeyboardInterrupt:
        console.print(f"\n  [{THEME['muted']}]Goodbye[/]")


if __name__ == "__main__":
    cli()
