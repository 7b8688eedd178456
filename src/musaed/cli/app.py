"""Main CLI application using Typer."""
import asyncio
import shlex
import sys

import typer
from dotenv import load_dotenv
from rich.console import Console

from .. import __version__
from .providers import get_model_name, require_llm

load_dotenv()

app = typer.Typer(
    name="musaed",
    help="Arabic chat assistant for the Gemini API",
    no_args_is_help=True,
    add_completion=True,
)

console = Console()

LOG_LEVEL_HELP = "Show log panel with level: debug (all), info, warning, or error"


@app.command()
def run(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help=LOG_LEVEL_HELP
    ),
):
    """Launch the chat interface in this terminal."""
    async def _run():
        from ..ui import run_textual_tui

        llm = require_llm(console)
        await run_textual_tui(llm=llm, model=get_model_name(), log_level=log_level)

    try:
        asyncio.run(_run())
    except KeyboardInterrupt:
        pass


def build_serve_command(log_level: str | None = None) -> str:
    """Shell command each browser session runs to start its own app instance."""
    parts = [sys.executable, "-m", "musaed.cli.app", "run"]
    if log_level:
        parts += ["--log-level", log_level]
    return shlex.join(parts)


@app.command()
def serve(
    host: str = typer.Option(
        "localhost",
        "--host",
        "-h",
        help="Interface to bind"
    ),
    port: int = typer.Option(
        8000,
        "--port",
        "-p",
        help="Port to listen on"
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help=LOG_LEVEL_HELP
    ),
):
    """Serve the chat interface to web browsers."""
    from textual_serve.server import Server

    # Fail here rather than in every browser session
    require_llm(console)

    console.print(f"[bold green]Serving on http://{host}:{port}[/bold green]")
    server = Server(build_serve_command(log_level), host=host, port=port, title="Musaed")
    server.serve()


@app.command()
def version():
    """Show version information."""
    console.print(f"musaed [cyan]{__version__}[/cyan] (model: {get_model_name()})")


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
