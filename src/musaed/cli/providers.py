"""Provider factory functions for CLI.

Centralizes creation of the LLM provider from environment variables.
Hides configuration details from command implementations.
"""

import os

import typer
from rich.console import Console

from ..llm import LLMProvider, create_llm_provider
from ..llm.providers.gemini import DEFAULT_MODEL

_console = Console()


def get_model_name() -> str:
    """Model identifier from GEMINI_MODEL, or the default."""
    return os.getenv("GEMINI_MODEL") or DEFAULT_MODEL


def get_llm(console: Console | None = None) -> LLMProvider | None:
    """Create LLM provider from environment variables.

    Args:
        console: Optional Rich console for output

    Returns:
        LLM provider instance, or None if not configured

    Environment variables:
        LLM_PROVIDER: Provider type (default: gemini)
        GEMINI_API_KEY: Gemini API key (required)
        GEMINI_MODEL: Gemini model (default: gemini-3-flash-preview)
    """
    con = console or _console
    llm_provider = os.getenv("LLM_PROVIDER", "gemini").lower()

    if llm_provider in ("gemini", "google"):
        api_key = os.getenv("GEMINI_API_KEY")
        if not api_key:
            con.print("[yellow]Warning: GEMINI_API_KEY not set[/yellow]")
            return None
        return create_llm_provider("gemini", api_key=api_key, model=get_model_name())

    con.print(f"[red]Error: Unknown LLM provider: {llm_provider}[/red]")
    return None


def require_llm(console: Console | None = None) -> LLMProvider:
    """Get LLM provider, raising error if not configured.

    Raises:
        typer.Exit: If LLM provider is not configured
    """
    con = console or _console
    llm = get_llm(con)
    if not llm:
        con.print("[red]Error: LLM provider not configured[/red]")
        raise typer.Exit(code=1)
    return llm
