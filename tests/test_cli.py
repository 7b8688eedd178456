"""Tests for the Typer command line."""
import sys

import pytest
from rich.console import Console
from typer.testing import CliRunner

from musaed import __version__
from musaed.cli.app import app, build_serve_command
from musaed.cli.providers import get_llm, get_model_name
from musaed.llm import GeminiProvider

runner = CliRunner()


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("GEMINI_API_KEY", "GEMINI_MODEL", "LLM_PROVIDER"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestProviders:

    def test_default_model(self, clean_env):
        assert get_model_name() == "gemini-3-flash-preview"

    def test_default_model_is_the_gemini_default(self, clean_env):
        import musaed.chat
        from musaed.llm.providers.gemini import DEFAULT_MODEL

        assert get_model_name() == DEFAULT_MODEL
        assert not hasattr(musaed.chat, "DEFAULT_MODEL")

    def test_model_from_env(self, clean_env):
        clean_env.setenv("GEMINI_MODEL", "gemini-2.5-pro")
        assert get_model_name() == "gemini-2.5-pro"

    def test_missing_key_returns_none(self, clean_env):
        console = Console(record=True)

        assert get_llm(console) is None
        assert "GEMINI_API_KEY not set" in console.export_text()

    def test_unknown_provider_returns_none(self, clean_env):
        clean_env.setenv("LLM_PROVIDER", "openai")
        console = Console(record=True)

        assert get_llm(console) is None
        assert "Unknown LLM provider" in console.export_text()

    def test_gemini_from_env(self, clean_env):
        clean_env.setenv("GEMINI_API_KEY", "fake-key")
        clean_env.setenv("GEMINI_MODEL", "gemini-test")

        llm = get_llm(Console(record=True))

        assert isinstance(llm, GeminiProvider)
        assert llm.model == "gemini-test"


class TestCommands:

    def test_version(self, clean_env):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert __version__ in result.output
        assert "gemini-3-flash-preview" in result.output

    def test_run_without_key_exits(self, clean_env):
        result = runner.invoke(app, ["run"])
        assert result.exit_code == 1

    def test_serve_without_key_exits(self, clean_env):
        result = runner.invoke(app, ["serve", "--port", "8123"])
        assert result.exit_code == 1

    def test_serve_command(self):
        command = build_serve_command()

        assert sys.executable in command
        assert "musaed.cli.app run" in command
        assert "--log-level" not in command

    def test_serve_command_forwards_log_level(self):
        assert build_serve_command("debug").endswith("run --log-level debug")
