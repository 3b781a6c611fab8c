"""adlist-search CLI (Typer).

Query the adlists of a local Pi-hole for a domain:

    adlist-search --partial domain.com

Rendered results go to stdout; logs and errors go to stderr.
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adapters.ftl_api import FTLApiClient
from cli.ui_components import render_search_results
from core.config import AppSettings
from core.domain.errors import AdlistSearchError, ConfigurationError, NoDomainError
from core.services.search_pipeline import run_search

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Query the adlists for a specified domain.",
)

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)

# Per-request chatter from the HTTP stack, kept out of --verbose.
NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: str | int, console: Console | None = None) -> None:
    """Route log records through Rich on stderr, keeping stdout for results."""

    root = logging.getLogger()
    for handler in [h for h in root.handlers if isinstance(h, RichHandler)]:
        root.removeHandler(handler)

    handler = RichHandler(console=console or _err_console, show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root.addHandler(handler)
    root.setLevel(level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _load_settings(api_url: str | None) -> AppSettings:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        fields = ", ".join(str(err["loc"][0]) for err in exc.errors() if err["loc"])
        raise ConfigurationError(f"Invalid configuration: {fields or exc}") from exc
    if api_url:
        settings = settings.model_copy(update={"api_url": api_url})
    return settings


def _prompt_secret(label: str) -> str:
    return typer.prompt(label, hide_input=True, err=True)


@app.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog="Example: 'adlist-search --partial domain.com'",
)
def search(
    domain: Optional[str] = typer.Argument(None, help="Domain to look up.", show_default=False),
    partial: bool = typer.Option(False, "--partial", help="Search the adlists for partially matching domains."),
    all_results: bool = typer.Option(False, "--all", help="Return all query matches within the adlists."),
    api_url: Optional[str] = typer.Option(None, "--api-url", help="FTL API base URL (skips discovery)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log API traffic to stderr."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output."),
) -> None:
    """Query the adlists for a specified domain."""

    console = Console(no_color=True, highlight=False) if no_color else _console

    try:
        settings = _load_settings(api_url)
        configure_logging(logging.DEBUG if verbose else settings.log_level)
        max_results = settings.max_results_ceiling if all_results else settings.default_max_results

        if domain is None:
            raise NoDomainError()
        with FTLApiClient(settings, prompt=_prompt_secret) as client:
            output = run_search(
                domain,
                partial=partial,
                max_results=max_results,
                client=client,
                render=render_search_results,
            )
    except AdlistSearchError as exc:
        logger.debug("Search failed", exc_info=exc)
        _err_console.print(f"[red]{escape(exc.message)}[/red]", highlight=False, soft_wrap=True)
        raise typer.Exit(code=exc.exit_code) from exc

    console.print(output, end="", soft_wrap=True)


def run() -> None:
    """Console-script entry point."""

    app()


if __name__ == "__main__":
    run()
