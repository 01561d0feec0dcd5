from __future__ import annotations

import asyncio
from typing import Optional

import typer
from rich import print as rprint
from rich.console import Console

from ghcard.cards import CardOptions, CardType, card_types, render_card, theme_names
from ghcard.cards.themes import THEMES
from ghcard.config import load_settings
from ghcard.core.services.analyze import ActivityData, fetch_activity_data
from ghcard.exporters import sibling_path, write_json, write_svg
from ghcard.providers import get_provider
from ghcard.providers.github import GitHubError
from ghcard.utils import get_logger, is_valid_login

app = typer.Typer(help="GitHub activity card CLI")
console = Console(stderr=True)
log = get_logger()


def _validate_login(login: str) -> str:
    if not is_valid_login(login):
        raise typer.BadParameter("Invalid GitHub login. Use profile name like 'octocat'.")
    return login


def _load(login: str) -> ActivityData:
    settings = load_settings()
    provider = get_provider("github", token=settings.github_token)
    try:
        with console.status(f"[bold green]Fetching activity data for {login}..."):
            data = asyncio.run(fetch_activity_data(login, provider))
    except GitHubError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)
    log.info(
        "cli.fetched",
        login=login,
        events=len(data.events),
        repos=data.contribution_stats.total_repos,
    )
    return data


@app.command()
def version() -> None:
    """Show version."""
    from ghcard import __version__

    rprint({"ghcard": __version__})


@app.command()
def themes() -> None:
    """List available card themes."""
    rprint({"themes": theme_names(), "types": card_types()})


@app.command()
def card(
    login: str = typer.Argument(..., help="GitHub login", callback=_validate_login),
    theme: str = typer.Option("default", help="Theme name"),
    card_type: str = typer.Option("activity", "--type", help="Card type: activity|compact|languages"),
    out: str = typer.Option("-", help="Output SVG path or - for stdout"),
    all_cards: bool = typer.Option(
        False, "--all", help="Also write <out>-compact.svg and <out>-languages.svg next to --out"
    ),
    border: bool = typer.Option(True, "--border/--no-border", help="Draw the card border"),
    border_radius: float = typer.Option(4.5, help="Border corner radius"),
    hide_stats: bool = typer.Option(False, help="Hide the stats section"),
    hide_projects: bool = typer.Option(False, help="Hide the recent projects section"),
    width: Optional[int] = typer.Option(None, help="Card width (defaults per card type)"),
) -> None:
    """Fetch a user's activity and render an SVG card."""
    if theme not in THEMES:
        raise typer.BadParameter(f"Unknown theme '{theme}'. Available: {', '.join(theme_names())}")
    if card_type not in card_types():
        raise typer.BadParameter(f"Unknown card type '{card_type}'. Available: {', '.join(card_types())}")
    if all_cards and out == "-":
        raise typer.BadParameter("--all needs a file path for --out")

    data = _load(login)
    summary = data.summarize()
    console.print(f"Found {len(data.events)} recent events")
    console.print(f"User has {data.contribution_stats.total_repos} repositories")
    console.print(f"\nSummary: {summary.summary}\n")

    options = CardOptions(
        type=CardType(card_type),
        theme=theme,
        width=width,
        show_border=border,
        border_radius=border_radius,
        hide_stats=hide_stats,
        hide_projects=hide_projects,
    )
    path = write_svg(render_card(summary, options), out)
    if path is not None:
        console.print(f"{card_type.capitalize()} card saved to: {path}")
    if all_cards:
        for extra in (CardType.compact, CardType.languages):
            if extra.value == card_type:
                continue
            extra_path = write_svg(
                render_card(summary, options.model_copy(update={"type": extra, "width": None})),
                sibling_path(out, extra.value),
            )
            console.print(f"{extra.value.capitalize()} card saved to: {extra_path}")


@app.command()
def summary(
    login: str = typer.Argument(..., help="GitHub login", callback=_validate_login),
    out: str = typer.Option("-", help="Output destination (path or - for stdout)"),
) -> None:
    """Print the activity summary as JSON."""
    data = _load(login)
    payload = data.summarize().model_dump(mode="json")
    payload["short_summary"] = data.short_summary()
    payload["fetched_at"] = data.fetched_at
    write_json(payload, out=out)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default: $HOST or 127.0.0.1)"),
    port: Optional[int] = typer.Option(None, help="Port (default: $PORT or 3000)"),
    variant: Optional[str] = typer.Option(None, help="dev|hosted (default: $GHCARD_VARIANT or dev)"),
) -> None:
    """Run the card HTTP service."""
    import uvicorn

    from ghcard.server import create_app

    settings = load_settings()
    if variant is not None:
        if variant not in ("dev", "hosted"):
            raise typer.BadParameter("variant must be 'dev' or 'hosted'")
        settings.variant = variant
    settings.host = host or settings.host
    settings.port = port or settings.port
    console.print(f"Server running at http://{settings.host}:{settings.port}")
    console.print(f"Usage: http://{settings.host}:{settings.port}/?username=YOUR_GITHUB_USERNAME")
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


def main() -> None:
    app()
