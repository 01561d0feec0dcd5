from __future__ import annotations

import math
from typing import Any, Optional

from fastapi import FastAPI, Header, Query
from fastapi.responses import JSONResponse, Response

from ghcard.cards import CardOptions, CardType, card_types, render_card, render_error_card, theme_names
from ghcard.cards.themes import THEMES
from ghcard.config import Settings, load_settings
from ghcard.core.services.analyze import summarize_github_user
from ghcard.metrics import init_sentry_from_env
from ghcard.providers.github import GitHubError, GitHubProvider, RateLimitError, UserNotFoundError
from ghcard.storage import SummaryCache, open_cache
from ghcard.utils import get_logger, is_valid_login

DEFAULT_CACHE_SECONDS = 14400
MAX_CACHE_SECONDS = 86400
USAGE = "/?username=YOUR_GITHUB_USERNAME"

log = get_logger()


def _flag(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    return value != "false" if default else value == "true"


def _float(value: Optional[str], default: float) -> float:
    if not value:
        return default
    try:
        parsed = float(value)
    except ValueError:
        return default
    return parsed if math.isfinite(parsed) else default


def _cache_seconds(value: Optional[str]) -> int:
    try:
        seconds = int(value) if value else DEFAULT_CACHE_SECONDS
    except ValueError:
        seconds = DEFAULT_CACHE_SECONDS
    return max(0, min(seconds, MAX_CACHE_SECONDS))


def _status_for(error: GitHubError) -> int:
    if isinstance(error, UserNotFoundError):
        return 404
    if isinstance(error, RateLimitError):
        return 429
    return 500


def _bad_request(body: dict[str, Any]) -> JSONResponse:
    return JSONResponse(body, status_code=400)


def create_app(
    settings: Optional[Settings] = None,
    provider: Optional[GitHubProvider] = None,
    cache: Optional[SummaryCache] = None,
) -> FastAPI:
    """Build the card service.

    The ``dev`` variant answers failures with JSON bodies. The ``hosted``
    variant renders an SVG error card instead, accepts an ``X-GitHub-Token``
    header and bounds the cache size.
    """
    settings = settings or load_settings()
    hosted = settings.variant == "hosted"
    if cache is None:
        cache = open_cache(
            settings.cache_dsn,
            ttl_seconds=settings.cache_ttl_seconds,
            max_entries=settings.cache_max_entries if hosted else None,
        )
    if init_sentry_from_env():
        log.info("sentry.enabled")

    app = FastAPI(title="GitHub Activity Card", version="0.1.0")
    app.state.settings = settings
    app.state.cache = cache

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/")
    @app.get("/api")
    async def card(
        username: Optional[str] = Query(None),
        theme: str = Query("default"),
        card_type: str = Query("activity", alias="type"),
        border: Optional[str] = Query(None),
        border_radius: Optional[str] = Query(None),
        hide_stats: Optional[str] = Query(None),
        hide_projects: Optional[str] = Query(None),
        cache_seconds: Optional[str] = Query(None),
        x_github_token: Optional[str] = Header(None),
    ) -> Response:
        if not username:
            body: dict[str, Any] = {"error": "Missing required parameter: username", "usage": USAGE}
            if not hosted:
                body["available_themes"] = theme_names()
                body["available_types"] = card_types()
            return _bad_request(body)
        if not is_valid_login(username):
            return _bad_request({"error": "Invalid username format"})
        if theme not in THEMES:
            return _bad_request({"error": f"Invalid theme: {theme}", "available_themes": theme_names()})
        if card_type not in card_types():
            return _bad_request({"error": f"Invalid type: {card_type}", "available_types": card_types()})

        options = CardOptions(
            type=CardType(card_type),
            theme=theme,
            show_border=_flag(border, True),
            border_radius=_float(border_radius, 4.5),
            hide_stats=_flag(hide_stats, False),
            hide_projects=_flag(hide_projects, False),
        )

        token = settings.github_token or (x_github_token if hosted else None)
        upstream = provider or GitHubProvider(token=token)
        try:
            summary = await summarize_github_user(username, upstream, cache=cache)
        except GitHubError as e:
            status = _status_for(e)
            log.warning("card.failed", login=username, status=status, error=str(e))
            if hosted:
                return Response(
                    render_error_card(str(e)),
                    status_code=status,
                    media_type="image/svg+xml",
                    headers={"Cache-Control": "no-cache, no-store, must-revalidate"},
                )
            return JSONResponse({"error": str(e)}, status_code=status)

        return Response(
            render_card(summary, options),
            media_type="image/svg+xml",
            headers={"Cache-Control": f"public, max-age={_cache_seconds(cache_seconds)}"},
        )

    return app
