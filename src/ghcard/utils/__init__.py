from __future__ import annotations

import re
import sys
from datetime import datetime, timezone
from typing import Optional

import httpx
import structlog

from ghcard import __version__

USER_AGENT = f"github-activity-card/{__version__}"
GITHUB_ACCEPT = "application/vnd.github.v3+json"
REQUEST_TIMEOUT_SECONDS = 30.0

# alphanumerics and single inner hyphens, at most 39 characters
LOGIN_RE = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9]|-(?=[A-Za-z0-9])){0,38}")


def get_logger() -> structlog.stdlib.BoundLogger:
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        # stdout carries SVG and JSON output
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )
    return structlog.get_logger()


def utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def is_valid_login(login: Optional[str]) -> bool:
    return bool(login) and LOGIN_RE.fullmatch(login or "") is not None


def github_auth_headers(token: Optional[str] = None) -> dict[str, str]:
    headers = {"Accept": GITHUB_ACCEPT, "User-Agent": USER_AGENT}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


def http_async_client(
    base_url: str,
    token: Optional[str] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=REQUEST_TIMEOUT_SECONDS,
        headers=github_auth_headers(token),
        transport=transport,
    )
