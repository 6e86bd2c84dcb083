"""HTML fetching and document parsing."""

import asyncio
import ipaddress
import logging
from urllib.parse import urlparse

import httpx
from bs4 import BeautifulSoup

from recipe_keeper.app.core.config import get_settings

logger = logging.getLogger(__name__)


def is_private_host(host: str) -> bool:
    """Check if a host is private/localhost."""
    hostname = host.split(":")[0]
    try:
        ip = ipaddress.ip_address(hostname)
        return ip.is_private or ip.is_loopback
    except ValueError:
        return hostname.lower() in {"localhost"}


def validate_url(url: str) -> None:
    parsed = urlparse(url)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValueError("Invalid URL")
    if is_private_host(parsed.hostname or ""):
        raise ValueError("URL points to a private or disallowed host")


async def _fetch_via_relay(client: httpx.AsyncClient, relay_url: str, url: str) -> str:
    """The relay answers with JSON whose ``contents`` field holds the page HTML."""
    response = await client.get(relay_url, params={"url": url})
    response.raise_for_status()
    payload = response.json()
    contents = payload.get("contents") if isinstance(payload, dict) else None
    if not isinstance(contents, str):
        raise ValueError("Relay response did not include page contents")
    return contents


async def _fetch_direct(client: httpx.AsyncClient, url: str) -> str:
    response = await client.get(url)
    response.raise_for_status()
    content_type = response.headers.get("content-type", "")
    if content_type and "text/html" not in content_type and "application/xhtml" not in content_type:
        raise ValueError(f"Unsupported content type: {content_type}")
    return response.text


async def fetch_html(url: str) -> str:
    """Fetch the HTML for ``url``, through the configured relay when there is one."""
    validate_url(url)
    settings = get_settings()
    headers = {
        "User-Agent": settings.scraper_user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
    }
    timeout = httpx.Timeout(settings.scraper_timeout_seconds, connect=5.0)

    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True, headers=headers) as client:
        if settings.scraper_relay_url:
            logger.debug("Fetching %s via relay %s", url, settings.scraper_relay_url)
            fetch = _fetch_via_relay(client, settings.scraper_relay_url, url)
        else:
            fetch = _fetch_direct(client, url)
        # httpx timeouts are per-phase; this bounds the whole fetch.
        return await asyncio.wait_for(fetch, timeout=settings.scraper_timeout_seconds)


def parse_document(html: str) -> BeautifulSoup:
    return BeautifulSoup(html or "", "lxml")


def document_title(soup: BeautifulSoup) -> str:
    """Text of the document's <title>, or an empty string."""
    if soup.title is None:
        return ""
    return soup.title.get_text(" ", strip=True)
