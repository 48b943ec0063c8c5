"""Search freeones.com for an actor and load their profile page."""

import logging
from typing import Optional

import requests
from bs4 import BeautifulSoup

from config import PROFILE_URL_PATTERN, REQUEST_TIMEOUT, SEARCH_RESULT_SELECTOR, SEARCH_URL, USER_AGENT
from parsers.base import ProfileDocument

logger = logging.getLogger(__name__)

_session: Optional[requests.Session] = None


class ScrapeError(Exception):
    """A fatal scrape failure; the run cannot continue."""


class ActorNotFoundError(ScrapeError):
    """The site search returned no actor."""


def _get_session() -> requests.Session:
    global _session
    if _session is None:
        _session = requests.Session()
        _session.headers.update({
            "User-Agent": USER_AGENT,
            "Accept-Language": "en-US,en;q=0.9",
        })
    return _session


def _get(url: str, **params) -> str:
    try:
        resp = _get_session().get(url, params=params or None, timeout=REQUEST_TIMEOUT)
        resp.raise_for_status()
    except requests.RequestException as e:
        logger.error(f"Failed to fetch {url}: {e}")
        raise ScrapeError(str(e)) from e
    return resp.text


def search(query: str) -> str:
    """Raw HTML of the site's subject search for ``query``."""
    return _get(SEARCH_URL, q=query)


def get_first_search_result(html: str) -> Optional[str]:
    """Profile path (href) of the first search hit, or None."""
    soup = BeautifulSoup(html or "", "lxml")
    anchor = soup.select_one(SEARCH_RESULT_SELECTOR)
    if anchor is None:
        return None
    return anchor.get("href") or None


def fetch_profile_page(actor_name: str) -> ProfileDocument:
    """Find ``actor_name`` via search and return their parsed profile page.

    Raises ActorNotFoundError when the search has no hit, ScrapeError when
    either request fails.
    """
    href = get_first_search_result(search(actor_name))
    if not href:
        raise ActorNotFoundError(f"{actor_name} not found!")

    html = _get(PROFILE_URL_PATTERN.format(href=href))
    return ProfileDocument.from_html(html)
