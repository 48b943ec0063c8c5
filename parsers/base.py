"""Selector-based access to a loaded profile page."""

from typing import Optional

from bs4 import BeautifulSoup, Tag


class ProfileDocument:
    """Read-only query wrapper around a parsed FreeOnes page.

    Mirrors the jQuery-style lookups the page layout was reverse engineered
    with: ``text()`` joins the text of every matched node, ``attr()`` reads
    the attribute of the first match.
    """

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup

    @classmethod
    def from_html(cls, html: str) -> "ProfileDocument":
        return cls(BeautifulSoup(html or "", "lxml"))

    def select(self, selector: str) -> list[Tag]:
        return self.soup.select(selector)

    def text(self, selector: str) -> Optional[str]:
        """Combined stripped text of all matches, or None if nothing matched."""
        nodes = self.select(selector)
        if not nodes:
            return None
        return "".join(node.get_text() for node in nodes).strip()

    def texts(self, selector: str) -> list[str]:
        """Stripped text of each match, in document order."""
        return [node.get_text(strip=True) for node in self.select(selector)]

    def attr(self, selector: str, name: str) -> Optional[str]:
        node = self.soup.select_one(selector)
        if node is None:
            return None
        value = node.get(name)
        # Multi-valued attributes (class, rel) come back as lists
        if isinstance(value, list):
            value = " ".join(value)
        return value
