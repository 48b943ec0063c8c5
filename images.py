"""Local image store for downloaded actor avatars."""

import asyncio
import json
import logging
import mimetypes
import uuid
from pathlib import Path
from typing import Optional

import requests

from config import IMAGE_DIR, REQUEST_TIMEOUT, USER_AGENT
from extraction.page_fetcher import ScrapeError

logger = logging.getLogger(__name__)


class ImageStore:
    """Downloads images into a directory and hands back an opaque id.

    Each image is written as ``<id><ext>`` next to a ``<id>.json`` sidecar
    recording its name and source URL.
    """

    def __init__(self, directory: str | Path = IMAGE_DIR, session: Optional[requests.Session] = None):
        self.directory = Path(directory)
        if session is None:
            session = requests.Session()
            session.headers.update({"User-Agent": USER_AGENT})
        self.session = session

    async def __call__(self, url: str, name: str) -> str:
        return await self.create_image(url, name)

    async def create_image(self, url: str, name: str) -> str:
        return await asyncio.to_thread(self._download, url, name)

    def _download(self, url: str, name: str) -> str:
        try:
            resp = self.session.get(url, timeout=REQUEST_TIMEOUT)
            resp.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Failed to download image {url}: {e}")
            raise ScrapeError(str(e)) from e

        image_id = uuid.uuid4().hex
        content_type = resp.headers.get("Content-Type", "").split(";")[0].strip()
        ext = mimetypes.guess_extension(content_type) or Path(url.split("?")[0]).suffix or ".jpg"

        self.directory.mkdir(parents=True, exist_ok=True)
        (self.directory / f"{image_id}{ext}").write_bytes(resp.content)
        (self.directory / f"{image_id}.json").write_text(
            json.dumps({"id": image_id, "name": name, "url": url}, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
        logger.info(f"Saved image '{name}' as {image_id}{ext}")
        return image_id
