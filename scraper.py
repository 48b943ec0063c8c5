#!/usr/bin/env python3
"""Main entry point for the FreeOnes actor scraper."""

import argparse
import asyncio
import json
import logging
import math
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
load_dotenv()

from pydantic import ValidationError

from config import IMAGE_DIR
from extraction.extractor import extract_actor
from extraction.models import ScrapeArgs
from extraction.page_fetcher import ScrapeError, fetch_profile_page
from images import ImageStore

logger = logging.getLogger(__name__)


def build_args(cli: argparse.Namespace) -> ScrapeArgs:
    """Merge an optional JSON args file with command-line overrides."""
    options: dict = {}
    if cli.args_file:
        options.update(json.loads(Path(cli.args_file).read_text(encoding="utf-8")))

    if cli.whitelist:
        options["whitelist"] = cli.whitelist
    if cli.blacklist:
        options["blacklist"] = cli.blacklist
    if cli.dry:
        options["dry"] = True
    if cli.imperial:
        options["useImperial"] = True
    if cli.avatar_as_thumbnail:
        options["useAvatarAsThumbnail"] = True
    if cli.piercings_type:
        options["piercingsType"] = cli.piercings_type
    if cli.tattoos_type:
        options["tattoosType"] = cli.tattoos_type
    return ScrapeArgs.model_validate(options)


def to_json_safe(value):
    """Copy of a record with NaN/infinite numbers replaced by None, for strict JSON."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: to_json_safe(item) for key, item in value.items()}
    if isinstance(value, list):
        return [to_json_safe(item) for item in value]
    return value


async def scrape_actor(actor_name: str, args: ScrapeArgs, image_dir: str = IMAGE_DIR) -> dict:
    """Fetch the actor's profile page and extract their record."""
    if not actor_name or not actor_name.strip():
        raise ScrapeError("No actor name given")

    document = await asyncio.to_thread(fetch_profile_page, actor_name)
    return await extract_actor(document, actor_name, args, ImageStore(image_dir))


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Scrape an actor profile from freeones.com")
    parser.add_argument("actor_name", nargs="?", default="", help="Actor to look up")
    parser.add_argument("--whitelist", nargs="+", metavar="FIELD", help="Only return these fields")
    parser.add_argument("--blacklist", nargs="+", metavar="FIELD", help="Never return these fields")
    parser.add_argument("--dry", action="store_true", help="Scrape and log, but return nothing")
    parser.add_argument("--imperial", action="store_true", help="Height in ft, weight in lbs")
    parser.add_argument("--avatar-as-thumbnail", action="store_true", help="Reuse the avatar as thumbnail")
    parser.add_argument("--piercings-type", choices=["string", "array"])
    parser.add_argument("--tattoos-type", choices=["string", "array"])
    parser.add_argument("--args-file", type=str, help="JSON file with scrape options")
    parser.add_argument("--image-dir", type=str, default=IMAGE_DIR, help="Where avatars are saved")
    cli = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    try:
        args = build_args(cli)
    except (OSError, ValueError, ValidationError) as e:
        logger.error(f"Invalid scrape options: {e}")
        return 1

    try:
        record = asyncio.run(scrape_actor(cli.actor_name, args, cli.image_dir))
    except ScrapeError as e:
        logger.error(str(e))
        return 1

    print(json.dumps(to_json_safe(record), ensure_ascii=False, indent=2, allow_nan=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
