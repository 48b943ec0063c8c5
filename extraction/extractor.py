"""Assemble the actor record from the individual field extractors."""

import logging
from typing import Any, Iterable, Optional

from extraction.models import ScrapeArgs
from models import PartialResult
from parsers import freeones
from parsers.base import ProfileDocument
from parsers.freeones import ExtractionContext, ImageStoreFn

logger = logging.getLogger(__name__)


def merge(partials: Iterable[PartialResult]) -> dict[str, Any]:
    """Fold partial results left to right; later keys overwrite earlier ones."""
    merged: dict[str, Any] = {}
    for partial in partials:
        merged.update(partial)
    return merged


def synthesize_labels(custom: dict[str, Any]) -> list[str]:
    """Summary tags derived from already-scraped custom fields."""
    labels = []
    if custom.get("hair color"):
        labels.append(f"{custom['hair color']} Hair")
    if custom.get("eye color"):
        labels.append(f"{custom['eye color']} Eyes")
    if custom.get("ethnicity"):
        labels.append(custom["ethnicity"])
    if custom.get("gender"):
        labels.append("Female")
    if custom.get("piercings"):
        labels.append("Piercings")
    if custom.get("tattoos"):
        labels.append("Tattoos")
    return labels


def build_custom(ctx: ExtractionContext) -> dict[str, Any]:
    custom = merge([
        *freeones.get_text_fields(ctx),
        freeones.get_height(ctx),
        freeones.get_weight(ctx),
        freeones.get_measurements(ctx),
        freeones.get_waist_size(ctx),
        freeones.get_hip_size(ctx),
        freeones.get_bra_size(ctx),
        freeones.get_birthplace(ctx),
        freeones.get_zodiac(ctx),
        freeones.get_gender(ctx),
        freeones.get_tattoos(ctx),
        freeones.get_piercings(ctx),
    ])

    # Placeholder text the site shows for unlisted tattoos
    if custom.get("tattoos") == "Unknown":
        del custom["tattoos"]
    return custom


def _log_preferences(args: ScrapeArgs):
    if args.use_imperial:
        logger.info("Imperial preference indicated. Using imperial values...")
    else:
        logger.info("Imperial preference not set. Using metric values...")

    if args.use_avatar_as_thumbnail:
        logger.info("Will use the Avatar as the Actor Thumbnail...")
    else:
        logger.info("Will not use the Avatar as the Actor Thumbnail...")


async def extract_actor(
    document: ProfileDocument,
    actor_name: str,
    args: Optional[ScrapeArgs] = None,
    image_store: Optional[ImageStoreFn] = None,
) -> dict[str, Any]:
    """Scrape every field of ``actor_name``'s profile into one record.

    Returns ``{}`` in dry mode, after logging what would have been returned.
    """
    args = args or ScrapeArgs()
    logger.info(f"Scraping freeones data for {actor_name}, dry mode: {args.dry}...")
    _log_preferences(args)

    ctx = ExtractionContext.build(document, actor_name, args, image_store)

    custom = build_custom(ctx)
    record = merge([
        freeones.get_nationality(ctx),
        freeones.get_birth_date(ctx),
        freeones.get_aliases(ctx),
        await freeones.get_avatar(ctx),
        {"custom": custom},
    ])

    if ctx.included("labels"):
        record["labels"] = synthesize_labels(custom)

    if args.dry:
        logger.info(f"Would have returned: {record}")
        return {}
    return record
