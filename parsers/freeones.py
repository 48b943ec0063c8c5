"""Field extractors for the freeones.com actor profile page.

Each ``get_*`` function reads one attribute from the page and returns a
partial result: a dict holding the output key(s), or an empty dict when the
field is excluded by the inclusion policy or missing from the page. Missing
data is never an error.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Awaitable, Callable, Optional

from config import ALIAS_SELECTOR, AVATAR_SELECTOR, MEASUREMENTS_SELECTOR, PERSONAL_INFO_SELECTOR
from extraction.models import ScrapeArgs
from extraction.policy import InclusionPolicy
from extraction.rules import (
    cm_to_ft,
    extract_cm,
    extract_date,
    extract_kg,
    kg_to_lbs,
    last_query_value,
    parse_measurements,
    split_aliases,
    split_semicolon_list,
)
from models import Measurements, PartialResult
from parsers.base import ProfileDocument

logger = logging.getLogger(__name__)

# (url, name) -> image id
ImageStoreFn = Callable[[str, str], Awaitable[str]]

_UNDERLINED = ".text-underline-always"
_HEIGHT_SELECTOR = f'[data-test="link_height"] {_UNDERLINED}'
_WEIGHT_SELECTOR = f'[data-test="link_weight"] {_UNDERLINED}'
_ZODIAC_SELECTOR = f'[data-test="link_zodiac"] {_UNDERLINED}'
_NATIONALITY_SELECTOR = f'{PERSONAL_INFO_SELECTOR} a[href*="countryCode%5D"]'
_CITY_SELECTOR = f'{PERSONAL_INFO_SELECTOR} a[href*="placeOfBirth"]'
_STATE_SELECTOR = f'{PERSONAL_INFO_SELECTOR} a[href*="province"]'
_BIRTH_DATE_SELECTOR = f"{PERSONAL_INFO_SELECTOR} a"
# The first tattoo selector is a legacy typo of the second; both are probed
_TATTOO_SELECTORS = ('[cdata-test="p_has_tattoos"]', '[data-test="p_has_tattoos"]')
_PIERCINGS_SELECTOR = '[data-test="p_has_piercings"]'

# Generic text fields stored verbatim under custom
TEXT_FIELDS: list[tuple[str, str]] = [
    ("hair color", f'[data-test="link_hair_color"] {_UNDERLINED}'),
    ("eye color", f'[data-test="link_eye_color"] {_UNDERLINED}'),
    ("ethnicity", f'[data-test="link_ethnicity"] {_UNDERLINED}'),
]


def scrape_measurements(document: ProfileDocument) -> Optional[Measurements]:
    """Join the bra/waist/hip text nodes with '-' and parse them."""
    parts = document.texts(MEASUREMENTS_SELECTOR)
    return parse_measurements("-".join(parts))


@dataclass(frozen=True)
class ExtractionContext:
    """Everything an extractor needs for one actor, shared read-only."""

    document: ProfileDocument
    actor_name: str
    args: ScrapeArgs
    policy: InclusionPolicy
    measurements: Optional[Measurements] = None
    image_store: Optional[ImageStoreFn] = None
    logger: logging.Logger = field(default=logger)

    @classmethod
    def build(
        cls,
        document: ProfileDocument,
        actor_name: str,
        args: ScrapeArgs,
        image_store: Optional[ImageStoreFn] = None,
    ) -> "ExtractionContext":
        return cls(
            document=document,
            actor_name=actor_name,
            args=args,
            policy=InclusionPolicy.from_args(args),
            measurements=scrape_measurements(document),
            image_store=image_store,
        )

    def included(self, name: str) -> bool:
        return self.policy.included(name)


# --- Top-level fields ---


def get_nationality(ctx: ExtractionContext) -> PartialResult:
    if not ctx.included("nationality"):
        return {}
    ctx.logger.info("Getting nationality...")

    href = ctx.document.attr(_NATIONALITY_SELECTOR, "href")
    if href is None:
        ctx.logger.info("Nationality not found")
        return {}

    nationality = last_query_value(href)
    return {"nationality": nationality} if nationality else {}


def get_birth_date(ctx: ExtractionContext) -> PartialResult:
    if not ctx.included("bornOn"):
        return {}
    ctx.logger.info("Getting age...")

    href = ctx.document.attr(_BIRTH_DATE_SELECTOR, "href") or ""
    date = extract_date(href)
    if date:
        try:
            born = datetime.strptime(date, "%Y-%m-%d")
        except ValueError:
            born = None
        if born is not None:
            # Local midnight, in milliseconds
            return {"bornOn": int(born.timestamp() * 1000)}

    ctx.logger.info("Could not find actor birth date.")
    return {}


def get_aliases(ctx: ExtractionContext) -> PartialResult:
    if not ctx.included("aliases"):
        return {}
    ctx.logger.info("Getting aliases...")

    aliases = split_aliases(ctx.document.text(ALIAS_SELECTOR) or "")
    return {"aliases": aliases} if aliases else {}


async def get_avatar(ctx: ExtractionContext) -> PartialResult:
    """Download the header image; skipped entirely in dry mode."""
    if ctx.args.dry:
        return {}
    if not ctx.included("avatar"):
        return {}
    ctx.logger.info("Getting avatar...")

    url = ctx.document.attr(AVATAR_SELECTOR, "src")
    if not url or ctx.image_store is None:
        return {}

    image_id = await ctx.image_store(url, f"{ctx.actor_name} (avatar)")
    if ctx.args.use_avatar_as_thumbnail:
        return {"avatar": image_id, "thumbnail": image_id}
    return {"avatar": image_id}


# --- Custom fields ---


def scrape_text(ctx: ExtractionContext, prop: str, selector: str) -> PartialResult:
    if not ctx.included(prop):
        return {}
    ctx.logger.info(f"Getting {prop}...")

    text = ctx.document.text(selector)
    return {prop: text} if text else {}


def get_text_fields(ctx: ExtractionContext) -> list[PartialResult]:
    return [scrape_text(ctx, prop, selector) for prop, selector in TEXT_FIELDS]


def get_height(ctx: ExtractionContext) -> PartialResult:
    if not ctx.included("height"):
        return {}
    ctx.logger.info("Getting height...")

    height = extract_cm(ctx.document.text(_HEIGHT_SELECTOR) or "")
    if height is None:
        return {}
    if ctx.args.use_imperial:
        return {"height": cm_to_ft(height)}
    return {"height": height}


def get_weight(ctx: ExtractionContext) -> PartialResult:
    if not ctx.included("weight"):
        return {}
    ctx.logger.info("Getting weight...")

    weight = extract_kg(ctx.document.text(_WEIGHT_SELECTOR) or "")
    if weight is None:
        return {}
    if ctx.args.use_imperial:
        return {"weight": kg_to_lbs(weight)}
    return {"weight": weight}


def get_zodiac(ctx: ExtractionContext) -> PartialResult:
    if not ctx.included("zodiac"):
        return {}
    ctx.logger.info("Getting zodiac sign...")

    text = ctx.document.text(_ZODIAC_SELECTOR)
    if not text:
        return {}
    return {"zodiac": text.split(" (")[0]}


def get_birthplace(ctx: ExtractionContext) -> PartialResult:
    if not ctx.included("birthplace"):
        return {}
    ctx.logger.info("Getting birthplace...")

    city_href = ctx.document.attr(_CITY_SELECTOR, "href")
    city = last_query_value(city_href) if city_href is not None else ""
    if not city:
        ctx.logger.info("No birthplace found")
        return {}

    state_href = ctx.document.attr(_STATE_SELECTOR, "href")
    state = last_query_value(state_href) if state_href is not None else ""
    if not state:
        ctx.logger.info("No birth province found, just city!")
        return {"birthplace": city}

    # 'California - US' style values: keep the region name only
    return {"birthplace": f"{city}, {state.split('-')[0].strip()}"}


# The five measurement fields share the "measurements" policy key


def get_measurements(ctx: ExtractionContext) -> PartialResult:
    if not ctx.included("measurements"):
        return {}
    ctx.logger.info("Getting measurements...")
    return {"measurements": str(ctx.measurements)} if ctx.measurements else {}


def get_waist_size(ctx: ExtractionContext) -> PartialResult:
    if not ctx.included("measurements"):
        return {}
    ctx.logger.info("Getting waist size...")
    return {"waist size": ctx.measurements.waist} if ctx.measurements else {}


def get_hip_size(ctx: ExtractionContext) -> PartialResult:
    if not ctx.included("measurements"):
        return {}
    ctx.logger.info("Getting hip size...")
    return {"hip size": ctx.measurements.hip} if ctx.measurements else {}


def get_bra_size(ctx: ExtractionContext) -> PartialResult:
    if not ctx.included("measurements"):
        return {}
    ctx.logger.info("Getting bra/cup/bust size...")
    m = ctx.measurements
    if not m:
        return {}
    return {"cup size": m.cup, "bra size": m.bra_size(), "bust size": m.bust}


def get_gender(ctx: ExtractionContext) -> PartialResult:
    if not ctx.included("gender"):
        return {}
    # FreeOnes only lists female performers
    return {"sex": "Female", "gender": "Female"}


def _shape_list_field(text: str, mode: str) -> str | list[str]:
    if mode == "array":
        return split_semicolon_list(text)
    return text


def get_tattoos(ctx: ExtractionContext) -> PartialResult:
    if not ctx.included("tattoos"):
        return {}

    text = ""
    for selector in _TATTOO_SELECTORS:
        text = scrape_text(ctx, "tattoos", selector).get("tattoos", "")
        if text:
            break

    if not text or "no tattoos" in text.lower():
        return {}
    return {"tattoos": _shape_list_field(text, ctx.args.tattoos_type)}


def get_piercings(ctx: ExtractionContext) -> PartialResult:
    if not ctx.included("piercings"):
        return {}

    text = scrape_text(ctx, "piercings", _PIERCINGS_SELECTOR).get("piercings", "")
    if not text or "no piercings" in text.lower():
        return {}
    return {"piercings": _shape_list_field(text, ctx.args.piercings_type)}
