"""Pydantic models for per-run scrape options."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ScrapeArgs(BaseModel):
    """Options controlling which fields are scraped and how they are shaped.

    Accepts the camelCase option names used in plugin args files
    (``useImperial``, ``tattoosType``...) as well as snake_case.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    whitelist: list[str] | None = None  # None or empty = no whitelist
    blacklist: list[str] | None = None  # None = nothing excluded
    dry: bool = False
    use_imperial: bool = Field(default=False, alias="useImperial")
    use_avatar_as_thumbnail: bool = Field(default=False, alias="useAvatarAsThumbnail")
    piercings_type: Literal["string", "array"] = Field(default="string", alias="piercingsType")
    tattoos_type: Literal["string", "array"] = Field(default="string", alias="tattoosType")
