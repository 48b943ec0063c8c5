"""Shared fixtures: a trimmed-down freeones.com profile page."""

import pytest

from extraction.models import ScrapeArgs
from parsers.base import ProfileDocument
from parsers.freeones import ExtractionContext

_PROFILE_TEMPLATE = """
<html><body>
<div class="dashboard-header">
  <img class="img-fluid" src="https://img.freeones.com/avatar/jane.jpg">
</div>
<div data-test="section-personal-information">
  <a href="/babes?filter%5BdateOfBirth%5D=1990-05-14">May 14, 1990</a>
  <a href="/babes?filter%5Bsubject.countryCode%5D=US">United States</a>
  <a href="/babes?filter%5BplaceOfBirth%5D=Los Angeles">Los Angeles</a>
  {province}
</div>
<div data-test="section-alias">
  <p data-test="p_aliases">{aliases}</p>
</div>
<a data-test="link_height"><span class="text-underline-always">168cm / 5'6"</span></a>
<a data-test="link_weight"><span class="text-underline-always">55kg / 121lbs</span></a>
<a data-test="link_zodiac"><span class="text-underline-always">Taurus (Apr 20 - May 20)</span></a>
<a data-test="link_hair_color"><span class="text-underline-always">Brown</span></a>
<a data-test="link_eye_color"><span class="text-underline-always">Blue</span></a>
<a data-test="link_ethnicity"><span class="text-underline-always">Caucasian</span></a>
<p data-test="p-measurements">
  <span class="text-underline-always">34DD</span>-<span class="text-underline-always">{waist}</span>-<span class="text-underline-always">36</span>
</p>
<span data-test="p_has_tattoos">{tattoos}</span>
<span data-test="p_has_piercings">{piercings}</span>
</body></html>
"""

PROVINCE_LINK = '<a href="/babes?filter%5Bprovince%5D=California - US">California</a>'


def build_profile_html(
    aliases: str = "Jane Doe, J. Doe",
    tattoos: str = "Tribal; Sleeve",
    piercings: str = "Navel",
    province: str = PROVINCE_LINK,
    waist: str = "26",
) -> str:
    return _PROFILE_TEMPLATE.format(
        aliases=aliases, tattoos=tattoos, piercings=piercings, province=province, waist=waist,
    )


@pytest.fixture
def profile_doc():
    return ProfileDocument.from_html(build_profile_html())


@pytest.fixture
def make_ctx():
    """Build an ExtractionContext from page overrides and scrape options."""

    def _make(image_store=None, page: dict | None = None, **options):
        doc = ProfileDocument.from_html(build_profile_html(**(page or {})))
        return ExtractionContext.build(doc, "Jane Doe", ScrapeArgs(**options), image_store)

    return _make
