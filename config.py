"""Site configuration for the FreeOnes actor scraper."""

import os

BASE_URL = "https://freeones.com"
SEARCH_URL = "https://www.freeones.com/partial/subject"
PROFILE_URL_PATTERN = BASE_URL + "{href}/profile"

REQUEST_TIMEOUT = 15  # seconds
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/131.0.0.0 Safari/537.36"
)

# Downloaded avatars land here
IMAGE_DIR = os.environ.get("FREEONES_IMAGE_DIR", "images")

# Page layout
SEARCH_RESULT_SELECTOR = ".grid-item.teaser-subject>a"
PERSONAL_INFO_SELECTOR = '[data-test="section-personal-information"]'
AVATAR_SELECTOR = ".dashboard-header img.img-fluid"
ALIAS_SELECTOR = '[data-test="section-alias"] p[data-test*="p_aliases"]'
MEASUREMENTS_SELECTOR = '[data-test="p-measurements"] .text-underline-always'
