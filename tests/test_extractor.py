"""Tests for record assembly and label synthesis."""

from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from conftest import build_profile_html
from extraction.extractor import extract_actor, merge, synthesize_labels
from extraction.models import ScrapeArgs
from parsers.base import ProfileDocument

FULL_CUSTOM = {
    "hair color": "Brown",
    "eye color": "Blue",
    "ethnicity": "Caucasian",
    "height": 168,
    "weight": 55,
    "measurements": "34DD-26-36",
    "waist size": 26,
    "hip size": 36,
    "cup size": "DD",
    "bra size": "34DD",
    "bust size": 34,
    "birthplace": "Los Angeles, California",
    "zodiac": "Taurus",
    "sex": "Female",
    "gender": "Female",
    "tattoos": "Tribal; Sleeve",
    "piercings": "Navel",
}


def test_merge_later_wins():
    assert merge([{"a": 1, "b": 1}, {}, {"b": 2}]) == {"a": 1, "b": 2}
    assert merge([]) == {}


def test_synthesize_labels_order():
    assert synthesize_labels(FULL_CUSTOM) == [
        "Brown Hair", "Blue Eyes", "Caucasian", "Female", "Piercings", "Tattoos",
    ]
    assert synthesize_labels({"eye color": "Green", "tattoos": ["Star"]}) == ["Green Eyes", "Tattoos"]
    assert synthesize_labels({}) == []


@pytest.mark.asyncio
async def test_extract_actor_full_record(profile_doc):
    store = AsyncMock(return_value="img-1")
    record = await extract_actor(profile_doc, "Jane Doe", ScrapeArgs(), store)

    assert record == {
        "nationality": "US",
        "bornOn": int(datetime(1990, 5, 14).timestamp() * 1000),
        "aliases": ["Jane Doe", "J. Doe"],
        "avatar": "img-1",
        "custom": FULL_CUSTOM,
        "labels": ["Brown Hair", "Blue Eyes", "Caucasian", "Female", "Piercings", "Tattoos"],
    }


@pytest.mark.asyncio
async def test_dry_run_returns_empty_record(profile_doc):
    store = AsyncMock(return_value="img-1")
    args = ScrapeArgs(dry=True, useImperial=True, tattoosType="array")
    assert await extract_actor(profile_doc, "Jane Doe", args, store) == {}
    store.assert_not_awaited()


@pytest.mark.asyncio
async def test_whitelisted_measurements_only(profile_doc):
    record = await extract_actor(profile_doc, "Jane Doe", ScrapeArgs(whitelist=["measurements"]))
    assert record == {
        "custom": {
            "measurements": "34DD-26-36",
            "waist size": 26,
            "hip size": 36,
            "cup size": "DD",
            "bra size": "34DD",
            "bust size": 34,
        }
    }


@pytest.mark.asyncio
async def test_labels_blacklisted(profile_doc):
    record = await extract_actor(profile_doc, "Jane Doe", ScrapeArgs(blacklist=["labels", "avatar"]))
    assert "labels" not in record
    assert "avatar" not in record
    assert record["custom"]["hair color"] == "Brown"


@pytest.mark.asyncio
async def test_unknown_tattoos_dropped_after_assembly():
    doc = ProfileDocument.from_html(build_profile_html(tattoos="Unknown"))
    record = await extract_actor(doc, "Jane Doe", ScrapeArgs(blacklist=["avatar"]))
    assert "tattoos" not in record["custom"]
    assert "Tattoos" not in record["labels"]


@pytest.mark.asyncio
async def test_empty_page_gives_bare_record():
    doc = ProfileDocument.from_html("<html><body></body></html>")
    record = await extract_actor(doc, "Nobody", ScrapeArgs(blacklist=["avatar"]))
    assert record == {
        "custom": {"sex": "Female", "gender": "Female"},
        "labels": ["Female"],
    }
