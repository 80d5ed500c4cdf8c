"""Tests for dare packs, custom dares and entitlements."""

import asyncio
import json

import pytest

from dareloop.content import (
    DARES,
    ContentProvider,
    Entitlements,
    PackLibrary,
    list_packs,
    sanitize_pack_name,
    shuffle_items,
)
from dareloop.core.errors import ContentUnavailableError


def test_shuffle_is_seedable():
    items = [f"d{i}" for i in range(20)]

    assert shuffle_items(items, seed=5) == shuffle_items(items, seed=5)
    assert sorted(shuffle_items(items, seed=5)) == sorted(items)
    assert items == [f"d{i}" for i in range(20)]  # input untouched


def test_sanitize_pack_name():
    assert sanitize_pack_name("Family Friendly") == "family_friendly"
    assert sanitize_pack_name("Out  In -- Public!") == "out_in_public_"


def test_builtin_packs():
    names = [p.name for p in list_packs()]
    assert "Family Friendly" in names
    assert "Spicy" in names

    safe = [p.name for p in list_packs(include_age_restricted=False)]
    assert "Bar" not in safe
    assert "Spicy" not in safe


def test_library_is_content_provider():
    assert isinstance(PackLibrary(), ContentProvider)


def test_draw_respects_count_and_pack():
    library = PackLibrary(seed=1)

    drawn = asyncio.run(library.draw("IceBreakers", 5))

    assert len(drawn) == 5
    assert len(set(drawn)) == 5
    assert set(drawn) <= set(DARES["IceBreakers"])


def test_draw_is_deterministic_with_seed():
    first = asyncio.run(PackLibrary(seed=42).draw("Couples", 6))
    second = asyncio.run(PackLibrary(seed=42).draw("Couples", 6))

    assert first == second


def test_short_pack_gives_short_draw():
    library = PackLibrary(seed=1)

    drawn = asyncio.run(library.draw("Bar", 50))

    assert len(drawn) == len(DARES["Bar"])


def test_draw_excludes_items():
    library = PackLibrary(seed=1)
    exclude = set(DARES["Office Fun"][:10])

    drawn = asyncio.run(library.draw("Office Fun", 5, exclude))

    assert set(drawn) == set(DARES["Office Fun"][10:])


def test_draw_reuses_when_everything_excluded():
    library = PackLibrary(seed=1)

    drawn = asyncio.run(library.draw("Office Fun", 3, set(DARES["Office Fun"])))

    assert len(drawn) == 3


def test_unknown_pack():
    with pytest.raises(ContentUnavailableError):
        asyncio.run(PackLibrary().draw("Nope", 3))


def test_zero_count_draw():
    assert asyncio.run(PackLibrary().draw("Couples", 0)) == []


def test_custom_dares_merged(tmp_path):
    custom = tmp_path / "custom_family_friendly.json"
    custom.write_text(json.dumps([
        {"text": "Do a cartwheel", "isCustom": True},
        "Sing a song",  # already in the standard pack
        "Howl at the moon",
    ]))
    library = PackLibrary(custom_dir=str(tmp_path), seed=3)

    merged = library.all_dares("Family Friendly", library.load_custom_dares("Family Friendly"))
    drawn = asyncio.run(library.draw("Family Friendly", 100))

    assert merged.count("Sing a song") == 1
    assert "Do a cartwheel" in drawn
    assert "Howl at the moon" in drawn
    assert len(drawn) == len(DARES["Family Friendly"]) + 2


def test_malformed_custom_file_ignored(tmp_path):
    (tmp_path / "custom_couples.json").write_text("{not json")
    library = PackLibrary(custom_dir=str(tmp_path))

    assert library.load_custom_dares("Couples") == []
    assert len(asyncio.run(library.draw("Couples", 100))) == len(DARES["Couples"])


def test_pack_files_loaded(tmp_path):
    (tmp_path / "road_trip.json").write_text(json.dumps({
        "name": "Road Trip",
        "description": "Dares for the car",
        "premium": True,
        "dares": ["Sing along to the radio", "Wave at a truck"],
    }))
    (tmp_path / "quickies.json").write_text(json.dumps(["Blink twice"]))
    (tmp_path / "broken.json").write_text("[")

    library = PackLibrary(content_dir=str(tmp_path), include_builtin=False)

    assert set(library.packs) == {"Road Trip", "quickies"}
    assert library.get_pack("Road Trip").premium is True
    assert asyncio.run(library.draw("quickies", 5)) == ["Blink twice"]


def test_missing_pack_dir():
    with pytest.raises(FileNotFoundError):
        PackLibrary(content_dir="/nonexistent/dareloop/packs")


def test_entitlements_defaults():
    entitlements = Entitlements()

    assert entitlements.is_unlocked("Family Friendly")
    assert not entitlements.is_unlocked("Spicy")

    entitlements.unlock("Spicy")
    assert entitlements.is_unlocked("Spicy")


def test_entitlements_from_library(tmp_path):
    (tmp_path / "vip.json").write_text(json.dumps({"name": "VIP", "premium": True, "dares": ["x"]}))
    library = PackLibrary(content_dir=str(tmp_path))

    entitlements = Entitlements.from_packs(library.packs)

    assert not entitlements.is_unlocked("VIP")
    assert not entitlements.is_unlocked("Bar")
    assert entitlements.is_unlocked("Couples")
