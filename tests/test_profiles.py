import json

import pytest

from escposkit.errors import UnknownProfileError
from escposkit.profiles import PROFILE_ENV_VAR, PrinterProfileRegistry


def test_bundled_profiles():
    registry = PrinterProfileRegistry.load()
    assert registry.require("58mm").max_width == 384
    assert registry.require("80MM").max_width == 576
    assert registry.get("nope") is None
    assert [p.name for p in registry.profiles] == ["58mm", "80mm", "80mm-512"]


def test_registry_is_cached_per_path():
    assert PrinterProfileRegistry.load() is PrinterProfileRegistry.load()


def test_unknown_profile():
    registry = PrinterProfileRegistry.load()
    with pytest.raises(UnknownProfileError):
        registry.require("110mm")
    with pytest.raises(KeyError):
        registry.require("110mm")


def test_default_follows_environment(monkeypatch):
    registry = PrinterProfileRegistry.load()
    monkeypatch.delenv(PROFILE_ENV_VAR, raising=False)
    assert registry.default().name == "58mm"
    monkeypatch.setenv(PROFILE_ENV_VAR, "80mm")
    assert registry.default().name == "80mm"


def test_load_custom_file(tmp_path):
    path = tmp_path / "profiles.json"
    path.write_text(
        json.dumps([{"name": "tiny", "paper_mm": 38, "max_width": 256, "columns": 21}]),
        encoding="utf-8",
    )
    profile = PrinterProfileRegistry.load(path).require("tiny")
    assert profile.feed_lines_before_cut == 5
    assert profile.columns == 21
