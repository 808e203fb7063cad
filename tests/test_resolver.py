from __future__ import annotations

import pytest

from vitetags.assets.resolver import AssetResolver, is_stylesheet
from vitetags.domain.models import ManifestEntry


@pytest.mark.parametrize(
    "path",
    ["a.css", "a.less", "a.sass", "a.scss", "a.styl", "a.stylus", "a.pcss", "a.postcss"],
)
def test_stylesheet_extensions(path: str) -> None:
    assert is_stylesheet(path)


@pytest.mark.parametrize("path", ["a.js", "a.ts", "a.css.js", "a.cssx", "css", "a.vue"])
def test_non_stylesheets(path: str) -> None:
    assert not is_stylesheet(path)


def test_dev_mode_drops_stylesheets() -> None:
    resolution = AssetResolver().resolve(
        [("src/main.ts", {}), ("src/app.scss", {}), ("src/admin.ts", {"defer": "defer"})],
        dev=True,
    )
    assert resolution.scripts == {"src/main.ts": {}, "src/admin.ts": {"defer": "defer"}}
    assert resolution.stylesheets == {}


def test_production_extracts_css_and_classifies_file() -> None:
    manifest = {
        "main.ts": ManifestEntry(file="main.11.js", css=["main.11.css", "vendor.22.css"]),
        "theme.scss": ManifestEntry(file="theme.33.css"),
    }
    resolution = AssetResolver().resolve(
        [("main.ts", {"nonce": "n"}), ("theme.scss", {})], dev=False, manifest=manifest
    )

    assert resolution.scripts == {"main.11.js": {"nonce": "n"}}
    assert list(resolution.stylesheets) == ["main.11.css", "vendor.22.css", "theme.33.css"]
    assert resolution.stylesheets["main.11.css"] == {"nonce": "n"}


def test_production_skips_unknown_entries() -> None:
    resolution = AssetResolver().resolve([("missing.ts", {})], dev=False, manifest={})
    assert resolution.scripts == {}
    assert resolution.stylesheets == {}


def test_entry_without_file_only_contributes_css() -> None:
    manifest = {"styles.ts": ManifestEntry(css=["styles.44.css"])}
    resolution = AssetResolver().resolve([("styles.ts", {})], dev=False, manifest=manifest)
    assert resolution.scripts == {}
    assert list(resolution.stylesheets) == ["styles.44.css"]


def test_duplicate_urls_keep_position_and_take_later_attributes() -> None:
    manifest = {
        "a.ts": ManifestEntry(file="a.js", css=["shared.css"]),
        "b.ts": ManifestEntry(file="b.js", css=["shared.css"]),
    }
    resolution = AssetResolver().resolve(
        [("a.ts", {"id": "first"}), ("b.ts", {}), ("a.ts", {"id": "second"})],
        dev=False,
        manifest=manifest,
    )
    assert list(resolution.scripts.items()) == [("a.js", {"id": "second"}), ("b.js", {})]
    assert resolution.stylesheets == {"shared.css": {"id": "second"}}
