"""
Entry point for turning Vite entries into page tags.

A ``Vite`` instance owns its caches (dev server host, manifest, whether the
``@vite/client`` tag was emitted) and is meant to serve a single render
context, such as one HTTP request.

Example:
    >>> vite = Vite(ViteConfig(build_dir="build"))
    >>> vite.use("src/main.ts")
    '<script type="module" src="/build/assets/main.4f2c.js"></script>\\n'
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from vitetags.assets.manifest import ManifestStore
from vitetags.assets.mode import ModeDetector
from vitetags.assets.resolver import AssetResolver
from vitetags.assets.tags import TagRenderer
from vitetags.domain.models import (
    EntrySpec,
    Manifest,
    RenderedTag,
    ResolverState,
    Single,
    TagKind,
)
from vitetags.infrastructure.config import ViteConfig, get_settings

CLIENT_ENTRY = "@vite/client"


class Vite:
    def __init__(self, config: ViteConfig | None = None):
        self.config = config if config is not None else get_settings().vite
        self.state = ResolverState()
        self.mode = ModeDetector(self.config, self.state)
        self.manifest = ManifestStore(self.config, self.state, self.mode)
        self.resolver = AssetResolver()
        self.renderer = TagRenderer(self.config, self.mode)

    def work_path(self, path: str = "") -> Path:
        return self.mode.work_path(path)

    def hot_file(self) -> Path:
        return self.mode.hot_file()

    def is_dev(self) -> bool:
        return self.mode.is_dev()

    def get_host(self) -> str:
        return self.mode.get_host()

    def build_dir(self) -> str:
        return self.config.public_build_dir()

    def get_manifest(self) -> Manifest:
        return self.manifest.get_manifest()

    def get_url(self, path: str = "") -> str:
        """URL of ``path`` on the dev server or under the public build directory."""
        return self.renderer.url(path)

    def tags(
        self, entry: EntrySpec | str, attributes: Mapping[str, str] | None = None
    ) -> list[RenderedTag]:
        """
        Resolve ``entry`` into tags in page order.

        Stylesheets come first, in reverse resolution order, then the dev
        client tag on the first dev-mode call of this instance, then scripts.

        Args:
            entry: A tagged entry, or a bare name as shorthand for ``Single``
            attributes: Attributes applied to every name of a ``Single`` or
                ``Names`` entry; ``Mapped`` entries carry their own

        Returns:
            Tags to render, in output order
        """
        if isinstance(entry, str):
            entry = Single(entry)

        dev = self.is_dev()
        manifest = None if dev else self.get_manifest()
        resolution = self.resolver.resolve(entry.pairs(attributes), dev, manifest)

        tags = resolution.script_tags()
        if dev and not self.state.client_injected:
            tags.insert(0, RenderedTag(TagKind.SCRIPT, CLIENT_ENTRY))
            self.state.client_injected = True
        for stylesheet in resolution.stylesheet_tags():
            tags.insert(0, stylesheet)
        return tags

    def use(self, entry: EntrySpec | str, attributes: Mapping[str, str] | None = None) -> str:
        return "".join(self.renderer.render(tag) for tag in self.tags(entry, attributes))
