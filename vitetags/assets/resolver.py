from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from vitetags.domain.models import AttributeMap, Manifest, RenderedTag, TagKind
from vitetags.infrastructure.logging import get_logger

STYLESHEET_PATTERN = re.compile(r"\.(css|less|sass|scss|styl|stylus|pcss|postcss)$")

logger = get_logger(__name__)


def is_stylesheet(path: str) -> bool:
    return STYLESHEET_PATTERN.search(path) is not None


@dataclass
class Resolution:
    """Scripts and stylesheets keyed by URL, in first-encounter order."""

    scripts: dict[str, AttributeMap] = field(default_factory=dict)
    stylesheets: dict[str, AttributeMap] = field(default_factory=dict)

    def add(self, path: str, attributes: AttributeMap) -> None:
        if is_stylesheet(path):
            self.stylesheets[path] = attributes
        else:
            self.scripts[path] = attributes

    def script_tags(self) -> list[RenderedTag]:
        return [RenderedTag(TagKind.SCRIPT, url, attrs) for url, attrs in self.scripts.items()]

    def stylesheet_tags(self) -> list[RenderedTag]:
        return [
            RenderedTag(TagKind.STYLESHEET, url, attrs) for url, attrs in self.stylesheets.items()
        ]


class AssetResolver:
    """
    Classifies requested entries into script and stylesheet outputs.

    In dev mode the dev server serves sources directly and injects styles
    through its module graph, so stylesheet entries produce nothing and every
    other entry is loaded as a module by name. In production mode entries are
    looked up in the manifest: each ``css`` dependency becomes a stylesheet
    and the compiled ``file`` is classified by its extension. Names missing
    from the manifest are skipped.
    """

    def resolve(
        self,
        pairs: Iterable[tuple[str, AttributeMap]],
        dev: bool,
        manifest: Manifest | None = None,
    ) -> Resolution:
        resolution = Resolution()
        for name, attributes in pairs:
            if dev:
                if not is_stylesheet(name):
                    resolution.scripts[name] = dict(attributes)
                continue

            chunk = (manifest or {}).get(name)
            if chunk is None:
                logger.debug("Entry %r not found in manifest", name)
                continue

            for stylesheet in chunk.css:
                resolution.stylesheets[stylesheet] = dict(attributes)
            if chunk.file:
                resolution.add(chunk.file, dict(attributes))
        return resolution
