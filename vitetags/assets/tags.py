from __future__ import annotations

from collections.abc import Mapping

from vitetags.assets.mode import ModeDetector
from vitetags.domain.models import AttributeMap, RenderedTag, TagKind
from vitetags.infrastructure.config import ViteConfig


def html_attributes(attributes: Mapping[str, object]) -> str:
    # Values are emitted verbatim; callers must not pass untrusted input.
    return " ".join(f'{key}="{value}"' for key, value in attributes.items())


def _merge(
    defaults: AttributeMap, attributes: Mapping[str, str] | None, key: str, url: str
) -> AttributeMap:
    merged = dict(defaults)
    merged.update(attributes or {})
    merged.pop(key, None)
    merged[key] = url
    return merged


class TagRenderer:
    """Turns resolved URLs into ``<script>`` and ``<link>`` tags."""

    def __init__(self, config: ViteConfig, mode: ModeDetector):
        self.config = config
        self.mode = mode

    def url(self, path: str = "") -> str:
        if self.mode.is_dev():
            return self.mode.get_host() + path
        return self.config.public_build_dir() + path

    def script_tag(self, path: str, attributes: Mapping[str, str] | None = None) -> str:
        merged = _merge({"type": "module"}, attributes, "src", self.url(path))
        return f"<script {html_attributes(merged)}></script>\n"

    def stylesheet_tag(self, path: str, attributes: Mapping[str, str] | None = None) -> str:
        merged = _merge(
            {"rel": "stylesheet", "type": "text/css"}, attributes, "href", self.url(path)
        )
        return f"<link {html_attributes(merged)} />\n"

    def render(self, tag: RenderedTag) -> str:
        if tag.kind is TagKind.STYLESHEET:
            return self.stylesheet_tag(tag.url, tag.attributes)
        return self.script_tag(tag.url, tag.attributes)
