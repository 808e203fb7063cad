from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from pydantic import BaseModel, Field

AttributeMap = dict[str, str]


class ManifestEntry(BaseModel):
    """One chunk of a Vite build manifest; only ``file`` and ``css`` are read."""

    file: str | None = None
    css: list[str] = Field(default_factory=list)

    model_config = {"extra": "ignore", "frozen": True}


Manifest = dict[str, ManifestEntry]


class TagKind(str, Enum):
    SCRIPT = "script"
    STYLESHEET = "stylesheet"


@dataclass(slots=True)
class RenderedTag:
    kind: TagKind
    url: str
    attributes: AttributeMap = field(default_factory=dict)


@dataclass(slots=True)
class ResolverState:
    """Caches owned by a single resolver instance."""

    hot_host: str | None = None
    manifest: Manifest | None = None
    manifest_error: Exception | None = None
    client_injected: bool = False


@dataclass(frozen=True, slots=True)
class Single:
    name: str

    def pairs(self, attributes: Mapping[str, str] | None = None) -> list[tuple[str, AttributeMap]]:
        return [(self.name, dict(attributes or {}))]


@dataclass(frozen=True, slots=True)
class Names:
    names: Sequence[str]

    def __post_init__(self):
        if isinstance(self.names, str):
            raise TypeError(f"Names expects a sequence of names, got the string {self.names!r}")
        object.__setattr__(self, "names", tuple(self.names))

    def pairs(self, attributes: Mapping[str, str] | None = None) -> list[tuple[str, AttributeMap]]:
        return [(name, dict(attributes or {})) for name in self.names]


@dataclass(frozen=True, slots=True)
class Mapped:
    """Entries that each carry their own attributes; call-level defaults are ignored."""

    entries: Mapping[str, Mapping[str, str]]

    def pairs(self, attributes: Mapping[str, str] | None = None) -> list[tuple[str, AttributeMap]]:
        return [(name, dict(attrs)) for name, attrs in self.entries.items()]


EntrySpec = Union[Single, Names, Mapped]
