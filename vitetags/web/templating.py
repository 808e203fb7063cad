"""
Jinja2 helpers exposing the resolver to templates.

Usage in a template rendered with a ``request`` in its context:

    {{ vite_tags("src/main.ts") }}
    {{ vite_tags(["src/main.ts", "src/admin.ts"], defer="defer") }}
    {{ vite_tags({"src/main.ts": {"data-turbo-track": "reload"}}) }}
    <img src="{{ vite_url('images/logo.svg') }}">
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from fastapi.templating import Jinja2Templates
from jinja2 import Environment, pass_context
from jinja2.runtime import Context
from markupsafe import Markup

from vitetags.assets.vite import Vite
from vitetags.domain.models import EntrySpec, Mapped, Names, Single
from vitetags.infrastructure.exceptions import ConfigurationError
from vitetags.web.dependencies import get_vite


def as_entry(value: Any) -> EntrySpec:
    """
    Convert a template-supplied value into a tagged entry.

    Templates cannot build ``Single``/``Names``/``Mapped`` themselves, so
    plain strings, lists of strings and name-to-attributes mappings are
    accepted here.

    Raises:
        TypeError: If the value has none of the supported shapes
    """
    if isinstance(value, (Single, Names, Mapped)):
        return value
    if isinstance(value, str):
        return Single(value)
    if isinstance(value, Mapping):
        return Mapped({str(name): dict(attrs) for name, attrs in value.items()})
    if isinstance(value, (list, tuple)) and all(isinstance(name, str) for name in value):
        return Names(tuple(value))
    raise TypeError(f"Unsupported Vite entry: {value!r}")


def _vite_from_context(context: Context) -> Vite:
    request = context.get("request")
    if request is None:
        raise ConfigurationError(
            "Vite template helpers need 'request' in the template context",
            config_key="request",
        )
    return get_vite(request)


@pass_context
def vite_tags(context: Context, entry: Any, **attributes: str) -> Markup:
    vite = _vite_from_context(context)
    return Markup(vite.use(as_entry(entry), attributes))


@pass_context
def vite_url(context: Context, path: str = "") -> str:
    return _vite_from_context(context).get_url(path)


def install(templates: Jinja2Templates | Environment) -> None:
    env = templates.env if isinstance(templates, Jinja2Templates) else templates
    env.globals["vite_tags"] = vite_tags
    env.globals["vite_url"] = vite_url
