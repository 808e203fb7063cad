from __future__ import annotations

from fastapi import Request

from vitetags.assets.vite import Vite
from vitetags.infrastructure.config import ViteConfig, get_settings


def get_vite_config(request: Request) -> ViteConfig:
    config = getattr(request.app.state, "vite_config", None)
    if config is None:
        config = get_settings().vite
        request.app.state.vite_config = config
    return config


def get_vite(request: Request) -> Vite:
    """One resolver per request, so the dev client tag is emitted once per page."""
    vite = getattr(request.state, "vite", None)
    if vite is None:
        vite = Vite(get_vite_config(request))
        request.state.vite = vite
    return vite
