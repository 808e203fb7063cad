from __future__ import annotations

import os
from pathlib import Path

from vitetags.domain.models import ResolverState
from vitetags.infrastructure.config import ViteConfig
from vitetags.infrastructure.logging import get_logger

HOT_FILE = "hot"

logger = get_logger(__name__)


class ModeDetector:
    """Decides between the dev server and the production build."""

    def __init__(self, config: ViteConfig, state: ResolverState):
        self.config = config
        self.state = state

    def work_path(self, path: str = "") -> Path:
        root = Path(self.config.root) if self.config.root is not None else Path(os.getcwd())
        root = root.resolve()
        path = path.lstrip("/")
        return root / path if path else root

    def hot_file(self) -> Path:
        return self.work_path(HOT_FILE)

    def is_dev(self) -> bool:
        # not cached
        return self.hot_file().is_file() or self.config.dev is True

    def get_host(self) -> str:
        """
        Dev server origin read from the hot file, with a single trailing slash.

        Returns an empty string when no hot file exists. The first value read
        is kept for the life of the instance.
        """
        if self.state.hot_host:
            return self.state.hot_host

        hot_file = self.hot_file()
        if not hot_file.exists():
            return ""

        origin = hot_file.read_text(encoding="utf-8").strip().rstrip("/")
        self.state.hot_host = origin + "/"
        logger.debug("Dev server attached at %s", self.state.hot_host)
        return self.state.hot_host
