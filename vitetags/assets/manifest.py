from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from vitetags.assets.mode import ModeDetector
from vitetags.domain.models import Manifest, ManifestEntry, ResolverState
from vitetags.infrastructure.config import ViteConfig
from vitetags.infrastructure.exceptions import ManifestError, log_error_details
from vitetags.infrastructure.logging import LogContext, get_logger

logger = get_logger(__name__)


def parse_manifest(raw: bytes | str, manifest_path: Path) -> Manifest:
    """
    Parse manifest JSON into entries keyed by source name.

    The whole document is rejected when any part of it is unusable, so a
    caller never sees a partially read manifest.

    Raises:
        ManifestError: If the content is not a JSON object of manifest entries
    """
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ManifestError(
                f"not UTF-8 (byte {exc.start})", manifest_path, reason="encoding"
            ) from exc

    try:
        data: Any = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"invalid JSON ({exc.msg})", manifest_path, reason="json") from exc

    if not isinstance(data, dict):
        raise ManifestError(
            f"expected a JSON object, got {type(data).__name__}", manifest_path, reason="type"
        )

    manifest: Manifest = {}
    for name, chunk in data.items():
        try:
            manifest[str(name)] = ManifestEntry.model_validate(chunk)
        except ValidationError as exc:
            raise ManifestError(
                f"entry {name!r} is not a valid chunk", manifest_path, reason="entry"
            ) from exc
    return manifest


class ManifestStore:
    """Loads the production manifest at most once per resolver instance."""

    def __init__(self, config: ViteConfig, state: ResolverState, mode: ModeDetector):
        self.config = config
        self.state = state
        self.mode = mode

    def manifest_path(self) -> Path:
        return self.mode.work_path(self.config.build_dir.strip("/")) / self.config.manifest_file

    def get_manifest(self) -> Manifest:
        if self.state.manifest_error is not None:
            raise self.state.manifest_error
        if self.state.manifest is not None:
            return self.state.manifest

        path = self.manifest_path()
        if not path.exists():
            logger.debug("No manifest at %s", path)
            self.state.manifest = {}
            return self.state.manifest

        with LogContext(operation="load_manifest", manifest_path=path):
            raw = path.read_bytes()
            try:
                self.state.manifest = parse_manifest(raw, path)
            except ManifestError as exc:
                if self.config.manifest_errors == "raise":
                    self.state.manifest_error = exc
                    raise
                logger.warning(
                    "Ignoring unusable manifest: %s",
                    exc.message,
                    extra={"error": log_error_details(exc)},
                )
                self.state.manifest = {}
            else:
                logger.debug("Loaded %d manifest entries", len(self.state.manifest))

        return self.state.manifest
