"""Application feature flags – JSON-file backed stores.

Both stores keep a flat JSON object on disk so cached and overridden values
survive a restart. A missing or unreadable file is treated as empty.
"""
from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from remote_flags.application.feature_flags.in_memory import (
    InMemoryOverrideStore,
    InMemoryRemoteFlagStore,
)
from remote_flags.observability.logging import get_logger

_log = get_logger(__name__)


def _read_json_object(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        _log.warning("flag_store_unreadable", path=str(path), error=str(exc))
        return {}
    if not isinstance(data, dict):
        _log.warning("flag_store_malformed", path=str(path), type=type(data).__name__)
        return {}
    return data


def _write_json_object(path: Path, data: Mapping[str, bool]) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(dict(data), fh, sort_keys=True)
            os.replace(tmp, path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise
    except OSError as exc:
        _log.warning("flag_store_write_failed", path=str(path), error=str(exc))


class JsonFileRemoteFlagStore(InMemoryRemoteFlagStore):
    """Remote value cache persisted to *path*."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)
        super().__init__(_read_json_object(self._path))

    @property
    def path(self) -> Path:
        return self._path

    def _persist(self) -> None:
        _write_json_object(self._path, self._values)


class JsonFileOverrideStore(InMemoryOverrideStore):
    """Override store persisted to *path* as ``{flag_id: bool}``."""

    def __init__(self, path: str | os.PathLike[str], *, enabled: bool = True) -> None:
        self._path = Path(path)
        super().__init__(_read_json_object(self._path), enabled=enabled)

    @property
    def path(self) -> Path:
        return self._path

    def _persist(self) -> None:
        _write_json_object(self._path, self._overrides)


__all__ = ["JsonFileOverrideStore", "JsonFileRemoteFlagStore"]
