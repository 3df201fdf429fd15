"""
Option Store

Site-wide named options persisted in a JSON file, in the same way the
site settings are kept on disk.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class OptionStore:
    """
    Key/value options backed by a JSON file.

    Every call reads or writes the file, so values are never cached between
    requests.  set() is a blind overwrite of one key.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _load(self) -> dict[str, Any]:
        if self.path.exists():
            try:
                return json.loads(self.path.read_text(encoding="utf-8"))
            except (json.JSONDecodeError, OSError) as e:
                logger.warning("Failed to read options file %s: %s", self.path, e)
        return {}

    def _save(self, options: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(options, indent=2, ensure_ascii=False),
            encoding="utf-8",
        )

    def get(self, key: str, default: Any = None) -> Any:
        return self._load().get(key, default)

    def set(self, key: str, value: Any) -> None:
        options = self._load()
        options[key] = value
        self._save(options)
        logger.info("Option updated: %s", key)
