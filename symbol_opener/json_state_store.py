"""A durable key/value store persisted as one JSON file."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from platformdirs import user_state_dir

logger = logging.getLogger(__name__)

APP_NAME = "symbol-opener"
CURRENT_SCHEMA_VERSION = 1
DEFAULT_STATE_PATH = Path(user_state_dir(APP_NAME, appauthor=False)) / "state.json"


class JsonStateStore:
    """Process-wide state shared by every running instance.

    The file is re-read on every ``get`` so that a value written by another
    process is visible immediately.
    """

    def __init__(self, path: str | Path = DEFAULT_STATE_PATH) -> None:
        """Bind the store to a file; the file is created on first write."""
        self.path = Path(path)

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.exception("Error loading state from %s", self.path)
            return {}

        schema_ver = data.get("meta", {}).get("schema_version", 0) if isinstance(data, dict) else 0
        if schema_ver != CURRENT_SCHEMA_VERSION:
            logger.warning(
                "Schema version mismatch (%s != %s). Ignoring state.",
                schema_ver,
                CURRENT_SCHEMA_VERSION,
            )
            return {}
        values = data.get("values", {})
        return values if isinstance(values, dict) else {}

    def get(self, key: str) -> Any:
        """Return the stored value or None."""
        return self._load().get(key)

    def put(self, key: str, value: Any) -> None:
        """Store a value; None deletes the key."""
        values = self._load()
        if value is None:
            if key not in values:
                return
            del values[key]
        else:
            values[key] = value

        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(
            json.dumps(
                {"meta": {"schema_version": CURRENT_SCHEMA_VERSION}, "values": values},
                indent=2,
                sort_keys=True,
            ),
            encoding="utf-8",
        )
        os.replace(tmp_path, self.path)
