from __future__ import annotations

import json
import logging
import os
from typing import Dict

from mindmap.app.settings import default_settings_payload

SETTINGS_FILENAME = "user_settings.json"


class SettingsLocal:
    """Local filesystem storage for user settings (JSON)."""

    def __init__(self, root_dir: str = ".") -> None:
        self.root = root_dir
        self._log = logging.getLogger(__name__)

    @property
    def path(self) -> str:
        return os.path.join(self.root, SETTINGS_FILENAME)

    def load_user_settings(self) -> Dict:
        """Return the stored payload, or defaults when no file exists yet."""
        if not os.path.exists(self.path):
            return default_settings_payload()
        with open(self.path, "r", encoding="utf-8") as f:
            payload = json.load(f)
        if not isinstance(payload, dict):
            raise ValueError(f"{self.path} does not contain a JSON object.")
        self._log.debug("Loaded settings from %s", self.path)
        return payload

