"""Local key/value storage for the Gemini API key."""

import json
import logging
from pathlib import Path
from typing import Optional

from ..constants.constants import *
from ..settings import settings

logger = logging.getLogger(__name__)


class CredentialStore:
    """Stores a single credential string in a JSON file.

    The value is kept in plain text with no expiry. When nothing has been
    saved, ``get_api_key`` falls back to ``settings.gemini_api_key``.
    """

    def __init__(self, path: Optional[Path] = None, key: str = CREDENTIAL_STORAGE_KEY):
        self.path = Path(path) if path is not None else Path(settings.credential_file)
        self.key = key

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read credential file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def get_stored_api_key(self) -> str:
        value = self._load().get(self.key, "")
        return value if isinstance(value, str) else ""

    def get_api_key(self) -> str:
        return self.get_stored_api_key() or settings.gemini_api_key

    def set_api_key(self, api_key: str) -> None:
        data = self._load()
        data[self.key] = (api_key or "").strip()

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(data, f, indent=2)
        logger.info(f"Saved API key to {self.path}")

    def has_api_key(self) -> bool:
        return bool(self.get_api_key())
