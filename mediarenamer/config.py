"""Settings management for mediarenamer."""
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Platform-appropriate settings directory
# ---------------------------------------------------------------------------

def settings_dir() -> Path:
    """Return the platform settings directory (not created here)."""
    if sys.platform == "win32":
        base = Path(os.environ.get("APPDATA", Path.home()))
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return base / "MediaRenamer"


SETTINGS_FILE_NAME = "settings.json"


# ---------------------------------------------------------------------------
# Default values for every known key
# ---------------------------------------------------------------------------

DEFAULT_SETTINGS: dict[str, Any] = {
    # Hand-off files, created inside the target directory
    "mapping_file_name": "RenameMapping.txt",
    "report_file_name": "RenameReport.txt",

    # Behavior when neither --recursive nor --non-recursive is given
    "recursive": True,

    # Root logger level; --verbose forces DEBUG
    "log_level": "WARNING",
}


# ---------------------------------------------------------------------------
# SettingsManager -- read-only view of the settings file
# ---------------------------------------------------------------------------

class SettingsManager:
    """Settings read from a JSON file, falling back to DEFAULT_SETTINGS.

    Usage:
        mgr = SettingsManager()
        name = mgr.get("mapping_file_name")
    """

    def __init__(self, path: Path | None = None):
        self.path = path or settings_dir() / SETTINGS_FILE_NAME
        self._data = self._load()

    # -- public API -------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        fallback = DEFAULT_SETTINGS.get(key, default)
        return self._data.get(key, fallback)

    # -- internals --------------------------------------------------------

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            log.warning("Ignoring unreadable settings file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            log.warning("Ignoring settings file %s: not a JSON object", self.path)
            return {}
        return data
