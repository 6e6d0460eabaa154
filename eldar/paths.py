"""Storage directory resolution.

Desktop platforms keep the database under the user's config directory, which
must already exist. Mobile platforms prefer the app-private storage root and
fall back to the config directory.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

from eldar.config import Settings, get_settings
from eldar.errors import DirectoryUnavailableError

MOBILE_PLATFORMS = ("android", "ios")


def _home() -> Path:
    home = os.environ.get("HOME") or os.environ.get("USERPROFILE")
    if not home:
        raise DirectoryUnavailableError("failed to get home directory: $HOME is not defined")
    return Path(home)


def user_config_dir(platform: Optional[str] = None) -> Path:
    """Return the per-user configuration directory for ``platform``."""
    platform = platform or sys.platform
    if platform.startswith("win"):
        appdata = os.environ.get("APPDATA")
        if not appdata:
            raise DirectoryUnavailableError("failed to get config directory: %APPDATA% is not defined")
        return Path(appdata)
    if platform == "darwin":
        return _home() / "Library" / "Application Support"
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg and os.path.isabs(xdg):
        return Path(xdg)
    return _home() / ".config"


def app_storage_root() -> Optional[Path]:
    """App-private storage root exported by the mobile runtime, if any."""
    root = os.environ.get("ANDROID_PRIVATE")
    return Path(root) if root else None


def storage_dir(platform: Optional[str] = None, app_root: Optional[Path] = None) -> Path:
    platform = platform or sys.platform
    if platform in MOBILE_PLATFORMS:
        root = app_root or app_storage_root()
        if root is not None:
            return Path(root)
        return user_config_dir(platform)

    config_dir = user_config_dir(platform)
    if not config_dir.is_dir():
        raise DirectoryUnavailableError(f"config directory is not accessible: {config_dir}")
    return config_dir


def database_path(settings: Optional[Settings] = None) -> Path:
    """Full path of the store file: ``<root>/<app_dirname>/<db_filename>``."""
    settings = settings or get_settings()
    root = Path(settings.data_dir).expanduser() if settings.data_dir else storage_dir()
    return root / settings.app_dirname / settings.db_filename
