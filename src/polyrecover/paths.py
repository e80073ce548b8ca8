"""Filesystem path helpers."""
from __future__ import annotations

import sys
from pathlib import Path

from platformdirs import PlatformDirs

_APP_NAME = "PolyRecover"
_LINUX_APP_NAME = "polyrecover"


def runtime_config_dir() -> Path:
    """Return the per-user configuration directory."""
    if sys.platform in {"win32", "darwin"}:
        dirs = PlatformDirs(appname=_APP_NAME, appauthor=None, roaming=True)
    else:
        dirs = PlatformDirs(appname=_LINUX_APP_NAME, appauthor=None, roaming=False)
    return Path(dirs.user_config_path)


def project_config_path() -> Path:
    return Path.cwd() / ".polyrecover" / "config.yaml"
