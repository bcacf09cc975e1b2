"""Where sound files live.

Per-platform sounds directories:
- Linux:   ~/.config/agent-of-empires/sounds   ($XDG_CONFIG_HOME honored)
- macOS:   ~/.agent-of-empires/sounds
- Windows: %APPDATA%/agent-of-empires/sounds

AOE_SOUNDS_DIR overrides all of them.
"""

import logging
import os
import sys
from collections.abc import Mapping
from pathlib import Path

from .errors import UnsupportedPlatformError

logger = logging.getLogger(__name__)

APP_NAME = "agent-of-empires"
SOUNDS_SUBDIR = "sounds"
SOUNDS_DIR_ENV = "AOE_SOUNDS_DIR"

BUNDLED_DIR = Path(__file__).parent / "bundled"


def normalize_platform(platform: str | None = None) -> str:
    """Map a sys.platform value (or alias) to linux, darwin or win32."""
    platform = (platform or sys.platform).lower()
    if platform.startswith("linux"):
        return "linux"
    if platform in ("darwin", "macos", "mac", "osx"):
        return "darwin"
    if platform in ("win32", "windows", "cygwin"):
        return "win32"
    return platform


def get_config_root(
    platform: str | None = None,
    home: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> Path:
    """Application config directory (the parent of the sounds directory)."""
    platform = normalize_platform(platform)
    home = Path(home) if home is not None else Path.home()
    env = os.environ if env is None else env

    if platform == "linux":
        xdg = env.get("XDG_CONFIG_HOME", "")
        # Relative XDG paths are invalid per the basedir spec
        base = Path(xdg) if xdg and Path(xdg).is_absolute() else home / ".config"
        return base / APP_NAME

    if platform == "darwin":
        return home / f".{APP_NAME}"

    if platform == "win32":
        appdata = env.get("APPDATA")
        base = Path(appdata) if appdata else home / "AppData" / "Roaming"
        return base / APP_NAME

    raise UnsupportedPlatformError(platform)


def get_sounds_dir(
    platform: str | None = None,
    home: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> Path:
    """Directory the user's sound files are installed to and looked up in.

    Args:
        platform: sys.platform style name. Defaults to the running platform.
        home: Home directory. Defaults to Path.home().
        env: Environment mapping. Defaults to os.environ.

    Returns:
        Absolute path of the sounds directory (it may not exist yet).

    Raises:
        UnsupportedPlatformError: for platforms other than Linux, macOS, Windows.
    """
    env = os.environ if env is None else env

    override = env.get(SOUNDS_DIR_ENV)
    if override:
        logger.debug("Using %s=%s", SOUNDS_DIR_ENV, override)
        return Path(override).expanduser().absolute()

    sounds_dir = get_config_root(platform, home, env) / SOUNDS_SUBDIR
    return sounds_dir.absolute()


def get_bundled_dir() -> Path:
    """Directory inside the package holding the bundled sound files."""
    return BUNDLED_DIR
