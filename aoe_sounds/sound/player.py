"""Play sound files through a command-line audio player."""

import logging
import shutil
import subprocess
from pathlib import Path

from .errors import PlaybackError, PlayerNotFoundError, SoundNotFoundError
from .library import SoundLibrary
from .paths import normalize_platform

logger = logging.getLogger(__name__)

PLAYBACK_TIMEOUT = 30

# (executable, extra args, extensions it can play or None for any)
PLAYERS = {
    "darwin": [
        ("afplay", [], None),
        ("ffplay", ["-nodisp", "-autoexit", "-loglevel", "quiet"], None),
    ],
    "linux": [
        ("paplay", [], None),
        ("pw-play", [], None),
        ("ffplay", ["-nodisp", "-autoexit", "-loglevel", "quiet"], None),
        ("mpv", ["--no-video", "--really-quiet"], None),
        ("aplay", ["-q"], (".wav",)),
    ],
    "win32": [
        ("ffplay", ["-nodisp", "-autoexit", "-loglevel", "quiet"], None),
        ("mpv", ["--no-video", "--really-quiet"], None),
    ],
}


def find_player(path: Path | str, platform: str | None = None) -> list[str]:
    """Build the command line that plays path with the first available player.

    Raises:
        PlayerNotFoundError: if no supported player is installed.
    """
    path = Path(path)
    platform = normalize_platform(platform)
    candidates = PLAYERS.get(platform, [])

    for executable, args, extensions in candidates:
        if extensions is not None and path.suffix.lower() not in extensions:
            continue
        resolved = shutil.which(executable)
        if resolved:
            return [resolved, *args, str(path)]

    names = ", ".join(executable for executable, _, _ in candidates) or "none known"
    raise PlayerNotFoundError(
        f"No audio player found for {path.suffix or 'this file'} on {platform} "
        f"(tried: {names})"
    )


def play_file(path: Path | str, block: bool = True, platform: str | None = None):
    """Play an audio file.

    Args:
        path: File to play.
        block: Wait for playback to finish. When False, the player process
            is started in the background and returned.
        platform: Override the detected platform.

    Returns:
        The finished CompletedProcess, or the running Popen when not blocking.

    Raises:
        FileNotFoundError: if path does not exist.
        PlayerNotFoundError: if no player is installed.
        PlaybackError: if the player fails.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Sound file not found: {path}")

    cmd = find_player(path, platform)
    logger.debug("Playing %s with %s", path, cmd[0])

    if not block:
        return subprocess.Popen(
            cmd,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )

    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=PLAYBACK_TIMEOUT,
        )
    except subprocess.TimeoutExpired as e:
        raise PlaybackError(f"Playback of {path.name} timed out") from e

    if result.returncode != 0:
        detail = result.stderr.strip() or f"exit code {result.returncode}"
        raise PlaybackError(f"{Path(cmd[0]).name} failed for {path.name}: {detail}")

    return result


def play_sound(name: str, library: SoundLibrary | None = None, block: bool = True):
    """Play a sound by name, honoring user overrides.

    Raises:
        SoundNotFoundError: if no file exists for the name.
    """
    library = library or SoundLibrary()
    path = library.find_sound(name)
    if path is None:
        raise SoundNotFoundError(name, library.list_sounds())
    return play_file(path, block=block)
