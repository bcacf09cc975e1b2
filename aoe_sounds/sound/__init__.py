"""Sound module for Agent of Empires sessions.

Ships ten CC0 sound effects and maps the five session states to their
default cue.

The sound workflow is:
1. Install the bundled sounds into the user's sounds directory
2. Optionally replace or add .wav/.ogg files there
3. Resolve a session state to a file and play it

Components:
- manifest: the bundled sounds and their session-state roles
- paths: per-platform sounds directory
- library: install, list and resolve sounds on disk
- player: command-line playback
"""

from .errors import (
    BundleIncompleteError,
    InvalidSoundNameError,
    ManifestError,
    PlaybackError,
    PlayerNotFoundError,
    SoundError,
    SoundNotFoundError,
    UnknownSessionStateError,
    UnsupportedPlatformError,
)
from .library import InstallReport, SoundLibrary, install_bundled_sounds, list_available_sounds
from .manifest import (
    ADDITIONAL_SOUNDS,
    ATTRIBUTION,
    DEFAULT_SOUNDS,
    SOUND_MANIFEST,
    SessionState,
    SoundAsset,
    default_sound_name,
    get_asset,
    validate_manifest,
)
from .paths import get_bundled_dir, get_sounds_dir
from .player import play_file, play_sound

__all__ = [
    "ADDITIONAL_SOUNDS",
    "ATTRIBUTION",
    "DEFAULT_SOUNDS",
    "SOUND_MANIFEST",
    "BundleIncompleteError",
    "InstallReport",
    "InvalidSoundNameError",
    "ManifestError",
    "PlaybackError",
    "PlayerNotFoundError",
    "SessionState",
    "SoundAsset",
    "SoundError",
    "SoundLibrary",
    "SoundNotFoundError",
    "UnknownSessionStateError",
    "UnsupportedPlatformError",
    "default_sound_name",
    "get_asset",
    "get_bundled_dir",
    "get_sounds_dir",
    "install_bundled_sounds",
    "list_available_sounds",
    "play_file",
    "play_sound",
    "validate_manifest",
]
