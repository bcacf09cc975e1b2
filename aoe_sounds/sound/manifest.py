"""Manifest of the bundled sound effects.

All bundled sounds come from SubspaceAudio's "80 CC0 RPG SFX" pack and are
dedicated to the public domain (CC0 1.0 Universal). Five of them are the
default cues for the session states; the other five ship unassigned so users
can wire them to a state from their config.
"""

from dataclasses import dataclass
from enum import Enum

from .errors import ManifestError, UnknownSessionStateError

LICENSE = "CC0-1.0"

ATTRIBUTION = {
    "author": "SubspaceAudio",
    "title": "80 CC0 RPG SFX",
    "source": "https://opengameart.org/content/80-cc0-rpg-sfx",
    "license": "CC0 1.0 Universal",
    "license_url": "https://creativecommons.org/publicdomain/zero/1.0/",
}


class SessionState(str, Enum):
    """Session states that have a sound cue."""

    START = "start"
    RUNNING = "running"
    WAITING = "waiting"
    IDLE = "idle"
    ERROR = "error"


@dataclass(frozen=True)
class SoundAsset:
    """A single bundled sound file."""

    name: str
    filename: str
    description: str
    role: SessionState | None = None
    license: str = LICENSE

    @property
    def is_default(self) -> bool:
        """True if this asset is the default cue for a session state."""
        return self.role is not None


DEFAULT_SOUNDS: dict[SessionState, SoundAsset] = {
    SessionState.START: SoundAsset(
        "start", "start.ogg", "Spell cast, played when a session starts", SessionState.START
    ),
    SessionState.RUNNING: SoundAsset(
        "running", "running.ogg", "Blade swing, the session is working", SessionState.RUNNING
    ),
    SessionState.WAITING: SoundAsset(
        "waiting", "waiting.ogg", "Bell chime, the session waits for input", SessionState.WAITING
    ),
    SessionState.IDLE: SoundAsset(
        "idle", "idle.ogg", "Book closing, the session went idle", SessionState.IDLE
    ),
    SessionState.ERROR: SoundAsset(
        "error", "error.ogg", "Creature roar, the session hit an error", SessionState.ERROR
    ),
}

ADDITIONAL_SOUNDS: list[SoundAsset] = [
    SoundAsset("spell", "spell.ogg", "Magic spell casting"),
    SoundAsset("coins", "coins.ogg", "Coins jingling"),
    SoundAsset("metal", "metal.ogg", "Metal clang"),
    SoundAsset("chain", "chain.ogg", "Chain rattle"),
    SoundAsset("gem", "gem.ogg", "Gem pickup"),
]

# Default sounds first (in state order), then the unassigned ones
SOUND_MANIFEST: dict[str, SoundAsset] = {
    asset.name: asset for asset in [*DEFAULT_SOUNDS.values(), *ADDITIONAL_SOUNDS]
}


def parse_state(state: "SessionState | str") -> SessionState:
    """Coerce a state name (case-insensitive) into a SessionState."""
    if isinstance(state, SessionState):
        return state
    try:
        return SessionState(str(state).strip().lower())
    except ValueError:
        raise UnknownSessionStateError(str(state)) from None


def get_asset(name: str) -> SoundAsset | None:
    """Get the manifest entry for a sound name."""
    return SOUND_MANIFEST.get(name)


def default_sound_name(state: "SessionState | str") -> str:
    """Name of the default sound for a session state."""
    return DEFAULT_SOUNDS[parse_state(state)].name


def manifest_filenames() -> list[str]:
    """Every bundled filename, in manifest order."""
    return [asset.filename for asset in SOUND_MANIFEST.values()]


def validate_manifest(
    defaults: dict[SessionState, SoundAsset] | None = None,
    additional: list[SoundAsset] | None = None,
) -> None:
    """Check the manifest invariants.

    Raises:
        ManifestError: if a state has no default, a default is assigned to the
            wrong state, or two entries share a name or filename.
    """
    defaults = DEFAULT_SOUNDS if defaults is None else defaults
    additional = ADDITIONAL_SOUNDS if additional is None else additional

    missing_states = [state.value for state in SessionState if state not in defaults]
    if missing_states:
        raise ManifestError(f"No default sound for states: {', '.join(missing_states)}")

    for state, asset in defaults.items():
        if asset.role is not state:
            raise ManifestError(
                f"Default sound '{asset.name}' is registered for {state.value} "
                f"but declares role {asset.role}"
            )

    for asset in additional:
        if asset.role is not None:
            raise ManifestError(f"Additional sound '{asset.name}' must not have a role")

    seen_names: set[str] = set()
    seen_files: set[str] = set()
    for asset in [*defaults.values(), *additional]:
        if asset.name in seen_names:
            raise ManifestError(f"Duplicate sound name: {asset.name}")
        if asset.filename in seen_files:
            raise ManifestError(f"Duplicate sound filename: {asset.filename}")
        seen_names.add(asset.name)
        seen_files.add(asset.filename)
