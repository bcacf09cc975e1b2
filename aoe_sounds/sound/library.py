"""Sound library on disk.

The user's sounds directory starts as a copy of the bundled CC0 sounds.
Users customize it by dropping their own files next to (or over) them:

- start.wav placed in the sounds directory replaces the bundled start.ogg
- any other .wav/.ogg file becomes available by its file stem
"""

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from .manifest import SOUND_MANIFEST, SessionState, default_sound_name, manifest_filenames
from .errors import BundleIncompleteError, InvalidSoundNameError
from .paths import get_bundled_dir, get_sounds_dir

logger = logging.getLogger(__name__)

# Lookup order when both exist for the same name
SUPPORTED_EXTENSIONS = (".wav", ".ogg")


def check_sound_name(name: str) -> None:
    """Reject names that could point outside the sounds directory.

    Raises:
        InvalidSoundNameError: for empty names, "." or "..", and names
            containing a path separator.
    """
    if not name or name in (".", "..") or "/" in name or "\\" in name or "\0" in name:
        raise InvalidSoundNameError(name)


@dataclass
class InstallReport:
    """Result of installing the bundled sounds."""

    target_dir: Path
    installed: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)


class SoundLibrary:
    """Manages the sounds directory for the current user."""

    def __init__(self, sounds_dir: Path | None = None, bundled_dir: Path | None = None):
        """Initialize with the user's sounds directory and the bundle location."""
        self.sounds_dir = Path(sounds_dir) if sounds_dir is not None else get_sounds_dir()
        self.bundled_dir = Path(bundled_dir) if bundled_dir is not None else get_bundled_dir()

    def verify_bundle(self) -> list[str]:
        """Manifest filenames missing from the bundled directory."""
        return [
            filename
            for filename in manifest_filenames()
            if not (self.bundled_dir / filename).is_file()
        ]

    def install_bundled(self, force: bool = False) -> InstallReport:
        """Copy the bundled sounds into the sounds directory.

        Files that already exist are kept (they may be user replacements)
        unless force is set.

        Raises:
            BundleIncompleteError: if any manifest file is missing from the
                bundle. Nothing is copied in that case.
        """
        missing = self.verify_bundle()
        if missing:
            raise BundleIncompleteError(self.bundled_dir, missing)

        self.sounds_dir.mkdir(parents=True, exist_ok=True)
        report = InstallReport(target_dir=self.sounds_dir)

        for name, asset in SOUND_MANIFEST.items():
            target = self.sounds_dir / asset.filename
            if target.exists() and not force:
                logger.debug("Keeping existing %s", target)
                report.skipped.append(name)
                continue

            shutil.copyfile(self.bundled_dir / asset.filename, target)
            logger.info("Installed %s -> %s", asset.filename, target)
            report.installed.append(name)

        return report

    def list_sounds(self) -> list[str]:
        """Names of every sound file in the sounds directory, sorted."""
        if not self.sounds_dir.is_dir():
            return []

        names = {
            path.stem
            for path in self.sounds_dir.iterdir()
            if path.is_file()
            and path.suffix.lower() in SUPPORTED_EXTENSIONS
            and path.stem not in ("", ".", "..")
        }
        return sorted(names)

    def find_user_sound(self, name: str) -> Path | None:
        """Find a sound in the user's sounds directory (.wav before .ogg).

        Extensions match case-insensitively, the same way list_sounds() does.
        """
        check_sound_name(name)
        if not self.sounds_dir.is_dir():
            return None

        matches = {}
        for path in self.sounds_dir.iterdir():
            suffix = path.suffix.lower()
            if path.stem == name and suffix in SUPPORTED_EXTENSIONS and path.is_file():
                matches.setdefault(suffix, path)

        for ext in SUPPORTED_EXTENSIONS:
            if ext in matches:
                return matches[ext]
        return None

    def find_bundled_sound(self, name: str) -> Path | None:
        """Find a manifest sound in the bundled directory."""
        check_sound_name(name)
        asset = SOUND_MANIFEST.get(name)
        if asset is None:
            return None
        candidate = self.bundled_dir / asset.filename
        return candidate if candidate.is_file() else None

    def find_sound(self, name: str) -> Path | None:
        """Resolve a sound name to the file that should be played.

        User files win over the bundled copy, and within the sounds
        directory a .wav wins over an .ogg of the same name.
        """
        path = self.find_user_sound(name) or self.find_bundled_sound(name)
        if path is None:
            logger.debug("No file found for sound %r", name)
        return path

    def resolve_state(self, state: SessionState | str) -> Path | None:
        """File to play for a session state's default sound."""
        return self.find_sound(default_sound_name(state))

    def sound_source(self, name: str) -> str | None:
        """Where find_sound() resolves a name from: "user", "bundled" or None."""
        if self.find_user_sound(name) is not None:
            return "user"
        if self.find_bundled_sound(name) is not None:
            return "bundled"
        return None

    def sound_exists(self, name: str) -> bool:
        """Check if a sound file exists in the sounds directory."""
        return self.find_user_sound(name) is not None

    def get_missing_sounds(self) -> list[str]:
        """Manifest sounds that are not installed yet."""
        return [name for name in SOUND_MANIFEST if not self.sound_exists(name)]


def install_bundled_sounds(force: bool = False) -> InstallReport:
    """Install the bundled sounds to the default sounds directory."""
    return SoundLibrary().install_bundled(force=force)


def list_available_sounds() -> list[str]:
    """Sounds installed in the default sounds directory."""
    return SoundLibrary().list_sounds()
