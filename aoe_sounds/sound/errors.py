"""Exceptions raised by the sound module."""


class SoundError(Exception):
    """Base class for every sound-related failure."""


class ManifestError(SoundError):
    """The asset manifest is inconsistent (duplicate names, missing defaults)."""


class UnknownSessionStateError(SoundError, ValueError):
    """A session state name that is not one of the five known states."""

    def __init__(self, state: str):
        self.state = state
        super().__init__(f"Unknown session state: {state!r}")


class UnsupportedPlatformError(SoundError):
    """No sounds directory is defined for this operating system."""

    def __init__(self, platform: str):
        self.platform = platform
        super().__init__(f"No sounds directory defined for platform {platform!r}")


class BundleIncompleteError(SoundError):
    """Bundled asset files are missing from the package."""

    def __init__(self, bundled_dir, missing: list[str]):
        self.bundled_dir = bundled_dir
        self.missing = missing
        super().__init__(
            f"Bundled sounds missing from {bundled_dir}: {', '.join(missing)}"
        )


class SoundNotFoundError(SoundError):
    """No file exists for the requested sound name."""

    def __init__(self, name: str, available: list[str] | None = None):
        self.name = name
        self.available = available or []
        super().__init__(f"Sound '{name}' not found")


class PlayerNotFoundError(SoundError):
    """No command-line audio player is installed."""


class PlaybackError(SoundError):
    """The audio player exited with an error."""


class InvalidSoundNameError(SoundError, ValueError):
    """A sound name that is not a plain file stem."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Invalid sound name: {name!r}")
