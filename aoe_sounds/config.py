"""Configuration loading and management."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from .sound.errors import UnsupportedPlatformError
from .sound.manifest import DEFAULT_SOUNDS, SessionState, parse_state
from .sound.paths import get_config_root

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _default_transitions() -> dict[SessionState, str | None]:
    return {state: asset.name for state, asset in DEFAULT_SOUNDS.items()}


class SoundConfig(BaseModel):
    """Sound playback configuration."""

    enabled: bool = False
    sounds_dir: str | None = None
    transitions: dict[SessionState, str | None] = Field(default_factory=_default_transitions)

    @field_validator("transitions", mode="before")
    @classmethod
    def _normalize_transition_keys(cls, value):
        if isinstance(value, dict):
            return {str(key).strip().lower(): sound for key, sound in value.items()}
        return value

    @field_validator("transitions")
    @classmethod
    def _fill_missing_states(cls, value: dict[SessionState, str | None]):
        # States left out of the YAML keep their default sound
        merged = _default_transitions()
        merged.update(value)
        return merged

    def sound_for(self, state: SessionState | str) -> str | None:
        """Sound name to play for a state, or None when disabled or muted."""
        if not self.enabled:
            return None
        return self.transitions.get(parse_state(state))

    def get_sounds_dir(self) -> Path | None:
        """Configured sounds directory override, if any."""
        if self.sounds_dir is None:
            return None
        return Path(self.sounds_dir).expanduser()


class Config(BaseModel):
    """Main application configuration."""

    sound: SoundConfig = Field(default_factory=SoundConfig)
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level

    @classmethod
    def from_yaml(cls, path: Path | str) -> "Config":
        """Load configuration from a YAML file."""
        path = Path(path)
        if not path.exists():
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f)

        if data is None:
            return cls()

        return cls(**data)

    def to_yaml(self, path: Path | str) -> None:
        """Save configuration to a YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data = self.model_dump(mode="json")
        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)


def load_config(config_path: Path | str | None = None) -> Config:
    """Load configuration from file or use defaults."""
    if config_path is None:
        # Look for config.yaml in current directory, then the app config dir
        candidates = [Path("config.yaml")]
        try:
            candidates.append(get_config_root() / "config.yaml")
        except UnsupportedPlatformError:
            pass
        for candidate in candidates:
            if candidate.exists():
                config_path = candidate
                break

    if config_path is not None:
        return Config.from_yaml(config_path)

    return Config()
