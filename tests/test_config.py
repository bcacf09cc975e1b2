"""Tests for configuration loading."""

import pytest
import yaml
from pydantic import ValidationError

from aoe_sounds.config import Config, SoundConfig, load_config
from aoe_sounds.sound.manifest import SessionState


class TestSoundConfig:
    """Tests for the sound settings model."""

    def test_defaults(self, test_config):
        assert test_config.sound.enabled is False
        assert test_config.sound.sounds_dir is None
        assert test_config.log_level == "WARNING"
        assert test_config.sound.transitions[SessionState.WAITING] == "waiting"

    def test_disabled_plays_nothing(self):
        config = SoundConfig()

        assert config.sound_for("start") is None

    def test_enabled_uses_default_mapping(self):
        config = SoundConfig(enabled=True)

        assert config.sound_for(SessionState.ERROR) == "error"
        assert config.sound_for("Running") == "running"

    def test_custom_transitions_merge_with_defaults(self):
        config = SoundConfig(enabled=True, transitions={"Waiting": "coins", "idle": None})

        assert config.sound_for("waiting") == "coins"
        assert config.sound_for("idle") is None
        assert config.sound_for("start") == "start"

    def test_unknown_state_in_transitions_rejected(self):
        with pytest.raises(ValidationError):
            SoundConfig(transitions={"paused": "gem"})

    def test_sounds_dir_expands_user(self, isolated_home):
        config = SoundConfig(sounds_dir="~/my-sounds")

        assert config.get_sounds_dir() == isolated_home / "my-sounds"


class TestConfigFiles:
    """Tests for YAML round trips and discovery."""

    def test_missing_file_gives_defaults(self, tmp_path):
        config = Config.from_yaml(tmp_path / "missing.yaml")

        assert config == Config()

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")

        assert Config.from_yaml(path) == Config()

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "sound:\n"
            "  enabled: true\n"
            "  transitions:\n"
            "    error: metal\n"
            "log_level: debug\n"
        )

        config = Config.from_yaml(path)

        assert config.sound.enabled is True
        assert config.sound.sound_for("error") == "metal"
        assert config.log_level == "DEBUG"

    def test_to_yaml_writes_state_names(self, tmp_path):
        path = tmp_path / "out" / "config.yaml"
        config = Config(sound=SoundConfig(enabled=True, transitions={"idle": "gem"}))

        config.to_yaml(path)

        data = yaml.safe_load(path.read_text())
        assert data["sound"]["enabled"] is True
        assert data["sound"]["transitions"]["idle"] == "gem"
        assert Config.from_yaml(path) == config

    def test_load_config_from_cwd(self, tmp_path):
        (tmp_path / "config.yaml").write_text("sound:\n  enabled: true\n")

        assert load_config().sound.enabled is True

    def test_load_config_from_app_dir(self, isolated_home, monkeypatch):
        monkeypatch.setattr("sys.platform", "linux")
        app_dir = isolated_home / ".config" / "agent-of-empires"
        app_dir.mkdir(parents=True)
        (app_dir / "config.yaml").write_text("log_level: INFO\n")

        assert load_config().log_level == "INFO"

    def test_load_config_without_files(self):
        assert load_config() == Config()
