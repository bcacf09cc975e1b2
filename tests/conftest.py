"""Shared test fixtures."""

from pathlib import Path

import pytest

from aoe_sounds.config import Config
from aoe_sounds.sound.manifest import manifest_filenames
from aoe_sounds.sound.paths import SOUNDS_DIR_ENV


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line(
        "markers", "bundled_assets: checks the real .ogg files shipped in the package"
    )


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> Path:
    """Keep every test away from the real home and config directories."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.delenv(SOUNDS_DIR_ENV, raising=False)
    monkeypatch.chdir(tmp_path)
    return home


@pytest.fixture
def bundled_dir(tmp_path: Path) -> Path:
    """A fake bundle containing every manifest file."""
    bundle = tmp_path / "bundled"
    bundle.mkdir()
    for filename in manifest_filenames():
        (bundle / filename).write_bytes(b"OggS" + filename.encode())
    (bundle / "README.md").write_text("# Bundled Sounds\n")
    return bundle


@pytest.fixture
def sounds_dir(tmp_path: Path) -> Path:
    """Target sounds directory (not created yet)."""
    return tmp_path / "sounds"


@pytest.fixture
def test_config() -> Config:
    """Provide a test configuration."""
    return Config()
