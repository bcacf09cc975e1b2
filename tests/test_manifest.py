"""Tests for the sound manifest."""

import pytest

from aoe_sounds.sound.errors import ManifestError, UnknownSessionStateError
from aoe_sounds.sound.manifest import (
    ADDITIONAL_SOUNDS,
    ATTRIBUTION,
    DEFAULT_SOUNDS,
    SOUND_MANIFEST,
    SessionState,
    SoundAsset,
    default_sound_name,
    get_asset,
    manifest_filenames,
    parse_state,
    validate_manifest,
)


class TestManifestContents:
    """Tests for the bundled asset tables."""

    def test_manifest_has_10_sounds(self):
        """Five default sounds plus five additional ones."""
        assert len(DEFAULT_SOUNDS) == 5
        assert len(ADDITIONAL_SOUNDS) == 5
        assert len(SOUND_MANIFEST) == 10

    def test_every_state_has_a_default(self):
        """Each session state maps to an asset with that role."""
        for state in SessionState:
            asset = DEFAULT_SOUNDS[state]
            assert asset.role is state
            assert asset.is_default

    def test_state_order(self):
        """States are declared in lifecycle order."""
        assert [s.value for s in SessionState] == ["start", "running", "waiting", "idle", "error"]

    def test_additional_sounds_are_unassigned(self):
        for asset in ADDITIONAL_SOUNDS:
            assert asset.role is None
            assert not asset.is_default

    def test_filenames_are_unique(self):
        """No two entries share a filename."""
        filenames = manifest_filenames()
        assert len(filenames) == len(set(filenames))

    def test_all_bundled_files_are_ogg_and_cc0(self):
        for asset in SOUND_MANIFEST.values():
            assert asset.filename.endswith(".ogg")
            assert asset.license == "CC0-1.0"
            assert asset.description

    def test_manifest_lists_defaults_first(self):
        names = list(SOUND_MANIFEST)
        assert names[:5] == [asset.name for asset in DEFAULT_SOUNDS.values()]

    def test_attribution(self):
        """Attribution names the author and the source page."""
        assert ATTRIBUTION["author"] == "SubspaceAudio"
        assert ATTRIBUTION["source"] == "https://opengameart.org/content/80-cc0-rpg-sfx"
        assert "CC0" in ATTRIBUTION["license"]


class TestLookups:
    """Tests for manifest lookup helpers."""

    def test_get_asset(self):
        asset = get_asset("coins")
        assert asset is not None
        assert asset.filename == "coins.ogg"

        assert get_asset("nonexistent") is None

    def test_default_sound_name_accepts_enum_and_string(self):
        assert default_sound_name(SessionState.WAITING) == "waiting"
        assert default_sound_name("error") == "error"
        assert default_sound_name(" Idle ") == "idle"

    def test_unknown_state_raises(self):
        with pytest.raises(UnknownSessionStateError) as exc_info:
            default_sound_name("paused")

        assert exc_info.value.state == "paused"
        assert isinstance(exc_info.value, ValueError)

    def test_parse_state_passthrough(self):
        assert parse_state(SessionState.START) is SessionState.START


class TestValidateManifest:
    """Tests for manifest invariant checks."""

    def test_bundled_manifest_is_valid(self):
        validate_manifest()

    def test_duplicate_filename_rejected(self):
        additional = [*ADDITIONAL_SOUNDS, SoundAsset("copy", "coins.ogg", "Duplicate")]

        with pytest.raises(ManifestError, match="filename"):
            validate_manifest(additional=additional)

    def test_duplicate_name_rejected(self):
        additional = [*ADDITIONAL_SOUNDS, SoundAsset("gem", "gem2.ogg", "Duplicate")]

        with pytest.raises(ManifestError, match="name"):
            validate_manifest(additional=additional)

    def test_missing_state_rejected(self):
        defaults = dict(DEFAULT_SOUNDS)
        del defaults[SessionState.IDLE]

        with pytest.raises(ManifestError, match="idle"):
            validate_manifest(defaults=defaults)

    def test_wrong_role_rejected(self):
        defaults = dict(DEFAULT_SOUNDS)
        defaults[SessionState.IDLE] = SoundAsset("idle", "idle.ogg", "Idle", SessionState.ERROR)

        with pytest.raises(ManifestError):
            validate_manifest(defaults=defaults)

    def test_additional_with_role_rejected(self):
        additional = [SoundAsset("extra", "extra.ogg", "Extra", SessionState.START)]

        with pytest.raises(ManifestError):
            validate_manifest(additional=additional)
