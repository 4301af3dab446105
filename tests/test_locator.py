"""
Tests for tapresolver.taps.locator module.

Tests active tap discovery including:
- Base tap path
- Active tap name precedence (argument > TAP > CLIENT > app.json name)
- Local before external tap folders
- .env support
"""

from __future__ import annotations

import pytest

from tapresolver.exceptions import ValidationError
from tapresolver.taps.locator import (
    get_active_tap_name,
    get_base_tap_path,
    get_tap_path,
    load_environment,
    locate_tap,
)

pytestmark = pytest.mark.unit


class TestBaseTapPath:
    """Tests for the base tap directory."""

    def test_configured_base_tap(self, app_root, sample_app_config):
        assert get_base_tap_path(app_root, sample_app_config) == app_root / "base"

    def test_default_base_tap_uses_name(self, app_root, sample_app_config):
        del sample_app_config["tapResolver"]["paths"]["baseTap"]

        assert (
            get_base_tap_path(app_root, sample_app_config)
            == app_root / "taps" / "tap-resolver"
        )

    def test_no_base_tap_and_no_name_raises(self, app_root):
        with pytest.raises(ValidationError, match="name"):
            get_base_tap_path(app_root, {"tapResolver": {"paths": {}}})


class TestActiveTapName:
    """Tests for active tap name precedence."""

    def test_explicit_name_wins(self, sample_app_config):
        environ = {"TAP": "from-env", "CLIENT": "from-client"}

        assert get_active_tap_name(sample_app_config, "acme", environ) == "acme"

    def test_tap_env_var_second(self, sample_app_config):
        environ = {"TAP": "from-env", "CLIENT": "from-client"}

        assert get_active_tap_name(sample_app_config, None, environ) == "from-env"

    def test_client_env_var_third(self, sample_app_config):
        assert (
            get_active_tap_name(sample_app_config, "", {"CLIENT": "from-client"})
            == "from-client"
        )

    def test_empty_env_values_are_skipped(self, sample_app_config):
        environ = {"TAP": "", "CLIENT": ""}

        assert get_active_tap_name(sample_app_config, None, environ) == "tap-resolver"

    def test_root_name_last(self, sample_app_config):
        assert get_active_tap_name(sample_app_config, None, {}) == "tap-resolver"

    def test_reads_process_environment_by_default(self, monkeypatch, sample_app_config):
        monkeypatch.setenv("TAP", "from-env")

        assert get_active_tap_name(sample_app_config) == "from-env"


class TestTapPath:
    """Tests for tap folder discovery."""

    def test_local_tap_found(self, app_root, sample_app_config, create_tap):
        tap_path = create_tap("acme")

        assert get_tap_path(app_root, sample_app_config, "acme") == tap_path

    def test_external_tap_found(self, app_root, sample_app_config, create_tap):
        tap_path = create_tap("acme", location="node_modules/external-taps/taps")

        assert get_tap_path(app_root, sample_app_config, "acme") == tap_path

    def test_local_wins_over_external(self, app_root, sample_app_config, create_tap):
        local = create_tap("acme")
        create_tap("acme", location="node_modules/external-taps/taps")

        assert get_tap_path(app_root, sample_app_config, "acme") == local

    def test_missing_tap_is_none(self, app_root, sample_app_config):
        assert get_tap_path(app_root, sample_app_config, "ghost") is None


class TestLoadEnvironment:
    """Tests for reading .env from the app root."""

    def test_dotenv_values_are_used(self, app_root):
        (app_root / ".env").write_text("TAP=from-dotenv\n", encoding="utf-8")

        assert load_environment(app_root)["TAP"] == "from-dotenv"

    def test_process_env_wins_over_dotenv(self, app_root, monkeypatch):
        (app_root / ".env").write_text("TAP=from-dotenv\n", encoding="utf-8")
        monkeypatch.setenv("TAP", "from-process")

        assert load_environment(app_root)["TAP"] == "from-process"

    def test_missing_dotenv_is_fine(self, app_root):
        assert "TAP" not in load_environment(app_root)


class TestLocateTap:
    """Tests for the combined locator."""

    def test_root_name_is_not_active(self, app_root, sample_app_config, counting_fs):
        """Test that no directory lookup happens for the root tap."""
        location = locate_tap(
            app_root, sample_app_config, "tap-resolver", fs=counting_fs, environ={}
        )

        assert location.has_active_tap is False
        assert location.active_tap_path == location.base_path == app_root / "base"
        assert counting_fs.exists_calls == 0

    def test_active_local_tap(self, app_root, sample_app_config, create_tap):
        tap_path = create_tap("acme")

        location = locate_tap(app_root, sample_app_config, "acme", environ={})

        assert location.has_active_tap is True
        assert location.active_tap_name == "acme"
        assert location.active_tap_path == tap_path

    def test_requested_but_missing(self, app_root, sample_app_config):
        location = locate_tap(app_root, sample_app_config, "ghost", environ={})

        assert location.has_active_tap is True
        assert location.active_tap_path is None

    def test_dotenv_tap_in_app_root(self, app_root, sample_app_config, create_tap):
        tap_path = create_tap("acme")
        (app_root / ".env").write_text("TAP=acme\n", encoding="utf-8")

        location = locate_tap(app_root, sample_app_config)

        assert location.active_tap_path == tap_path

    def test_invalid_inputs_raise(self, sample_app_config):
        with pytest.raises(ValidationError):
            locate_tap(None, sample_app_config)
        with pytest.raises(ValidationError):
            locate_tap("/apps/mobile", None)
