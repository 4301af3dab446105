"""
Tests for tapresolver.cli module.

Runs the CLI entry point against a temporary app root.
"""

from __future__ import annotations

import pytest

from tapresolver.cli import main
from tapresolver.logging import DefaultLogger, set_global_logger

pytestmark = pytest.mark.integration


@pytest.fixture(autouse=True)
def restore_global_logger():
    yield
    set_global_logger(DefaultLogger())


def run_cli(*argv: str) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(list(argv))
    return exc_info.value.code


class TestValidateCommand:
    def test_valid_app(self, app_root, capsys):
        assert run_cli("validate", str(app_root)) == 0
        assert "[SUCCESS]" in capsys.readouterr().out

    def test_invalid_app(self, tmp_test_dir, capsys):
        assert run_cli("validate", str(tmp_test_dir)) == 1
        assert "[FAILED]" in capsys.readouterr().out

    def test_null_tap_resolver(self, tmp_test_dir, create_json_file, capsys):
        create_json_file("app.json", {"name": "root", "tapResolver": None})

        assert run_cli("validate", str(tmp_test_dir)) == 1
        out = capsys.readouterr().out
        assert "[FAILED]" in out
        assert "tapResolver.paths" in out


class TestSetupCommand:
    def test_setup_with_tap(self, app_root, create_tap, capsys):
        create_tap("acme", {"name": "acme"})

        assert run_cli("setup", str(app_root), "--tap", "acme") == 0

        out = capsys.readouterr().out
        assert "Active Tap:      acme" in out
        assert (app_root / "taps" / "acme" / "temp" / "app.json").exists()

    def test_setup_without_config(self, tmp_test_dir, capsys):
        assert run_cli("setup", str(tmp_test_dir)) == 1
        assert "Error:" in capsys.readouterr().out

    def test_setup_warns_on_defaults(self, app_root, capsys):
        assert run_cli("setup", str(app_root)) == 0
        assert "[WARNING]" in capsys.readouterr().err


class TestResolveCommand:
    def test_resolve_tap_file(self, app_root, create_tap, capsys):
        tap_path = create_tap("acme", {"name": "acme"})
        (tap_path / "components").mkdir()
        (tap_path / "components" / "Button.js").write_text("", encoding="utf-8")

        assert run_cli("resolve", str(app_root), "components", "Button", "--tap", "acme") == 0

        out = capsys.readouterr().out.strip().splitlines()
        assert out[-1] == str(tap_path / "components" / "Button.js")

    def test_resolve_fallback(self, app_root, create_tap, capsys):
        create_tap("acme", {"name": "acme"})

        assert (
            run_cli(
                "resolve", str(app_root), "components", "Footer",
                "--tap", "acme", "--ext", ".tsx",
            )
            == 0
        )

        out = capsys.readouterr().out.strip().splitlines()
        assert out[-1] == str(app_root / "base" / "components" / "Footer")


class TestAssetsCommand:
    def test_writes_index(self, app_root, create_tap, capsys):
        tap_path = create_tap("acme", {"name": "acme"})
        (tap_path / "assets").mkdir()
        (tap_path / "assets" / "logo.png").write_bytes(b"png")

        assert run_cli("assets", str(app_root), "--tap", "acme") == 0
        assert "logo.png" in (tap_path / "assets" / "index.js").read_text(encoding="utf-8")

    def test_missing_assets_folder(self, app_root, create_tap, capsys):
        create_tap("acme", {"name": "acme"})

        assert run_cli("assets", str(app_root), "--tap", "acme") == 1


class TestInstallCommand:
    def test_install(self, app_root, tmp_test_dir, monkeypatch, capsys):
        monkeypatch.setattr(
            "tapresolver.install.DEFAULT_TEMP_DIR", tmp_test_dir / "temp"
        )

        assert run_cli("install", str(app_root)) == 0
        assert (app_root / "node_modules" / "external-taps" / "taps").is_dir()
