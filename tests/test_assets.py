"""
Tests for tapresolver.assets module.

Tests asset index generation with a fake directory listing and with a
real assets folder.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from tapresolver.assets import build_assets, get_assets_dir

pytestmark = pytest.mark.unit


class FakeFileSystem:
    """Filesystem that lists a fixed set of names and records writes."""

    def __init__(self, names: list[str]):
        self.names = names
        self.listed: list[Path] = []
        self.writes: list[tuple[Path, str]] = []

    def list_dir(self, path: Path) -> list[str]:
        self.listed.append(path)
        return list(self.names)

    def write_text(self, path: Path, content: str) -> None:
        self.writes.append((path, content))


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    return FakeFileSystem(["test.png", "duper.jpg", "no_ext", "bad.ext"])


class TestBuildAssets:
    """Tests for the generated assets module."""

    def test_writes_to_tap_assets(self, sample_app_config, fake_fs):
        assets_path = build_assets(sample_app_config, "./base", "taps/test", fs=fake_fs)

        assert fake_fs.listed == [Path("taps/test/assets")]
        assert fake_fs.writes[0][0] == Path("taps/test/assets/index.js")
        assert assets_path == Path("taps/test/assets/index.js")

    def test_only_allowed_extensions(self, sample_app_config, fake_fs):
        build_assets(sample_app_config, "./base", "taps/test", fs=fake_fs)
        content = fake_fs.writes[0][1]

        assert "duper.jpg" in content
        assert "test.png" in content
        assert "no_ext" not in content
        assert "bad.ext" not in content

    def test_base_assets_when_tap_assets_unset(self, sample_app_config, fake_fs):
        del sample_app_config["tapResolver"]["paths"]["tapAssets"]

        build_assets(sample_app_config, "./base", "taps/test", fs=fake_fs)

        assert fake_fs.writes[0][0] == Path("base/assets/index.js")

    def test_extra_extensions(self, sample_app_config, fake_fs):
        build_assets(sample_app_config, "./base", "taps/test", [".ext"], fs=fake_fs)

        assert "bad.ext" in fake_fs.writes[0][1]

    def test_configured_extensions(self, sample_app_config, fake_fs):
        sample_app_config["tapResolver"]["extensions"]["assets"] = [".ext"]

        build_assets(sample_app_config, "./base", "taps/test", fs=fake_fs)

        assert "bad.ext" in fake_fs.writes[0][1]

    @pytest.mark.parametrize("extensions", [None, ".ext", {"assets": None}])
    def test_malformed_extensions_use_defaults(
        self, sample_app_config, fake_fs, extensions
    ):
        sample_app_config["tapResolver"]["extensions"] = extensions

        build_assets(sample_app_config, "./base", "taps/test", fs=fake_fs)
        content = fake_fs.writes[0][1]

        assert "test.png" in content
        assert "bad.ext" not in content

    def test_module_shape(self, sample_app_config):
        fs = FakeFileSystem(["logo.png", "logo.png"])

        build_assets(sample_app_config, "./base", "taps/test", fs=fs)

        assert fs.writes[0][1] == (
            "const assets = {\n"
            "  \"logo\": require('taps/test/assets/logo.png')\n"
            "}\n\n"
            "export default assets\n"
        )

    def test_real_assets_folder(self, sample_app_config, tmp_test_dir):
        assets_dir = tmp_test_dir / "taps" / "acme" / "assets"
        assets_dir.mkdir(parents=True)
        (assets_dir / "icon.svg").write_text("<svg/>", encoding="utf-8")
        (assets_dir / "notes.txt").write_text("skip", encoding="utf-8")

        assets_path = build_assets(
            sample_app_config, tmp_test_dir / "base", tmp_test_dir / "taps" / "acme"
        )

        content = assets_path.read_text(encoding="utf-8")
        assert "icon.svg" in content
        assert "notes.txt" not in content


class TestAssetsDir:
    """Tests for choosing the assets folder."""

    def test_missing_tap_uses_base(self, sample_app_config):
        assert get_assets_dir(sample_app_config, "base", None) == Path("base/assets")

    def test_non_string_tap_assets_uses_base(self, sample_app_config):
        sample_app_config["tapResolver"]["paths"]["tapAssets"] = 7

        assert get_assets_dir(sample_app_config, "base", "taps/acme") == Path(
            "base/assets"
        )
