"""Tests for ThaiIdSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from thaiid.config.settings import ThaiIdSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = ThaiIdSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.generator.count == 1
        assert settings.fixture.lastname == "Customer"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = ThaiIdSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "thaiid.toml"
        toml.write_text('[generator]\ncount = 5\n[fixture]\nphone = "0800000000"\n')
        settings = ThaiIdSettings.from_cli(start=tmp_path)
        assert settings.config_path == toml
        assert settings.generator.count == 5
        assert settings.generator.stride == 1  # default preserved
        assert settings.fixture.phone == "0800000000"

    def test_loads_from_pyproject(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.thaiid.generator]\nstride = 7\n")
        settings = ThaiIdSettings.from_cli(start=tmp_path)
        assert settings.generator.stride == 7

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[generator]\ncount = 9\n")
        settings = ThaiIdSettings.from_cli(config_path=str(custom), start=tmp_path)
        assert settings.generator.count == 9
        assert settings.config_path == custom

    def test_missing_explicit_path_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "thaiid.toml").write_text("[generator]\ncount = 9\n")
        settings = ThaiIdSettings.from_cli(config_path=str(tmp_path / "nope.toml"), start=tmp_path)
        assert settings.config_path is None
        assert settings.generator.count == 1

    def test_invalid_toml_raises_click_exception(self, tmp_path: Path) -> None:
        (tmp_path / "thaiid.toml").write_text("[generator\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            ThaiIdSettings.from_cli(start=tmp_path)


class TestCliFlags:
    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "thaiid.toml").write_text("quiet = true\n")
        settings = ThaiIdSettings.from_cli(start=tmp_path, quiet=False, json_output=True)
        assert settings.quiet is False
        assert settings.json_output is True


class TestEnvVars:
    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("THAIID_QUIET", "true")
        settings = ThaiIdSettings.from_cli(start=tmp_path)
        assert settings.quiet is True

    def test_nested_env_var_beats_toml(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "thaiid.toml").write_text("[generator]\ncount = 2\n")
        monkeypatch.setenv("THAIID_GENERATOR__COUNT", "6")
        settings = ThaiIdSettings.from_cli(start=tmp_path)
        assert settings.generator.count == 6
