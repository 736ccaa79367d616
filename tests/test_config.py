from __future__ import annotations

from pathlib import Path

import pytest

from semverkit.config import (
    SemverKitConfig,
    _parse_section,
    _pyproject_has_section,
    _read_toml,
    discover_config_file,
    load_config,
)
from semverkit.exceptions import ConfigError


@pytest.mark.unit
class TestSemverKitConfig:
    """Tests for the SemverKitConfig dataclass."""

    def test_defaults(self) -> None:
        config = SemverKitConfig()

        assert config.store_path == Path(".semverkit.json")
        assert config.domain == "semverkit"
        assert config.source_path is None

    def test_to_log_dict(self) -> None:
        config = SemverKitConfig(
            store_path=Path("/data/versions.json"),
            domain="app",
            source_path=Path("/data/semverkit.toml"),
        )

        assert config.to_log_dict() == {
            "store_path": str(Path("/data/versions.json")),
            "domain": "app",
        }


@pytest.mark.unit
class TestDiscoverConfigFile:
    """Tests for discover_config_file()."""

    def test_explicit_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        explicit = tmp_path / "custom.toml"
        explicit.write_text("[semverkit]\n", encoding="utf-8")
        (tmp_path / "semverkit.toml").write_text("[semverkit]\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert discover_config_file(explicit) == explicit.resolve()

    def test_explicit_path_missing(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Configuration file not found"):
            discover_config_file(tmp_path / "missing.toml")

    def test_standalone_file_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "semverkit.toml").write_text("[semverkit]\n", encoding="utf-8")
        (tmp_path / "pyproject.toml").write_text("[tool.semverkit]\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert discover_config_file() == tmp_path / "semverkit.toml"

    def test_pyproject_with_section(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[tool.semverkit]\ndomain = "x"\n', encoding="utf-8"
        )
        monkeypatch.chdir(tmp_path)

        assert discover_config_file() == tmp_path / "pyproject.toml"

    def test_pyproject_without_section(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.black]\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert discover_config_file() is None

    def test_nothing_found(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert discover_config_file() is None


@pytest.mark.unit
class TestReadToml:
    def test_valid(self, tmp_path: Path) -> None:
        path = tmp_path / "semverkit.toml"
        path.write_text('[semverkit]\ndomain = "app"\n', encoding="utf-8")

        assert _read_toml(path) == {"semverkit": {"domain": "app"}}

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "semverkit.toml"
        path.write_text("[semverkit\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            _read_toml(path)

    def test_unreadable(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Cannot read"):
            _read_toml(tmp_path / "missing.toml")

    def test_broken_pyproject_has_no_section(self, tmp_path: Path) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text("not = [toml", encoding="utf-8")

        assert _pyproject_has_section(path) is False


@pytest.mark.unit
class TestParseSection:
    """Tests for _parse_section()."""

    def test_empty_section_uses_defaults(self, tmp_path: Path) -> None:
        config = _parse_section({}, config_path=tmp_path / "semverkit.toml")
        assert config == SemverKitConfig()

    def test_relative_store_path_resolves_against_config_dir(self, tmp_path: Path) -> None:
        config = _parse_section(
            {"store_path": "cache/versions.json", "domain": "app"},
            config_path=tmp_path / "semverkit.toml",
        )

        assert config.store_path == tmp_path / "cache" / "versions.json"
        assert config.domain == "app"

    def test_absolute_store_path_kept(self, tmp_path: Path) -> None:
        target = tmp_path / "abs.json"
        config = _parse_section(
            {"store_path": str(target)},
            config_path=Path("/elsewhere/semverkit.toml"),
        )

        assert config.store_path == target

    def test_unknown_keys(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Unknown configuration keys: colour, x"):
            _parse_section({"colour": 1, "x": 2}, config_path=tmp_path / "c.toml")

    @pytest.mark.parametrize(
        "option, value",
        [("store_path", ""), ("store_path", 3), ("domain", ""), ("domain", ["a"])],
    )
    def test_invalid_values(self, tmp_path: Path, option: str, value: object) -> None:
        with pytest.raises(ConfigError) as exc_info:
            _parse_section({option: value}, config_path=tmp_path / "c.toml")

        assert exc_info.value.option == option

    def test_section_must_be_table(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="must be a table"):
            _parse_section("oops", config_path=tmp_path / "c.toml")  # type: ignore[arg-type]


@pytest.mark.integration
class TestLoadConfig:
    """Tests for load_config()."""

    def test_defaults_without_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert load_config() == SemverKitConfig()

    def test_standalone_file(self, tmp_path: Path) -> None:
        path = tmp_path / "semverkit.toml"
        path.write_text(
            '[semverkit]\nstore_path = "v.json"\ndomain = "app"\n', encoding="utf-8"
        )

        config = load_config(path)

        assert config.store_path == path.resolve().parent / "v.json"
        assert config.domain == "app"
        assert config.source_path == path.resolve()

    def test_pyproject_section(self, tmp_path: Path) -> None:
        path = tmp_path / "pyproject.toml"
        path.write_text('[tool.semverkit]\ndomain = "tools"\n', encoding="utf-8")

        assert load_config(path).domain == "tools"

    def test_file_without_section(self, tmp_path: Path) -> None:
        path = tmp_path / "semverkit.toml"
        path.write_text("[other]\nkey = 1\n", encoding="utf-8")

        config = load_config(path)

        assert config.domain == "semverkit"
        assert config.source_path == path.resolve()

    def test_invalid_option_propagates(self, tmp_path: Path) -> None:
        path = tmp_path / "semverkit.toml"
        path.write_text("[semverkit]\ndomain = 1\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="domain must be a non-empty string"):
            load_config(path)
