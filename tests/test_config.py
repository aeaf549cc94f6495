"""Tests for configuration loading."""

from pathlib import Path

import pytest

from bmp24.config import CONFIG_ENV, Bmp24Config, load_config


@pytest.fixture(autouse=True)
def isolated(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Run each test with no env override, an empty cwd and an empty home."""
    monkeypatch.delenv(CONFIG_ENV, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return tmp_path


class TestDefaults:
    """Test behaviour without a config file."""

    def test_defaults_when_nothing_found(self) -> None:
        """Test that no file means built-in defaults."""
        config = load_config()
        assert config == Bmp24Config()
        assert config.overwrite is True
        assert config.log_level == "WARNING"

    def test_explicit_missing_file(self, tmp_path: Path) -> None:
        """Test that a named but missing file is an error."""
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_config(str(tmp_path / "absent.toml"))


class TestResolution:
    """Test config path resolution order."""

    def test_explicit_path(self, tmp_path: Path) -> None:
        """Test loading from an explicit path."""
        path = tmp_path / "custom.toml"
        path.write_text('[bmp24]\noverwrite = false\nlog_level = "DEBUG"\n')

        config = load_config(str(path))
        assert config.overwrite is False
        assert config.log_level == "DEBUG"

    def test_env_wins_over_explicit(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that BMP24_CONFIG takes precedence."""
        env_path = tmp_path / "env.toml"
        env_path.write_text("[bmp24]\noverwrite = false\n")
        other = tmp_path / "other.toml"
        other.write_text("[bmp24]\noverwrite = true\n")
        monkeypatch.setenv(CONFIG_ENV, str(env_path))

        assert load_config(str(other)).overwrite is False

    def test_cwd_file(self) -> None:
        """Test auto-detection of ./bmp24.toml."""
        Path("bmp24.toml").write_text('[bmp24]\nlog_level = "INFO"\n')
        assert load_config().log_level == "INFO"

    def test_home_file(self, tmp_path: Path) -> None:
        """Test auto-detection of ~/bmp24.toml."""
        (tmp_path / "home" / "bmp24.toml").write_text('[bmp24]\nlog_level = "ERROR"\n')
        assert load_config().log_level == "ERROR"

    def test_missing_section_uses_defaults(self) -> None:
        """Test a file with no [bmp24] table."""
        Path("bmp24.toml").write_text("[other]\nkey = 1\n")
        assert load_config() == Bmp24Config()


class TestValidation:
    """Test rejection of bad settings."""

    def test_unknown_key(self) -> None:
        """Test that typos are reported."""
        Path("bmp24.toml").write_text("[bmp24]\noverwrit = false\n")
        with pytest.raises(ValueError, match="Invalid configuration"):
            load_config()

    def test_bad_log_level(self) -> None:
        """Test that unknown log levels are rejected."""
        Path("bmp24.toml").write_text('[bmp24]\nlog_level = "LOUD"\n')
        with pytest.raises(ValueError):
            load_config()
