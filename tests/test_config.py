"""
Tests for the rigid.yml config loader.
"""

import textwrap
from pathlib import Path

import pytest

from rigid.core.config.loader import ConfigError, RigidConfig, find_config_file, load_config


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.delenv("RIGID_CONFIG", raising=False)


class TestLoadConfig:
    def test_defaults_without_file(self):
        config = load_config()
        assert config == RigidConfig()
        assert config.repo_prefix == "proto-"
        assert config.token_path == Path.home() / ".githubtoken"

    def test_explicit_file(self, tmp_path: Path):
        path = tmp_path / "rigid.yml"
        path.write_text(textwrap.dedent("""\
            author: Ada Lovelace
            repo_prefix: demo-
            private: true
            token_file: /secrets/gh
        """))
        config = load_config(path)
        assert config.author == "Ada Lovelace"
        assert config.repo_prefix == "demo-"
        assert config.private is True
        assert config.token_path == Path("/secrets/gh")

    def test_env_var(self, tmp_path: Path, monkeypatch):
        path = tmp_path / "custom.yml"
        path.write_text("skip_install: true\n")
        monkeypatch.setenv("RIGID_CONFIG", str(path))
        assert find_config_file() == path
        assert load_config().skip_install is True

    def test_home_default_location(self):
        cfg_dir = Path.home() / ".config" / "rigid"
        cfg_dir.mkdir(parents=True)
        (cfg_dir / "rigid.yml").write_text("author: Home\n")
        assert load_config().author == "Home"

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "rigid.yml"
        path.write_text("")
        assert load_config(path) == RigidConfig()

    def test_missing_explicit_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "absent.yml")

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "rigid.yml"
        path.write_text("author: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path: Path):
        path = tmp_path / "rigid.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_invalid_value(self, tmp_path: Path):
        path = tmp_path / "rigid.yml"
        path.write_text("private: maybe\n")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path)
