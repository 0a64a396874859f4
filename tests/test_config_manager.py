"""Unit tests for configuration management."""

from pathlib import Path

import pytest

from filekit.config import (
    ConfigError,
    ConfigManager,
    FileKitConfig,
    flatten_for_env,
    resolve_with_precedence,
)


def _manager(tmp_path: Path, env: dict[str, str] | None = None) -> ConfigManager:
    return ConfigManager(tmp_path / "config.yaml", env=env or {})


def test_ensure_exists_creates_default_file(tmp_path: Path) -> None:
    manager = _manager(tmp_path)

    path = manager.ensure_exists()

    text = path.read_text(encoding="utf-8")
    assert "filekit configuration file" in text
    assert "Last updated:" in text
    assert manager.load() == FileKitConfig()


def test_load_without_file_uses_defaults(tmp_path: Path) -> None:
    manager = _manager(tmp_path)

    config = manager.load()

    assert config.hashing.algorithm == "sha256"
    assert config.temp.directory is None
    assert not manager.config_path.exists()


def test_default_path_is_under_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))

    manager = ConfigManager()

    assert manager.config_path == tmp_path / ".filekit" / "config.yaml"


def test_precedence_file_env_overrides(tmp_path: Path) -> None:
    env = {
        "FILEKIT__HASHING__ALGORITHM": "sha1",
        "FILEKIT__TEMP__PREFIX": "env-",
        "UNRELATED": "ignored",
    }
    manager = _manager(tmp_path, env)
    manager.save({"hashing": {"algorithm": "md5", "chunk_size": 1024}, "temp": {"prefix": "file-"}})

    config = manager.load(overrides={"temp.prefix": "explicit-"})

    assert config.hashing.chunk_size == 1024
    assert config.hashing.algorithm == "sha1"
    assert config.temp.prefix == "explicit-"


def test_env_can_be_disabled(tmp_path: Path) -> None:
    manager = _manager(tmp_path, {"FILEKIT__LOGGING__LEVEL": "DEBUG"})

    assert manager.load().logging.level == "DEBUG"
    assert manager.load(include_env=False).logging.level == "WARNING"


def test_invalid_yaml_raises_config_error(tmp_path: Path) -> None:
    manager = _manager(tmp_path)
    manager.ensure_exists()

    manager.config_path.write_text("- not-a-mapping", encoding="utf-8")

    with pytest.raises(ConfigError):
        manager.load()


def test_unknown_keys_are_rejected(tmp_path: Path) -> None:
    manager = _manager(tmp_path)
    manager.save({"hashing": {"algo": "md5"}})

    with pytest.raises(ConfigError):
        manager.load()


def test_flatten_for_env_round_trips_defaults() -> None:
    flat = flatten_for_env(FileKitConfig())

    assert flat["FILEKIT__HASHING__ALGORITHM"] == "sha256"
    assert flat["FILEKIT__HASHING__CHUNK_SIZE"] == "65536"
    assert flat["FILEKIT__TEMP__DIRECTORY"] == "null"


def test_resolve_with_precedence_invalid_value_raises() -> None:
    with pytest.raises(ConfigError):
        resolve_with_precedence(
            defaults=FileKitConfig(),
            file_overrides={"hashing": {"chunk_size": "not-an-int"}},
        )
