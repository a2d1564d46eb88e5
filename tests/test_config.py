from pathlib import Path

import pytest

from airportinfo.config import DEFAULT_API_URL, Config
from airportinfo.errors import ConfigError


def test_defaults_without_file(tmp_path: Path) -> None:
    conf = Config(str(tmp_path / "missing.yaml"))
    assert conf.api_key == ""
    assert conf.api_url == DEFAULT_API_URL
    assert conf.image_url is None
    assert conf.timeout is None


def test_reads_api_section(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(
        "api:\n"
        "  key: secret\n"
        "  url: https://api.example.test/doc7910\n"
        "  image_url: https://images.example.test\n"
        "  timeout: 15\n"
    )
    conf = Config(str(path))
    assert conf.client_params == {
        "api_key": "secret",
        "api_url": "https://api.example.test/doc7910",
        "image_url": "https://images.example.test",
        "timeout": 15,
    }


def test_partial_file_keeps_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("api:\n  key: secret\n")
    conf = Config(str(path))
    assert conf.api_key == "secret"
    assert conf.api_url == DEFAULT_API_URL


def test_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert Config(str(path)).api_url == DEFAULT_API_URL


def test_scalar_top_level_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("just a string\n")
    with pytest.raises(ConfigError, match="top level must be a mapping"):
        Config(str(path))


def test_list_api_section_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("api:\n  - key\n")
    with pytest.raises(ConfigError, match="'api' must be a mapping"):
        Config(str(path))
