"""Tests for configuration loading."""

import pytest

from radbot.config import DEFAULT_SOCIAL_LINKS, Config, parse_color
from radbot.embeds import DEFAULT_EMBED_COLOR
from radbot.exceptions import ConfigError


def _write_settings(tmp_path, text):
    (tmp_path / "settings.yaml").write_text(text, encoding="utf-8")
    return Config(config_dir=tmp_path)


def test_defaults_without_files(tmp_path, monkeypatch):
    monkeypatch.delenv("RADBOT_TOKEN", raising=False)
    config = Config(config_dir=tmp_path)
    assert config.prefix == "!"
    assert config.bullet_symbol == "•"
    assert config.embed_color == DEFAULT_EMBED_COLOR
    assert config.owner_ids == frozenset()
    assert config.social_links == DEFAULT_SOCIAL_LINKS
    assert config.token == ""
    assert config.log_dir == tmp_path.parent / "logs"


def test_settings_are_read(tmp_path):
    config = _write_settings(
        tmp_path,
        "prefix: '?'\n"
        "bullet_symbol: '-'\n"
        "embed_color: '#FF0000'\n"
        "owner_ids: [1, '2']\n"
        "social_links:\n"
        "  Site: https://example.com\n",
    )
    assert config.prefix == "?"
    assert config.bullet_symbol == "-"
    assert config.embed_color == 0xFF0000
    assert config.owner_ids == frozenset({"1", "2"})
    assert config.social_links == {"Site": "https://example.com"}
    assert config.validate() == []


def test_token_from_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("RADBOT_TOKEN", raising=False)
    (tmp_path / ".env").write_text("RADBOT_TOKEN=from-env\n", encoding="utf-8")
    config = Config(config_dir=tmp_path)
    assert config.token == "from-env"
    monkeypatch.delenv("RADBOT_TOKEN", raising=False)


def test_invalid_color_falls_back(tmp_path):
    config = _write_settings(tmp_path, "embed_color: not-a-color\n")
    assert config.embed_color == DEFAULT_EMBED_COLOR
    assert config.validate() == ["embed_color"]


def test_strict_validation_raises(tmp_path):
    config = _write_settings(tmp_path, "owner_ids: 5\n")
    with pytest.raises(ConfigError) as exc_info:
        config.validate(strict=True)
    assert exc_info.value.setting_name == "owner_ids"


def test_empty_prefix_is_reported(tmp_path):
    config = _write_settings(tmp_path, "prefix: ''\n")
    assert config.prefix == "!"
    assert config.validate() == ["prefix"]


def test_empty_logging_section_uses_defaults(tmp_path):
    config = _write_settings(tmp_path, "logging:\n")
    assert config.logging_level == "INFO"
    assert config.logging_subsystem_levels == {}
    assert config.logging_max_file_size_mb == 10
    assert config.logging_backup_count == 5


@pytest.mark.parametrize("value,expected", [
    ("#7289DA", 0x7289DA),
    ("0x00ff00", 0x00FF00),
    ("abcdef", 0xABCDEF),
    (255, 255),
    ("xyz", None),
    (0x1000000, None),
    (True, None),
])
def test_parse_color(value, expected):
    assert parse_color(value) == expected
