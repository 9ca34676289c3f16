"""Configuration management for radbot.

Loads YAML settings (settings.yaml) and environment variables (.env)
into a Config object. Property getters provide safe access with
sensible defaults for the bot prefix, reply formatting (bullet symbol,
embed colour), owners, social links and logging.

Key classes:
    Config: Central configuration manager.

Key functions:
    get_config: Singleton accessor for the global Config instance.
"""

import os
from pathlib import Path
from typing import Dict, FrozenSet, List, Optional

import structlog
import yaml
from dotenv import load_dotenv

from .embeds import DEFAULT_EMBED_COLOR
from .exceptions import ConfigError

logger = structlog.get_logger("radbot.bot")

DEFAULT_SOCIAL_LINKS = {
    "Site": "https://radolyn.com",
    "Discord Server": "https://discord.gg/CGFFP2H",
    "GitHub": "https://github.com/Radolyn",
    "Twitter": "https://twitter.com/RadolynInc",
}


def parse_color(value) -> Optional[int]:
    """Parse "#7289DA", "0x7289DA", "7289DA" or an int into an RGB int."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if 0 <= value <= 0xFFFFFF else None
    if not isinstance(value, str):
        return None
    text = value.strip().lower()
    for prefix in ("#", "0x"):
        if text.startswith(prefix):
            text = text[len(prefix):]
    try:
        color = int(text, 16)
    except ValueError:
        return None
    return color if 0 <= color <= 0xFFFFFF else None


class Config:
    """Central configuration manager for radbot.

    Loads settings.yaml and .env from the config directory. Provides
    property accessors for every configurable subsystem. Read-only
    after __init__.

    Args:
        config_dir: Path to the config directory. Defaults to
            ``<repo_root>/config/``.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        if config_dir is None:
            config_dir = Path(__file__).parent.parent / "config"
        self.config_dir = Path(config_dir)

        env_file = self.config_dir / ".env"
        if env_file.exists():
            load_dotenv(env_file)

        self.settings = self._load_yaml("settings.yaml")

    def _load_yaml(self, filename: str) -> dict:
        """Load a YAML configuration file."""
        filepath = self.config_dir / filename
        if filepath.exists():
            with open(filepath, "r", encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
        return {}

    def validate(self, strict: bool = False) -> List[str]:
        """Validate settings at startup.

        Logs every problem found. By default the bot starts anyway and
        falls back to defaults; with ``strict=True`` the first problem
        raises ConfigError.

        Returns:
            The names of the invalid settings.
        """
        problems = []
        if "embed_color" in self.settings and parse_color(self.settings["embed_color"]) is None:
            problems.append("embed_color")
        raw_prefix = self.settings.get("prefix", "!")
        if not (isinstance(raw_prefix, str) and raw_prefix):
            problems.append("prefix")
        if not isinstance(self.settings.get("owner_ids", []), list):
            problems.append("owner_ids")
        if not isinstance(self.settings.get("social_links", {}), dict):
            problems.append("social_links")
        if not self.token:
            logger.warning("no_bot_token", msg="Set RADBOT_TOKEN or token in settings.yaml")

        for name in problems:
            logger.error("config_invalid_value", key=name, value=repr(self.settings.get(name)))
            if strict:
                raise ConfigError(f"Invalid value for '{name}'", setting_name=name)
        return problems

    @property
    def token(self) -> str:
        """Bot token. Env var RADBOT_TOKEN takes precedence."""
        return os.environ.get("RADBOT_TOKEN") or self.settings.get("token", "")

    @property
    def prefix(self) -> str:
        """Command prefix (default "!")."""
        prefix = self.settings.get("prefix", "!")
        return prefix if isinstance(prefix, str) and prefix else "!"

    @property
    def bullet_symbol(self) -> str:
        """Bullet used in help output lists (default "•")."""
        return str(self.settings.get("bullet_symbol", "•"))

    @property
    def embed_color(self) -> int:
        """Colour applied to every reply document."""
        configured = self.settings.get("embed_color")
        if configured is None:
            return DEFAULT_EMBED_COLOR
        color = parse_color(configured)
        return DEFAULT_EMBED_COLOR if color is None else color

    @property
    def owner_ids(self) -> FrozenSet[str]:
        """User ids allowed to run owner-only commands."""
        ids = self.settings.get("owner_ids", [])
        if not isinstance(ids, list):
            return frozenset()
        return frozenset(str(i) for i in ids)

    @property
    def social_links(self) -> Dict[str, str]:
        """Links shown by the social command, in configured order."""
        links = self.settings.get("social_links")
        if not isinstance(links, dict) or not links:
            return dict(DEFAULT_SOCIAL_LINKS)
        return {str(k): str(v) for k, v in links.items()}

    @property
    def log_dir(self) -> Path:
        """Get log directory path."""
        configured = self.settings.get("log_dir")
        if configured:
            return Path(configured).expanduser()
        return self.config_dir.parent / "logs"

    @property
    def logging_level(self) -> str:
        """Global log level (default INFO). Controls console and combined file."""
        log_config = self.settings.get("logging") or {}
        return log_config.get("level", "INFO")

    @property
    def logging_subsystem_levels(self) -> dict:
        """Per-subsystem log level overrides. E.g. {"help": "DEBUG"}."""
        log_config = self.settings.get("logging") or {}
        return log_config.get("subsystem_levels", {})

    @property
    def logging_max_file_size_mb(self) -> int:
        """Max size per log file in MB before rotation (default 10)."""
        log_config = self.settings.get("logging") or {}
        return log_config.get("max_file_size_mb", 10)

    @property
    def logging_backup_count(self) -> int:
        """Number of rotated log files to keep (default 5)."""
        log_config = self.settings.get("logging") or {}
        return log_config.get("backup_count", 5)


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global config instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config
