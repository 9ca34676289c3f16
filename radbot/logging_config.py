"""Logging configuration for radbot.

structlog renders every event once through a shared processor chain and
hands it to stdlib logging, which routes it:

    root            → console (stdout)
      └─ radbot     → RotatingFileHandler → radbot.log
           ├─ radbot.bot
           ├─ radbot.commands
           └─ radbot.help

The subsystem loggers have no handlers of their own; they only carry a
level override (``logging.subsystem_levels`` in settings.yaml) so noisy
parts such as the help catalog can be turned up or down on their own.
"""

import logging
import logging.handlers
import re
import sys
from typing import Any, Dict

import structlog

SUBSYSTEMS = ("bot", "commands", "help")

LOGGER_PREFIX = "radbot"

LOG_FILE = "radbot.log"

# ---------------------------------------------------------------------------
# Secret sanitization
# ---------------------------------------------------------------------------

_SECRET_PATTERNS = [
    # Discord bot tokens: base64 user id . timestamp . HMAC
    re.compile(r"[MNO][A-Za-z\d_-]{23,27}\.[A-Za-z\d_-]{6}\.[A-Za-z\d_-]{27,40}"),
    # Bot authorization header values
    re.compile(r"(?:Bot|Bearer)\s+[A-Za-z0-9_./-]{20,}"),
]

_REDACTED = "***REDACTED***"


def _scrub_value(value: str) -> str:
    for pattern in _SECRET_PATTERNS:
        value = pattern.sub(_REDACTED, value)
    return value


def sanitize_secrets(
    logger: Any, method_name: str, event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """structlog processor that scrubs bot tokens.

    Walks all string values in the event dict (one level into lists,
    tuples and dicts) and replaces matches with a redacted placeholder.
    """
    for key, value in event_dict.items():
        if isinstance(value, str):
            event_dict[key] = _scrub_value(value)
        elif isinstance(value, (list, tuple)):
            event_dict[key] = type(value)(
                _scrub_value(v) if isinstance(v, str) else v
                for v in value
            )
        elif isinstance(value, dict):
            event_dict[key] = {
                k: _scrub_value(v) if isinstance(v, str) else v
                for k, v in value.items()
            }
    return event_dict


# Run for structlog events and for plain stdlib records alike
_SHARED_PROCESSORS = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    sanitize_secrets,
]


def _formatter(colors: bool) -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.dev.ConsoleRenderer(colors=colors),
        ],
    )


def setup_logging(config) -> None:
    """Configure structlog and the radbot logger tree from ``config``.

    Reads ``log_dir``, ``logging_level``, ``logging_subsystem_levels``,
    ``logging_max_file_size_mb`` and ``logging_backup_count``. If the
    log directory cannot be created, logging continues on the console
    only.
    """
    level = getattr(logging, config.logging_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()
    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(_formatter(colors=sys.stdout.isatty()))
    root_logger.addHandler(console)

    bot_logger = logging.getLogger(LOGGER_PREFIX)
    bot_logger.setLevel(level)
    bot_logger.handlers.clear()
    try:
        config.log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        bot_logger.warning("log_dir_unavailable: %s (%s)", config.log_dir, exc)
    else:
        file_handler = logging.handlers.RotatingFileHandler(
            config.log_dir / LOG_FILE,
            maxBytes=config.logging_max_file_size_mb * 1024 * 1024,
            backupCount=config.logging_backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(_formatter(colors=False))
        bot_logger.addHandler(file_handler)

    overrides = config.logging_subsystem_levels or {}
    for subsystem in SUBSYSTEMS:
        name = str(overrides.get(subsystem, "")).upper()
        sub_level = getattr(logging, name, level) if name else level
        logging.getLogger(f"{LOGGER_PREFIX}.{subsystem}").setLevel(sub_level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
