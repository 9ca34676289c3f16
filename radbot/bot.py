"""Bot assembly for radbot.

Wires configuration, logging, the command registry and the built-in
handler groups together. The transport (gateway connection, message
routing) lives outside this package and calls into the handlers with
an InvocationContext and a MessageSink.

Key classes:
    RadBot: Holds the shared BotContext and the built-in handlers.

Key functions:
    create_bot: Build a ready-to-use RadBot.
"""

from dataclasses import dataclass
from typing import Optional

import structlog

from . import __version__
from .commands.base import BotContext, register_handlers
from .commands.registry import CommandRegistry
from .commands.various import VariousCommandHandler
from .config import Config, get_config
from .help.handler import HelpCommandHandler
from .logging_config import setup_logging

logger = structlog.get_logger("radbot.bot")


@dataclass
class RadBot:
    """Registered handler groups sharing one BotContext."""

    ctx: BotContext
    help: HelpCommandHandler
    various: VariousCommandHandler

    @property
    def registry(self) -> CommandRegistry:
        return self.ctx.registry


def create_bot(config: Optional[Config] = None, configure_logging: bool = True) -> RadBot:
    """Build the bot's command registry and handlers.

    Args:
        config: Configuration to use; the global one if omitted.
        configure_logging: Whether to (re)configure logging from config.

    Returns:
        A RadBot whose registry holds the Help and Various modules.
    """
    config = config or get_config()
    if configure_logging:
        setup_logging(config)
    config.validate()

    ctx = BotContext(config=config, registry=CommandRegistry())
    bot = RadBot(
        ctx=ctx,
        help=HelpCommandHandler(ctx),
        various=VariousCommandHandler(ctx),
    )
    register_handlers(ctx.registry, bot.help, bot.various)
    logger.info(
        "radbot_ready",
        version=__version__,
        modules=len(ctx.registry.modules),
        prefix=config.prefix,
    )
    return bot
