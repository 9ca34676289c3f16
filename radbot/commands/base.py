"""Base classes for command handler groups.

A handler group is a class extending BaseCommandHandler. It describes
its commands as a Module (names, aliases, parameters, preconditions,
bound async callables) and is registered into the shared
CommandRegistry with register_handlers().

Key classes:
    BotContext: Dependency container shared by all handlers.
    BaseCommandHandler: ABC that handler groups must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List

import structlog

from .preconditions import PreconditionEvaluator, RequireOwner

if TYPE_CHECKING:
    from ..config import Config
    from .models import Module
    from .registry import CommandRegistry

logger = structlog.get_logger("radbot.bot")


@dataclass
class BotContext:
    """Dependency container for command handlers.

    Gives handlers typed access to shared services without coupling
    them to the transport.
    """

    config: "Config"
    registry: "CommandRegistry"
    evaluator: PreconditionEvaluator = field(default_factory=PreconditionEvaluator)

    def require_owner(self) -> RequireOwner:
        """Owner guard bound to the configured owner ids."""
        return RequireOwner(owner_ids=self.config.owner_ids)


class BaseCommandHandler(ABC):
    """Abstract base class for command handler groups.

    Subclasses implement get_modules() to describe their commands.
    Each command handler receives (context, sink, args) and replies
    through the sink.

    Args:
        ctx: Shared BotContext dependency container.
    """

    def __init__(self, ctx: BotContext):
        self.ctx = ctx

    @abstractmethod
    def get_modules(self) -> List["Module"]:
        """Return the modules this group contributes, parents first."""
        ...


def register_handlers(registry: "CommandRegistry", *handlers: BaseCommandHandler) -> None:
    """Register every module of every handler group, in order."""
    for handler in handlers:
        for module in handler.get_modules():
            registry.add_module(module)
        logger.info("command_handler_registered", handler=type(handler).__name__)
