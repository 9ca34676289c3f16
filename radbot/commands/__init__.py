"""Command framework for radbot.

Provides the command data model, preconditions, the CommandRegistry,
and the BaseCommandHandler ABC for handler groups.
"""

from .base import BaseCommandHandler, BotContext, register_handlers
from .models import Command, InvocationContext, Module, Parameter
from .preconditions import (
    ContextType,
    Precondition,
    PreconditionEvaluator,
    PreconditionResult,
    RequireContext,
    RequireOwner,
    RequireUserPermission,
)
from .registry import CommandRegistry, SearchResult

__all__ = [
    "BaseCommandHandler",
    "BotContext",
    "Command",
    "CommandRegistry",
    "ContextType",
    "InvocationContext",
    "Module",
    "Parameter",
    "Precondition",
    "PreconditionEvaluator",
    "PreconditionResult",
    "RequireContext",
    "RequireOwner",
    "RequireUserPermission",
    "SearchResult",
    "register_handlers",
]
