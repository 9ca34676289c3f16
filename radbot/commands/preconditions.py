"""Command preconditions and their evaluation.

A precondition is an async guard checked against the caller's
InvocationContext. The help catalog only lists commands whose guards
all pass; the Permissions field of a command's help page lists the
RequireUserPermission guards of the command and its module lineage.

Key classes:
    PreconditionResult: Pass/fail outcome with an optional reason.
    Precondition: Base class for guards.
    RequireUserPermission: Caller must hold a named permission.
    RequireContext: Command only works in a guild or in DMs.
    RequireOwner: Command is reserved for bot owners.
    PreconditionEvaluator: Checks every guard that applies to a command.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, FrozenSet, Iterable, List

import structlog

from ..exceptions import PreconditionEvaluationError

if TYPE_CHECKING:
    from .models import Command, InvocationContext

logger = structlog.get_logger("radbot.commands")


@dataclass(frozen=True)
class PreconditionResult:
    """Outcome of a precondition check."""

    is_success: bool
    reason: str = ""

    @classmethod
    def success(cls) -> "PreconditionResult":
        return cls(True)

    @classmethod
    def failure(cls, reason: str) -> "PreconditionResult":
        return cls(False, reason)


class Precondition(ABC):
    """Base class for command guards.

    Subclasses implement check(). Guards are immutable values so the
    same instance can be shared between commands and modules.
    """

    @abstractmethod
    async def check(
        self, context: "InvocationContext", command: "Command"
    ) -> PreconditionResult:
        ...


@dataclass(frozen=True)
class RequireUserPermission(Precondition):
    """The caller must hold ``permission`` (e.g. "ManageMessages").

    Permissions only exist inside a guild; in direct messages the check
    fails.
    """

    permission: str

    async def check(self, context, command):
        if not context.in_guild:
            return PreconditionResult.failure("Command must be used in a guild channel.")
        if self.permission in context.permissions:
            return PreconditionResult.success()
        return PreconditionResult.failure(
            f"User requires guild permission {self.permission}."
        )

    def __str__(self) -> str:
        return self.permission


class ContextType(str, Enum):
    """Where a command may be invoked."""
    GUILD = "guild"
    DM = "dm"


@dataclass(frozen=True)
class RequireContext(Precondition):
    """The command may only run in the given kind of channel."""

    context_type: ContextType

    async def check(self, context, command):
        in_guild = context.in_guild
        if self.context_type is ContextType.GUILD and in_guild:
            return PreconditionResult.success()
        if self.context_type is ContextType.DM and not in_guild:
            return PreconditionResult.success()
        return PreconditionResult.failure(
            f"Invalid context for command; accepted contexts: {self.context_type.value}."
        )


@dataclass(frozen=True)
class RequireOwner(Precondition):
    """The caller must be a bot owner.

    A caller is an owner if the transport marked the context as such or
    if their user id appears in ``owner_ids`` (usually Config.owner_ids).
    """

    owner_ids: FrozenSet[str] = frozenset()

    async def check(self, context, command):
        if not context.user_id:
            raise PreconditionEvaluationError(
                "Context has no user id", precondition=type(self).__name__
            )
        if context.is_owner or context.user_id in self.owner_ids:
            return PreconditionResult.success()
        return PreconditionResult.failure("Command can only be run by the owner of the bot.")


def permission_requirements(
    preconditions: Iterable[Precondition],
) -> List[RequireUserPermission]:
    """Filter a precondition list down to permission requirements."""
    return [p for p in preconditions if isinstance(p, RequireUserPermission)]


class PreconditionEvaluator:
    """Checks whether a caller may run a command.

    Guards are gathered from the command's module lineage (root first)
    followed by the command's own guards. All of them must pass. A
    guard that raises counts as a failure and is logged here; callers
    never see the exception.
    """

    async def evaluate(
        self, command: "Command", context: "InvocationContext"
    ) -> PreconditionResult:
        for precondition in self._applicable(command):
            try:
                result = await precondition.check(context, command)
            except Exception as e:
                logger.warning(
                    "precondition_check_error",
                    command=command.primary_alias,
                    precondition=type(precondition).__name__,
                    error=str(e),
                )
                return PreconditionResult.failure(str(e))
            if not result.is_success:
                return result
        return PreconditionResult.success()

    @staticmethod
    def _applicable(command: "Command") -> List[Precondition]:
        guards: List[Precondition] = []
        if command.module is not None:
            lineage = list(command.module.iter_lineage())
            for module in reversed(lineage):
                guards.extend(module.preconditions)
        guards.extend(command.preconditions)
        return guards
