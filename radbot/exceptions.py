"""Custom exception hierarchy for radbot.

Expected failures of the help subsystem (unknown command, a command the
caller cannot run) are explicit outcomes, not exceptions. The classes
here cover programming and environment errors: bad registrations,
preconditions that cannot decide, and invalid configuration.
"""

from typing import Any, Optional


class RadBotError(Exception):
    """Base exception for all radbot errors.

    Attributes:
        message: Human-readable error description.
        module: Originating module name (e.g. "commands.registry").
        context: Arbitrary key-value pairs for structured logging.
    """

    def __init__(
        self,
        message: str = "",
        *,
        module: Optional[str] = None,
        **context: Any,
    ) -> None:
        self.message = message
        self.module = module
        self.context = context
        super().__init__(message)

    def __str__(self) -> str:
        parts = [self.message or self.__class__.__name__]
        if self.module:
            parts.append(f"[module={self.module}]")
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f"({ctx})")
        return " ".join(parts)

    def __repr__(self) -> str:
        cls = self.__class__.__name__
        return f"{cls}({self.message!r}, module={self.module!r})"


# ---------------------------------------------------------------------------
# Command registry exceptions
# ---------------------------------------------------------------------------

class RegistryError(RadBotError):
    """Invalid module or command registration.

    Attributes:
        module_name: Name of the module being registered (if known).
    """

    def __init__(
        self,
        message: str = "",
        *,
        module_name: Optional[str] = None,
        module: Optional[str] = None,
        **context: Any,
    ) -> None:
        self.module_name = module_name
        super().__init__(message, module=module or "commands.registry", **context)


class PreconditionEvaluationError(RadBotError):
    """A precondition could not reach a pass/fail decision.

    Raised by precondition implementations when the invocation context
    lacks the data they need. PreconditionEvaluator converts it into a
    failed result, so the command is hidden rather than the call aborted.

    Attributes:
        precondition: Name of the precondition type that raised.
    """

    def __init__(
        self,
        message: str = "",
        *,
        precondition: Optional[str] = None,
        module: Optional[str] = None,
        **context: Any,
    ) -> None:
        self.precondition = precondition
        super().__init__(
            message, module=module or "commands.preconditions", **context
        )


# ---------------------------------------------------------------------------
# Configuration exceptions
# ---------------------------------------------------------------------------

class ConfigError(RadBotError):
    """Invalid or missing configuration."""

    def __init__(
        self,
        message: str = "",
        *,
        setting_name: Optional[str] = None,
        module: Optional[str] = None,
        **context: Any,
    ) -> None:
        self.setting_name = setting_name
        super().__init__(message, module=module or "config", **context)
