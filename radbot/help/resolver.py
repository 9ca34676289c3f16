"""Look up commands by name or alias for ``help <command>``.

Lookup ignores preconditions: anyone may read the help page of a
command, even one they cannot run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union

import structlog

from ..commands.models import Command
from ..commands.registry import CommandRegistry

logger = structlog.get_logger("radbot.help")


@dataclass(frozen=True)
class Resolved:
    """One or more commands matched the query."""

    query: str
    matches: List[Command]


@dataclass(frozen=True)
class NotFound:
    """No command matched the query."""

    query: str

    @property
    def message(self) -> str:
        return f"Can't find '{self.query}' command"


Resolution = Union[Resolved, NotFound]


def resolve(registry: CommandRegistry, query: str) -> Resolution:
    """Resolve ``query`` to every command with a matching alias.

    Ambiguous queries return all matches; choosing between them is up
    to the caller.
    """
    found = registry.search(query)
    if not found.is_success:
        logger.info("help_lookup_failed", query=query)
        return NotFound(found.text)
    return Resolved(found.text, list(found.commands))
