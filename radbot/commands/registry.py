"""Command registry: ordered store of modules and their commands.

Modules are kept in registration order, which is also the order the
help catalog lists them in. Registering a module fills in each of its
commands' back reference and full alias list (group prefixes of the
module lineage + command name/alias).

Key classes:
    CommandRegistry: Module store with alias search.
    SearchResult: Outcome of CommandRegistry.search().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

import structlog

from ..exceptions import RegistryError
from .models import Command, Module

logger = structlog.get_logger("radbot.commands")


def _normalize(text: str) -> str:
    return " ".join(text.split()).lower()


def _group_prefix(module: Module, parent: Optional[Module]) -> str:
    lineage = [module]
    if parent is not None:
        lineage.extend(m for m in parent.iter_lineage() if m is not module)
    prefixes = [m.group for m in lineage if m.group]
    return " ".join(reversed(prefixes))


def build_aliases(
    command: Command, module: Module, parent: Optional[Module] = None
) -> List[str]:
    """Build the full alias list for a command registered in ``module``.

    Group prefixes are collected root-first along the module lineage,
    so a command "add" in group "role" under group "admin" becomes
    "admin role add". ``parent`` defaults to ``module.parent``.
    """
    prefix = _group_prefix(module, parent if parent is not None else module.parent)
    names = [command.name] + [a for a in command.extra_aliases if a != command.name]
    aliases = []
    for name in names:
        alias = f"{prefix} {name}".strip() if prefix else name.strip()
        if alias and alias not in aliases:
            aliases.append(alias)
    return aliases


@dataclass
class SearchResult:
    """Commands whose aliases match a query, plus the query text."""

    text: str
    commands: List[Command] = field(default_factory=list)

    @property
    def is_success(self) -> bool:
        return bool(self.commands)


class CommandRegistry:
    """Ordered store of command modules.

    The registry is written to at startup and treated as read-only
    while requests are processed.
    """

    def __init__(self):
        self._modules: List[Module] = []
        self._alias_map: Dict[str, List[Command]] = {}

    def add_module(self, module: Module, parent: Optional[Module] = None) -> Module:
        """Register a module and its commands.

        Args:
            module: Module to register.
            parent: Enclosing module; overrides ``module.parent`` when given.
                Must already be registered.

        Returns:
            The registered module.

        Raises:
            RegistryError: If the module is already registered, the parent
                is unknown, or a command ends up with no alias.
        """
        if any(m is module for m in self._modules):
            raise RegistryError("Module already registered", module_name=module.name)
        parent = parent if parent is not None else module.parent
        if parent is not None and not any(m is parent for m in self._modules):
            raise RegistryError(
                "Parent module is not registered",
                module_name=module.name,
                parent=parent.name,
            )

        # Nothing is written until every command has a usable alias list
        planned = []
        for command in module.commands:
            aliases = build_aliases(command, module, parent)
            if not aliases:
                raise RegistryError(
                    "Command has no alias", module_name=module.name, command=command.name
                )
            planned.append((command, aliases))

        module.parent = parent
        for command, aliases in planned:
            command.module = module
            command.aliases = aliases
            for alias in aliases:
                key = _normalize(alias)
                existing = self._alias_map.setdefault(key, [])
                if existing:
                    logger.warning(
                        "command_alias_conflict",
                        alias=alias,
                        module=module.name,
                    )
                existing.append(command)

        self._modules.append(module)
        logger.debug(
            "module_registered",
            module=module.name,
            commands=len(module.commands),
        )
        return module

    def add_submodule(self, parent: Module, module: Module) -> Module:
        """Register ``module`` nested under ``parent``."""
        return self.add_module(module, parent=parent)

    @property
    def modules(self) -> List[Module]:
        """Registered modules in registration order."""
        return list(self._modules)

    @property
    def commands(self) -> Iterator[Command]:
        """All commands, module by module, in registration order."""
        for module in self._modules:
            yield from module.commands

    def search(self, text: str) -> SearchResult:
        """Find every command with an alias matching ``text``.

        An alias matches when it equals the (case- and whitespace-
        normalized) text, or when the text starts with the alias followed
        by a space; the rest of the text would be the command's arguments.
        Longer alias matches come first; each command is listed once.
        """
        query = _normalize(text)
        result = SearchResult(text=text)
        if not query:
            return result

        words = query.split(" ")
        for end in range(len(words), 0, -1):
            candidate = " ".join(words[:end])
            for command in self._alias_map.get(candidate, []):
                if not any(c is command for c in result.commands):
                    result.commands.append(command)
        return result
