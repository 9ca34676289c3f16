"""Catalog of the commands a caller can run, grouped by module.

The catalog is rebuilt for every ``help`` call. Commands whose
preconditions fail for the caller are left out, and modules left with
no visible command are dropped, so each caller sees a listing that
matches what they are allowed to do.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

import structlog

from ..commands.models import Command, InvocationContext, Module
from ..commands.preconditions import PreconditionEvaluator
from ..commands.registry import CommandRegistry

logger = structlog.get_logger("radbot.help")

SINGLE = "─"
TOP = "┌"
MIDDLE = "├"
BOTTOM = "└"


def qualified_name(module: Module) -> str:
    """Dot-joined module names from the root down to ``module``."""
    names = [m.name for m in module.iter_lineage()]
    return ".".join(reversed(names))


def format_alias_tree(aliases: Sequence[str]) -> str:
    """Render a command's aliases as a small tree, one alias per line.

    >>> print(format_alias_tree(["ban", "b", "hammer"]), end="")
    ┌ `ban`
    ├ `b`
    └ `hammer`
    """
    if len(aliases) == 1:
        return f"{SINGLE} `{aliases[0]}`\n"
    lines = [f"{TOP} `{aliases[0]}`"]
    lines.extend(f"{MIDDLE} `{alias}`" for alias in aliases[1:-1])
    lines.append(f"{BOTTOM} `{aliases[-1]}`")
    return "\n".join(lines) + "\n"


@dataclass
class CatalogEntry:
    """Visible commands of one module, as rendered alias trees."""

    name: str
    trees: List[str] = field(default_factory=list)

    @property
    def block(self) -> str:
        return "".join(self.trees)

    def add(self, tree: str) -> None:
        if tree not in self.trees:
            self.trees.append(tree)


async def _is_visible(
    evaluator: PreconditionEvaluator, command: Command, context: InvocationContext
) -> bool:
    try:
        result = await evaluator.evaluate(command, context)
    except Exception:
        return False
    return result.is_success


async def build_catalog(
    registry: CommandRegistry,
    context: InvocationContext,
    evaluator: Optional[PreconditionEvaluator] = None,
) -> List[CatalogEntry]:
    """Build the module-grouped listing of commands visible to ``context``.

    Precondition checks for all commands run concurrently; the result
    keeps registry order. Modules sharing a qualified name share one
    entry, and an alias tree already present in an entry is not
    repeated.

    Args:
        registry: Registered modules and commands.
        context: The caller.
        evaluator: Precondition evaluator; a default one is used if omitted.

    Returns:
        Entries for modules with at least one visible command.
    """
    evaluator = evaluator or PreconditionEvaluator()
    modules = registry.modules
    pairs = [(module, command) for module in modules for command in module.commands]
    visible = await asyncio.gather(
        *(_is_visible(evaluator, command, context) for _, command in pairs)
    )

    entries: Dict[str, CatalogEntry] = {}
    for module in modules:
        name = qualified_name(module)
        if name not in entries:
            entries[name] = CatalogEntry(name)

    for (module, command), ok in zip(pairs, visible):
        if ok:
            entries[qualified_name(module)].add(format_alias_tree(command.aliases))

    catalog = [entry for entry in entries.values() if entry.block.strip()]
    logger.debug(
        "help_catalog_built",
        user=context.user_id,
        modules=len(catalog),
        commands=sum(visible),
    )
    return catalog
