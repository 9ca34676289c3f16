"""Render the help page of a single command.

The page has four inline fields: Description, Parameters, Permissions
and Module. Permissions are collected from the command itself and from
every module above it.
"""

from __future__ import annotations

from typing import List, Optional

from ..commands.models import Command, Parameter
from ..commands.preconditions import permission_requirements
from ..embeds import Document, build_document
from .catalog import qualified_name

DEFAULT_BULLET = "•"


def format_parameter(parameter: Parameter, bullet: str = DEFAULT_BULLET) -> str:
    """One help line for ``parameter``, e.g. ``• user: Who (required)``."""
    line = f"{bullet} {parameter.name}: {parameter.summary} "
    line += "(optional)" if parameter.is_optional else "(required)"
    if parameter.is_remainder:
        line += " (remainder)"
    return line


def format_parameters(parameters: List[Parameter], bullet: str = DEFAULT_BULLET) -> str:
    if not parameters:
        return f"{bullet} no"
    return "\n".join(format_parameter(p, bullet) for p in parameters)


def collect_permissions(command: Command) -> List[str]:
    """Permissions needed to run ``command``, without duplicates.

    The command's own requirements come first, then those of its
    module, its module's parent, and so on up to the root.
    """
    sources = [command.preconditions]
    if command.module is not None:
        sources.extend(m.preconditions for m in command.module.iter_lineage())

    permissions: List[str] = []
    for preconditions in sources:
        for requirement in permission_requirements(preconditions):
            if requirement.permission not in permissions:
                permissions.append(requirement.permission)
    return permissions


def format_permissions(command: Command, bullet: str = DEFAULT_BULLET) -> str:
    permissions = collect_permissions(command)
    if not permissions:
        return f"{bullet} no"
    return "\n".join(f"{bullet} {p}" for p in permissions)


def render_command(
    command: Command,
    query: Optional[str] = None,
    bullet: str = DEFAULT_BULLET,
    color: Optional[int] = None,
) -> Document:
    """Build the help Document for ``command``.

    Args:
        command: A registered command.
        query: Text the user looked up; defaults to the primary alias.
        bullet: Bullet symbol for list lines.
        color: Embed colour.
    """
    module = qualified_name(command.module) if command.module is not None else ""
    return build_document(
        f"Help for '{query or command.primary_alias}' command",
        [
            ("Description:", command.summary or "-"),
            ("Parameters:", format_parameters(command.parameters, bullet)),
            ("Permissions:", format_permissions(command, bullet)),
            ("Module:", module or "-"),
        ],
        color=color,
    )
