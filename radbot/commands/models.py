"""Data model for registered commands.

Modules group commands and may nest under a parent module. The parent
link is a plain back reference: the CommandRegistry owns every module,
and lineage walks go through iter_lineage() so a malformed (cyclic)
hierarchy still terminates.

Key classes:
    Parameter: One declared command argument.
    Command: An invocable action with aliases and preconditions.
    Module: Named group of commands, optionally nested.
    InvocationContext: Who is asking, and where.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Awaitable, Callable, FrozenSet, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from .preconditions import Precondition


# Type alias for command handlers: async (context, args) -> Any
CommandCallback = Callable[..., Awaitable[Any]]


@dataclass(frozen=True)
class Parameter:
    """A declared command argument.

    Attributes:
        name: Argument name shown in help output.
        summary: One-line description.
        is_optional: Whether the argument may be omitted.
        is_remainder: Whether the argument consumes the rest of the input.
        default: Value used when an optional argument is omitted.
    """
    name: str
    summary: str = ""
    is_optional: bool = False
    is_remainder: bool = False
    default: Any = None


@dataclass(eq=False)
class Command:
    """A registered command.

    ``aliases`` is filled in by CommandRegistry.add_module() from the
    command name, its extra aliases and the group prefixes of its module
    lineage. The first alias is the canonical one.
    """
    name: str
    summary: str = ""
    parameters: List[Parameter] = field(default_factory=list)
    preconditions: List["Precondition"] = field(default_factory=list)
    extra_aliases: List[str] = field(default_factory=list)
    handler: Optional[CommandCallback] = field(default=None, repr=False)
    aliases: List[str] = field(default_factory=list)
    module: Optional["Module"] = field(default=None, repr=False)

    @property
    def primary_alias(self) -> str:
        return self.aliases[0] if self.aliases else self.name


@dataclass(eq=False)
class Module:
    """A named group of commands.

    Attributes:
        name: Display name, used for qualified names ("Admin.Roles").
        commands: Commands owned by this module, in registration order.
        preconditions: Guards applied to every command in this module
            and in its submodules.
        parent: Enclosing module, or None for a root module.
        group: Optional alias prefix ("role" turns "add" into "role add").
        summary: Optional module description.
    """
    name: str
    commands: List[Command] = field(default_factory=list)
    preconditions: List["Precondition"] = field(default_factory=list)
    parent: Optional["Module"] = field(default=None, repr=False)
    group: Optional[str] = None
    summary: str = ""

    def iter_lineage(self) -> Iterator["Module"]:
        """Yield this module, then its parent, up to the root.

        Stops early if a module would be visited twice, so a parent
        cycle cannot loop forever.
        """
        seen = set()
        module: Optional[Module] = self
        while module is not None and id(module) not in seen:
            seen.add(id(module))
            yield module
            module = module.parent


class InvocationContext(BaseModel):
    """Identity of the caller of a command.

    Supplied per call by the transport layer; the help subsystem only
    reads it while evaluating preconditions.
    """

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., description="Caller's user id")
    channel_id: str = Field(default="", description="Channel the message came from")
    guild_id: Optional[str] = Field(default=None, description="None in direct messages")
    permissions: FrozenSet[str] = Field(default_factory=frozenset)
    is_owner: bool = False

    @property
    def in_guild(self) -> bool:
        return self.guild_id is not None
