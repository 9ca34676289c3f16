"""Shared fixtures for the radbot test suite."""

from typing import List

import pytest

from radbot.commands.models import Command, InvocationContext, Module, Parameter
from radbot.commands.preconditions import RequireUserPermission
from radbot.commands.registry import CommandRegistry
from radbot.embeds import Document


class RecordingSink:
    """MessageSink that keeps everything it was asked to send."""

    def __init__(self):
        self.documents: List[Document] = []
        self.texts: List[str] = []

    async def send_document(self, document: Document) -> None:
        self.documents.append(document)

    async def send_text(self, text: str) -> None:
        self.texts.append(text)


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def guild_context():
    """A guild member with no special permissions."""
    return InvocationContext(user_id="100", channel_id="1", guild_id="10")


@pytest.fixture
def mod_context():
    """A guild member who can manage messages and ban members."""
    return InvocationContext(
        user_id="200",
        channel_id="1",
        guild_id="10",
        permissions=frozenset({"ManageMessages", "BanMembers"}),
    )


@pytest.fixture
def registry():
    """Root -> Mid -> Leaf hierarchy plus an unrestricted Fun module.

    Root requires A, Mid requires B, and Leaf's ``purge`` command
    requires A and C.
    """
    reg = CommandRegistry()
    fun = Module(
        name="Fun",
        commands=[
            Command(name="roll", summary="Rolls a die.", extra_aliases=["dice", "d"]),
            Command(name="coin", summary="Flips a coin."),
        ],
    )
    root = Module(
        name="Root",
        preconditions=[RequireUserPermission("A")],
        commands=[Command(name="root", summary="Root command.")],
    )
    mid = Module(name="Mid", preconditions=[RequireUserPermission("B")])
    leaf = Module(
        name="Leaf",
        commands=[
            Command(
                name="purge",
                summary="Deletes messages.",
                parameters=[
                    Parameter("count", "How many messages"),
                    Parameter("reason", "Why", is_optional=True, is_remainder=True),
                ],
                preconditions=[RequireUserPermission("A"), RequireUserPermission("C")],
            ),
        ],
    )
    reg.add_module(fun)
    reg.add_module(root)
    reg.add_submodule(root, mid)
    reg.add_submodule(mid, leaf)
    return reg
