"""Tests for precondition checks."""

import pytest

from radbot.commands.models import Command, InvocationContext, Module
from radbot.commands.preconditions import (
    ContextType,
    Precondition,
    PreconditionEvaluator,
    RequireContext,
    RequireOwner,
    RequireUserPermission,
    permission_requirements,
)
from radbot.exceptions import PreconditionEvaluationError

GUILD = InvocationContext(user_id="1", guild_id="10", permissions=frozenset({"KickMembers"}))
DM = InvocationContext(user_id="1")


@pytest.mark.asyncio
async def test_permission_granted():
    result = await RequireUserPermission("KickMembers").check(GUILD, None)
    assert result.is_success


@pytest.mark.asyncio
async def test_permission_missing():
    result = await RequireUserPermission("BanMembers").check(GUILD, None)
    assert not result.is_success
    assert "BanMembers" in result.reason


@pytest.mark.asyncio
async def test_permission_fails_in_dm():
    result = await RequireUserPermission("KickMembers").check(DM, None)
    assert not result.is_success


@pytest.mark.asyncio
async def test_require_context():
    assert (await RequireContext(ContextType.GUILD).check(GUILD, None)).is_success
    assert not (await RequireContext(ContextType.GUILD).check(DM, None)).is_success
    assert (await RequireContext(ContextType.DM).check(DM, None)).is_success


@pytest.mark.asyncio
async def test_require_owner_by_id_and_flag():
    guard = RequireOwner(owner_ids=frozenset({"42"}))
    assert (await guard.check(InvocationContext(user_id="42"), None)).is_success
    assert (await guard.check(InvocationContext(user_id="7", is_owner=True), None)).is_success
    assert not (await guard.check(InvocationContext(user_id="7"), None)).is_success


@pytest.mark.asyncio
async def test_require_owner_raises_without_user():
    with pytest.raises(PreconditionEvaluationError):
        await RequireOwner().check(InvocationContext(user_id=""), None)


def test_permission_requirements_are_value_objects():
    assert RequireUserPermission("A") == RequireUserPermission("A")
    assert len({RequireUserPermission("A"), RequireUserPermission("A")}) == 1
    mixed = [RequireUserPermission("A"), RequireContext(ContextType.GUILD), RequireOwner()]
    assert permission_requirements(mixed) == [RequireUserPermission("A")]


def test_guard_without_check_cannot_be_created():
    class Incomplete(Precondition):
        pass

    with pytest.raises(TypeError):
        Precondition()
    with pytest.raises(TypeError):
        Incomplete()


@pytest.mark.asyncio
async def test_evaluator_applies_module_lineage_guards():
    root = Module(name="Root", preconditions=[RequireUserPermission("BanMembers")])
    child = Module(name="Child", parent=root)
    cmd = Command(name="x", module=child)
    result = await PreconditionEvaluator().evaluate(cmd, GUILD)
    assert not result.is_success


@pytest.mark.asyncio
async def test_evaluator_turns_errors_into_failure():
    cmd = Command(name="x", aliases=["x"], preconditions=[RequireOwner()])
    result = await PreconditionEvaluator().evaluate(cmd, InvocationContext(user_id=""))
    assert not result.is_success
    assert "no user id" in result.reason


@pytest.mark.asyncio
async def test_evaluator_passes_unguarded_command():
    result = await PreconditionEvaluator().evaluate(Command(name="x"), DM)
    assert result.is_success
