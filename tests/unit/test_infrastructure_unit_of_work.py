"""Unit tests for the unit of work adapters.

Tests cover:
- InMemoryUnitOfWork: commit, rollback-only, exception, staged reads
- Ambient binding via current_unit_of_work (sync, async, nested tasks)
- SqlAlchemyUnitOfWork with a mocked session factory
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from resultkit.core.errors import UnitOfWorkError
from resultkit.infrastructure.persistence import InMemoryUnitOfWork, current_unit_of_work
from resultkit.infrastructure.persistence.sqlalchemy_unit_of_work import (
    SqlAlchemyUnitOfWork,
)


@pytest.mark.unit
class TestInMemoryUnitOfWork:
    """Test the dictionary-backed unit of work."""

    def test_commits_staged_writes(self):
        """Test writes reach the store when the scope ends normally."""
        store: dict = {}

        with InMemoryUnitOfWork(store) as uow:
            uow.write("user:1", "alice")
            assert "user:1" not in store
            assert uow.read("user:1") == "alice"

        assert store == {"user:1": "alice"}
        assert uow.committed is True
        assert uow.rolled_back is False

    def test_rollback_only_discards_writes(self):
        """Test a marked unit of work rolls back instead of committing."""
        store = {"user:1": "alice"}

        with InMemoryUnitOfWork(store) as uow:
            uow.write("user:1", "mallory")
            uow.mark_rollback_only()

        assert store == {"user:1": "alice"}
        assert uow.committed is False
        assert uow.rolled_back is True

    def test_exception_rolls_back_and_propagates(self):
        """Test exceptions roll back and are re-raised."""
        store: dict = {}

        with pytest.raises(RuntimeError, match="boom"):
            with InMemoryUnitOfWork(store) as uow:
                uow.write("user:1", "alice")
                raise RuntimeError("boom")

        assert store == {}
        assert uow.rolled_back is True

    def test_read_falls_back_to_store(self):
        """Test reads see committed state and the default."""
        uow = InMemoryUnitOfWork({"a": 1})

        assert uow.read("a") == 1
        assert uow.read("missing", "fallback") == "fallback"

    def test_reentering_resets_rollback_flag(self):
        """Test each scope starts clean."""
        uow = InMemoryUnitOfWork()
        with uow:
            uow.mark_rollback_only()

        with uow:
            assert uow.is_rollback_only is False
            uow.write("k", "v")

        assert uow.store == {"k": "v"}

    def test_double_enter_raises(self):
        """Test a unit of work cannot be active twice."""
        uow = InMemoryUnitOfWork()

        with uow:
            with pytest.raises(UnitOfWorkError):
                uow.__enter__()

    @pytest.mark.asyncio
    async def test_async_context_manager(self):
        """Test `async with` behaves like `with`."""
        store: dict = {}

        async with InMemoryUnitOfWork(store) as uow:
            uow.write("k", "v")

        assert store == {"k": "v"}


@pytest.mark.unit
class TestAmbientUnitOfWork:
    """Test the ContextVar binding."""

    def test_no_unit_of_work_outside_scope(self):
        """Test nothing is bound by default."""
        assert current_unit_of_work() is None

    def test_bound_inside_scope_and_restored_after(self):
        """Test enter binds and exit unbinds."""
        with InMemoryUnitOfWork() as uow:
            assert current_unit_of_work() is uow
            assert uow.is_active is True

        assert current_unit_of_work() is None
        assert uow.is_active is False

    def test_nested_scopes_restore_outer(self):
        """Test the innermost unit of work wins and the outer comes back."""
        with InMemoryUnitOfWork() as outer:
            with InMemoryUnitOfWork() as inner:
                assert current_unit_of_work() is inner
            assert current_unit_of_work() is outer

    @pytest.mark.asyncio
    async def test_concurrent_tasks_see_their_own_unit_of_work(self):
        """Test each task has its own binding."""

        async def scope(name: str) -> tuple[str, bool]:
            async with InMemoryUnitOfWork() as uow:
                uow.write("name", name)
                await asyncio.sleep(0)
                return name, current_unit_of_work() is uow

        results = await asyncio.gather(scope("a"), scope("b"))

        assert results == [("a", True), ("b", True)]


def make_session_factory() -> tuple[MagicMock, AsyncMock]:
    session = AsyncMock()
    factory = MagicMock(return_value=session)
    return factory, session


@pytest.mark.unit
class TestSqlAlchemyUnitOfWork:
    """Test the AsyncSession-backed unit of work."""

    @pytest.mark.asyncio
    async def test_commits_on_normal_exit(self):
        """Test commit and close when nothing went wrong."""
        factory, session = make_session_factory()

        async with SqlAlchemyUnitOfWork(factory) as uow:
            assert uow.session is session
            assert current_unit_of_work() is uow

        session.commit.assert_awaited_once()
        session.rollback.assert_not_awaited()
        session.close.assert_awaited_once()
        assert current_unit_of_work() is None

    @pytest.mark.asyncio
    async def test_rolls_back_when_marked(self):
        """Test rollback-only prevents the commit."""
        factory, session = make_session_factory()

        async with SqlAlchemyUnitOfWork(factory) as uow:
            uow.mark_rollback_only()

        session.rollback.assert_awaited_once()
        session.commit.assert_not_awaited()
        session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_rolls_back_on_exception(self):
        """Test exceptions roll back and propagate."""
        factory, session = make_session_factory()

        with pytest.raises(RuntimeError):
            async with SqlAlchemyUnitOfWork(factory):
                raise RuntimeError("boom")

        session.rollback.assert_awaited_once()
        session.commit.assert_not_awaited()
        session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_failed_commit_rolls_back_and_reraises(self):
        """Test a commit error rolls back and surfaces."""
        factory, session = make_session_factory()
        session.commit.side_effect = RuntimeError("deadlock")

        with pytest.raises(RuntimeError, match="deadlock"):
            async with SqlAlchemyUnitOfWork(factory):
                pass

        session.rollback.assert_awaited_once()
        session.close.assert_awaited_once()

    def test_session_outside_scope_raises(self):
        """Test session access requires an active scope."""
        factory, _ = make_session_factory()

        with pytest.raises(UnitOfWorkError):
            SqlAlchemyUnitOfWork(factory).session
