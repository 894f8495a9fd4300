"""Ambient unit of work.

The unit of work a call runs under is held in a ContextVar, so each asyncio
task and each thread sees its own. Adapters bind themselves on enter and
unbind on exit; the rollback observer reads the binding through
current_unit_of_work().

Usage:
    async with SqlAlchemyUnitOfWork(session_factory) as uow:
        result = await create_user(uow.session, command)
        # @rollback_on_failure on create_user marks uow on Failure
    # committed on Success, rolled back on Failure or exception
"""

from contextvars import ContextVar, Token

from resultkit.core.errors import UnitOfWorkError
from resultkit.domain.protocols.unit_of_work_protocol import UnitOfWorkProtocol

_current_unit_of_work: ContextVar[UnitOfWorkProtocol | None] = ContextVar(
    "current_unit_of_work", default=None
)


def current_unit_of_work() -> UnitOfWorkProtocol | None:
    """Return the unit of work bound to the current context.

    Returns:
        The innermost active unit of work, or None outside of one.
    """
    return _current_unit_of_work.get()


class BaseUnitOfWork:
    """Rollback-only flag and ambient binding shared by the adapters.

    Subclasses decide what "conclude" means (commit or roll back their
    backing store) and call _bind() / _unbind() around their scope.
    """

    def __init__(self) -> None:
        self._rollback_only = False
        self._token: Token[UnitOfWorkProtocol | None] | None = None

    @property
    def is_rollback_only(self) -> bool:
        return self._rollback_only

    @property
    def is_active(self) -> bool:
        """True between enter and exit."""
        return self._token is not None

    def mark_rollback_only(self) -> None:
        self._rollback_only = True

    def _bind(self) -> None:
        if self._token is not None:
            raise UnitOfWorkError(f"{type(self).__name__} is already active")
        self._rollback_only = False
        self._token = _current_unit_of_work.set(self)

    def _unbind(self) -> None:
        if self._token is None:
            raise UnitOfWorkError(f"{type(self).__name__} is not active")
        _current_unit_of_work.reset(self._token)
        self._token = None
