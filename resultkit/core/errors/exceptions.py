"""Exceptions raised by resultkit itself.

These are programming errors (misuse of the API), not expected failures.
Expected failures are returned as Failure values and never raised.
"""


class ResultKitError(Exception):
    """Base class for exceptions raised by resultkit."""


class InvalidResultStateError(ResultKitError):
    """Accessed the wrong side of a Result.

    Raised when reading `data` from a Failure or `error` from a Success.
    """


class UnitOfWorkError(ResultKitError):
    """Unit of work used outside its lifecycle (e.g. entered twice)."""
