"""Per-call invocation context built by the observers.

An InvocationContext exists only while an observer inspects the outcome of
the operation it wraps. It is never stored.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from resultkit.core.result import Result


@dataclass(frozen=True, kw_only=True, slots=True)
class InvocationContext:
    """Outcome of one call to an observed operation.

    Attributes:
        operation_name: __name__ of the wrapped callable.
        arguments: Positional arguments, in call order.
        keyword_arguments: Keyword arguments as passed.
        result: Result returned by the operation.
    """

    operation_name: str
    arguments: tuple[Any, ...]
    keyword_arguments: Mapping[str, Any] = field(default_factory=dict)
    result: Result[Any]

    @property
    def is_success(self) -> bool:
        return self.result.is_success
