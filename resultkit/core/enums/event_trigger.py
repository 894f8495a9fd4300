"""Trigger policy for the event observer.

Decides which outcomes of an observed operation produce a ResultEvent.
"""

from enum import Enum


class EventTrigger(Enum):
    """When the event observer emits.

    ON_SUCCESS: Only when the operation returns a Success.
    ON_FAILURE: Only when the operation returns a Failure.
    BOTH: For every Result the operation returns.
    """

    ON_SUCCESS = "on_success"
    ON_FAILURE = "on_failure"
    BOTH = "both"

    def matches(self, is_success: bool) -> bool:
        """Check whether an outcome should trigger emission.

        Args:
            is_success: True when the observed Result is a Success.

        Returns:
            True if an event must be emitted for this outcome.
        """
        if self is EventTrigger.BOTH:
            return True
        if self is EventTrigger.ON_SUCCESS:
            return is_success
        return not is_success
