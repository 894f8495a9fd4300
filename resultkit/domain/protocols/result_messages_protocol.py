"""ResultMessagesProtocol: default message collaborator.

Result factories depend on this two-method contract only. Implementations:
    - DefaultResultMessages: built-in wording (resultkit/core/messages.py)
    - SettingsResultMessages: wording from environment via Settings
    - Any object with the same methods (explicit override)
"""

from typing import Protocol


class ResultMessagesProtocol(Protocol):
    """Supplies default messages for Result construction."""

    def default_success_message(self) -> str:
        """Message attached to a Success built without an explicit message."""
        ...

    def default_error_message(self, detail: str) -> str:
        """Message for a generic failure built from an exception detail.

        Args:
            detail: Description of what went wrong (usually str(exception)).
        """
        ...
