"""Default message implementations for ResultMessagesProtocol.

Resolution order for default messages:
    1. Explicit override: object passed to ResultFactory / run_async
    2. Environment: SettingsResultMessages (RESULTKIT_* variables)
    3. Built-in: DefaultResultMessages

Usage:
    from resultkit.core.messages import DefaultResultMessages

    factory = ResultFactory(messages=DefaultResultMessages())
"""

from resultkit.core.config import Settings

DEFAULT_SUCCESS_MESSAGE = "Operation completed successfully."
DEFAULT_ERROR_MESSAGE_TEMPLATE = "An error occurred: {detail}"


class DefaultResultMessages:
    """Built-in wording, used when nothing else is configured."""

    def default_success_message(self) -> str:
        return DEFAULT_SUCCESS_MESSAGE

    def default_error_message(self, detail: str) -> str:
        return DEFAULT_ERROR_MESSAGE_TEMPLATE.format(detail=detail)


class SettingsResultMessages:
    """Wording taken from Settings, falling back to the built-in defaults.

    Args:
        settings: Loaded application settings.

    Example:
        >>> # RESULTKIT_SUCCESS_MESSAGE="Done."
        >>> messages = SettingsResultMessages(get_settings())
        >>> messages.default_success_message()
        'Done.'
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def default_success_message(self) -> str:
        return self._settings.success_message or DEFAULT_SUCCESS_MESSAGE

    def default_error_message(self, detail: str) -> str:
        template = self._settings.error_message_template or DEFAULT_ERROR_MESSAGE_TEMPLATE
        return template.format(detail=detail)
