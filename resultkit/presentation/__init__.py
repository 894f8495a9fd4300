"""Presentation layer: Result → HTTP translation for FastAPI."""

from resultkit.presentation.exception_handlers import register_exception_handlers
from resultkit.presentation.response_builder import ResultResponseBuilder
from resultkit.presentation.response_wrapper import ResponseWrapper

__all__ = ["ResponseWrapper", "ResultResponseBuilder", "register_exception_handlers"]
