"""
Diagnostics notifications raised by the single file generator.

Each generator owns one channel. Hosts subscribe to learn about generation
errors (also written into the output file) and about infrastructure errors
(reported only here).
"""

from typing import Callable, List

from ...logging_config import get_logger
from .models import GenerationError

logger = get_logger(__name__)

GenerationErrorHandler = Callable[[GenerationError], None]
OtherErrorHandler = Callable[[BaseException], None]


class DiagnosticsChannel:
    """Synchronous handler lists for the two kinds of diagnostics."""

    def __init__(self) -> None:
        self._generation_error_handlers: List[GenerationErrorHandler] = []
        self._other_error_handlers: List[OtherErrorHandler] = []

    def on_generation_error(self, handler: GenerationErrorHandler) -> GenerationErrorHandler:
        """Subscribe to generation errors. Usable as a decorator."""
        self._generation_error_handlers.append(handler)
        return handler

    def on_other_error(self, handler: OtherErrorHandler) -> OtherErrorHandler:
        """Subscribe to infrastructure errors. Usable as a decorator."""
        self._other_error_handlers.append(handler)
        return handler

    def remove_generation_error_handler(self, handler: GenerationErrorHandler) -> None:
        if handler in self._generation_error_handlers:
            self._generation_error_handlers.remove(handler)

    def remove_other_error_handler(self, handler: OtherErrorHandler) -> None:
        if handler in self._other_error_handlers:
            self._other_error_handlers.remove(handler)

    def emit_generation_error(self, error: GenerationError) -> None:
        """Notify every generation error handler, in subscription order."""
        for handler in list(self._generation_error_handlers):
            self._call(handler, error)

    def emit_other_error(self, exception: BaseException) -> None:
        """Notify every infrastructure error handler, in subscription order."""
        for handler in list(self._other_error_handlers):
            self._call(handler, exception)

    @staticmethod
    def _call(handler: Callable, payload) -> None:
        # A failing subscriber must not affect the generation or other subscribers
        try:
            handler(payload)
        except Exception:
            logger.exception("Diagnostics handler %r failed", handler)
