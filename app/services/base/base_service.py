"""
Base service class providing common functionality for all services.
"""

from typing import Any

from app.core.logging import get_event_logger, get_logger


class BaseService:
    """
    Base service with common behaviors:
    - Shared operational logger
    - Structured logging of state changes
    """

    def __init__(self) -> None:
        self._logger = get_logger(f"app.services.{self.__class__.__name__}")
        self._events = get_event_logger(f"app.events.{self.__class__.__name__}")

    def _record_event(self, event: str, **fields: Any) -> None:
        """
        Log a state change as a structured event.

        Args:
            event: Event name, e.g. ``worker_created``
            **fields: Event payload
        """
        self._events.info(event, **fields)
