"""
Mediator: dispatches command and query objects to their handlers.

View models never talk to HTTP or the profile store directly. They send a
message to the mediator, which looks up the handler registered for the
message's type and awaits it. This keeps view models testable with a fake
mediator.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

logger = logging.getLogger(__name__)


class BaseHandler(ABC):
    """
    Abstract base class for message handlers.

    A handler serves exactly one message type.
    """

    @abstractmethod
    async def handle(self, message: Any) -> Any:
        """
        Handles a message and returns its result.

        Args:
            message: Command or query instance of the registered type

        Returns:
            Handler-specific result
        """
        pass


class Mediator:
    """Registry of handlers keyed by message type."""

    def __init__(self):
        self._handlers: dict[type, BaseHandler] = {}

    def register(self, message_type: type, handler: BaseHandler) -> None:
        """Registers (or replaces) the handler for a message type."""
        self._handlers[message_type] = handler
        logger.debug(f"Registered handler {type(handler).__name__} for {message_type.__name__}")

    def is_registered(self, message_type: type) -> bool:
        return message_type in self._handlers

    async def send(self, message: Any) -> Any:
        """
        Dispatches a message to its handler.

        Raises:
            LookupError: No handler is registered for the message type
        """
        handler = self._handlers.get(type(message))
        if handler is None:
            raise LookupError(f"No handler registered for {type(message).__name__}")

        return await handler.handle(message)
