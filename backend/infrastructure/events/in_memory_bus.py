"""In-memory event bus implementation.

Provides an in-memory implementation of the IEventBus port.
Handlers are awaited one after another in subscription order.
"""

import logging
from typing import Dict, List, Type, Callable, Awaitable, Any
from domain.shared.events import DomainEvent
from domain.shared.ports.event_bus import TEvent

logger = logging.getLogger(__name__)


def _handler_name(handler: Callable[..., Any]) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)


class InMemoryEventBus:
    """
    In-memory implementation of IEventBus port.

    Thread safety: NOT thread-safe (single event loop only)
    Persistence: Handlers lost on process restart (in-memory only)
    Error handling: Failed handlers log errors but don't prevent other handlers

    Example:
        >>> bus = InMemoryEventBus()
        >>>
        >>> async def log_event(event: UserFollowed) -> None:
        ...     print(f"{event.follower_id} -> {event.following_id}")
        >>>
        >>> bus.subscribe(UserFollowed, log_event)
        >>> await bus.publish(UserFollowed.create(...))
    """

    def __init__(self) -> None:
        self._handlers: Dict[Type[DomainEvent], List[Callable[[Any], Awaitable[None]]]] = {}

    def subscribe(
        self,
        event_type: Type[TEvent],
        handler: Callable[[TEvent], Awaitable[None]],
    ) -> None:
        """
        Subscribe a handler to an event type.

        Note:
            - Same handler can be subscribed multiple times (will be called multiple times)
            - Handlers are called in subscription order
        """
        self._handlers.setdefault(event_type, []).append(handler)

        logger.debug(
            "Handler subscribed",
            extra={
                "event_type": event_type.__name__,
                "handler": _handler_name(handler),
            },
        )

    async def publish(self, event: TEvent) -> None:
        """
        Publish an event to all subscribed handlers.

        Dispatch is on the exact event type; handlers for a base class are
        not invoked. A failing handler is logged and the remaining handlers
        still run, so publish never raises on handler errors.
        """
        event_type = type(event)
        handlers = list(self._handlers.get(event_type, []))

        if not handlers:
            logger.debug(
                "No handlers for event",
                extra={"event_type": event_type.__name__},
            )
            return

        logger.debug(
            "Publishing event",
            extra={
                "event_type": event_type.__name__,
                "event_id": str(event.event_id),
                "handler_count": len(handlers),
            },
        )

        for handler in handlers:
            try:
                await handler(event)
            except Exception as e:
                logger.error(
                    "Event handler failed",
                    extra={
                        "event_type": event_type.__name__,
                        "event_id": str(event.event_id),
                        "handler": _handler_name(handler),
                        "error": str(e),
                    },
                    exc_info=True,
                )

    def unsubscribe(
        self,
        event_type: Type[TEvent],
        handler: Callable[[TEvent], Awaitable[None]],
    ) -> bool:
        """
        Unsubscribe a handler from an event type.

        Returns:
            True if handler was found and removed, False otherwise
        """
        handlers = self._handlers.get(event_type)
        if not handlers or handler not in handlers:
            return False

        handlers.remove(handler)
        logger.debug(
            "Handler unsubscribed",
            extra={
                "event_type": event_type.__name__,
                "handler": _handler_name(handler),
            },
        )
        return True

    def clear(self) -> None:
        """Remove all event subscriptions."""
        self._handlers.clear()
        logger.debug("All event handlers cleared")

    def get_handler_count(self, event_type: Type[TEvent]) -> int:
        """Number of handlers subscribed to an event type."""
        return len(self._handlers.get(event_type, []))
