"""Helpers for publishing collected domain events."""

from typing import Any, Iterable, Optional

from domain.shared.ports.event_bus import IEventBus


async def publish_all(event_bus: Optional[IEventBus], events: Iterable[Any]) -> None:
    """Publish events in order. No-op when no bus is configured."""
    if event_bus is None:
        return

    for event in events:
        await event_bus.publish(event)
