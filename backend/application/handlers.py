"""Registration of application event handlers on an event bus."""

from domain.shared.ports.event_bus import IEventBus
from domain.user.core.events.user_created import UserCreated
from domain.user.core.events.user_updated import UserProfileUpdated
from domain.follow.core.events.follow_events import UserFollowed, UserUnfollowed
from application.user.handlers.user_created_handler import UserCreatedHandler
from application.user.handlers.user_profile_updated_handler import UserProfileUpdatedHandler
from application.follow.handlers.follow_events_handler import FollowEventsHandler


def register_event_handlers(event_bus: IEventBus) -> None:
    """Subscribe the logging handlers for user and follow events."""
    follow_handler = FollowEventsHandler()

    event_bus.subscribe(UserCreated, UserCreatedHandler().handle)
    event_bus.subscribe(UserProfileUpdated, UserProfileUpdatedHandler().handle)
    event_bus.subscribe(UserFollowed, follow_handler.on_followed)
    event_bus.subscribe(UserUnfollowed, follow_handler.on_unfollowed)
