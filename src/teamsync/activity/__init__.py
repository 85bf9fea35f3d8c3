"""Activity log formatting – public re-export surface."""

from teamsync.activity.feed import (
    DEFAULT_FEED_LIMIT,
    FeedEntry,
    build_feed,
    feed_caption,
    visible_activities,
)
from teamsync.activity.formatter import (
    DEFAULT_TITLE_PREFIX,
    ID_PREVIEW_LENGTH,
    TITLE_PREFIXES,
    activity_display_message,
    describe_target,
    notification_title,
    resolve_actor_name,
)
from teamsync.activity.models import Activity, ActivityActionType, ActivityType, Role, UserRef
from teamsync.activity.relative_time import format_relative_time

__all__ = [
    "Activity",
    "ActivityActionType",
    "ActivityType",
    "DEFAULT_FEED_LIMIT",
    "DEFAULT_TITLE_PREFIX",
    "FeedEntry",
    "ID_PREVIEW_LENGTH",
    "Role",
    "TITLE_PREFIXES",
    "UserRef",
    "activity_display_message",
    "build_feed",
    "describe_target",
    "feed_caption",
    "format_relative_time",
    "notification_title",
    "resolve_actor_name",
    "visible_activities",
]
