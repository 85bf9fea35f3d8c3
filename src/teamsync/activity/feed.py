"""Activity – role-aware dashboard feed.

Admins see the whole organisation's activity; everyone else sees only what
they did themselves.  Entries are newest first, using the same stable
comparator as the list views so equal timestamps keep their stored order.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Mapping

from teamsync.activity.formatter import (
    ID_PREVIEW_LENGTH,
    activity_display_message,
    notification_title,
    resolve_actor_name,
)
from teamsync.activity.models import Activity, Role, UserRef
from teamsync.activity.relative_time import format_relative_time
from teamsync.kernel.time import Clock
from teamsync.query.comparator import sort_records
from teamsync.query.state import SortDirection

DEFAULT_FEED_LIMIT = 10


@dataclasses.dataclass(frozen=True)
class FeedEntry:
    """One rendered feed row."""

    activity: Activity
    title: str
    message: str
    time: str
    unread: bool


def feed_caption(role: Role | str | None) -> str:
    if role == Role.ADMIN or role == Role.ADMIN.value:
        return "Your team's recent activities"
    return "Your recent activities"


def visible_activities(
    activities: Iterable[Activity],
    viewer: UserRef,
    *,
    limit: int | None = DEFAULT_FEED_LIMIT,
) -> list[Activity]:
    """Activities *viewer* may see, newest first, at most *limit* of them."""
    items = list(activities)
    if not viewer.is_admin:
        items = [activity for activity in items if activity.user_id == viewer.id]
    ordered = sort_records(items, "timestamp", SortDirection.DESCENDING)
    return ordered if limit is None else ordered[:limit]


def build_feed(
    activities: Iterable[Activity],
    viewer: UserRef,
    *,
    users: Mapping[str, UserRef] | None = None,
    clock: Clock | None = None,
    limit: int | None = DEFAULT_FEED_LIMIT,
    preview_length: int = ID_PREVIEW_LENGTH,
) -> list[FeedEntry]:
    """Render the feed rows *viewer* sees.

    *users* maps user ids to profiles for actor names; an actor missing from
    it falls back to ``details.actorName`` and then a truncated id.
    """
    entries: list[FeedEntry] = []
    for activity in visible_activities(activities, viewer, limit=limit):
        actor = resolve_actor_name(activity, viewer_id=viewer.id, users=users, preview_length=preview_length)
        entries.append(
            FeedEntry(
                activity=activity,
                title=notification_title(activity),
                message=activity_display_message(activity, actor, preview_length=preview_length),
                time=format_relative_time(activity.timestamp, clock=clock),
                unread=activity.is_unread,
            )
        )
    return entries


__all__ = ["DEFAULT_FEED_LIMIT", "FeedEntry", "build_feed", "feed_caption", "visible_activities"]
