"""Activity – human-readable messages, actor names and notification titles."""
from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from teamsync.activity.models import Activity, ActivityActionType as A, ActivityType, UserRef

ID_PREVIEW_LENGTH = 6

TITLE_PREFIXES: dict[str, str] = {
    ActivityType.TASK.value: "Task",
    ActivityType.PAYROLL.value: "Payroll",
    ActivityType.PROJECT.value: "Project",
    ActivityType.TEAM.value: "Team",
    ActivityType.ATTENDANCE.value: "Attendance",
    ActivityType.USER.value: "User",
    "auth": "Auth",
    "earning": "Earning",
}
DEFAULT_TITLE_PREFIX = "Notification"

_Template = Callable[[str, str, Mapping[str, Any]], str]


def _detail(details: Mapping[str, Any], key: str, fallback: str) -> str:
    value = details.get(key)
    return str(value) if value else fallback


_TEMPLATES: dict[A, _Template] = {
    A.PROJECT_CREATED: lambda actor, target, d: f"{actor} created project: {target}",
    A.PROJECT_UPDATED: lambda actor, target, d: f"{actor} updated project: {target}",
    A.PROJECT_DELETED: lambda actor, target, d: f"{actor} deleted project: {target}",
    A.TASK_CREATED: lambda actor, target, d: f"{actor} created task: {target}",
    A.TASK_UPDATED: lambda actor, target, d: f"{actor} updated task: {target}",
    A.TASK_COMPLETED: lambda actor, target, d: f"{actor} completed task: {target}",
    A.TASK_ASSIGNED: lambda actor, target, d: (
        f"{actor} assigned task {target} to {_detail(d, 'assignedToName', 'someone')}"
    ),
    A.TASK_STATUS_CHANGED: lambda actor, target, d: (
        f"{actor} changed status of task {target} to {_detail(d, 'newStatus', 'a new status')}"
    ),
    A.TEAM_CREATED: lambda actor, target, d: f"{actor} created team: {target}",
    A.TEAM_UPDATED: lambda actor, target, d: f"{actor} updated team: {target}",
    A.TEAM_DELETED: lambda actor, target, d: f"{actor} deleted team: {target}",
    A.TEAM_MEMBER_ADDED: lambda actor, target, d: (
        f"{actor} added {_detail(d, 'addedMemberName', 'a new member')} to {target}"
    ),
    A.TEAM_MEMBER_REMOVED: lambda actor, target, d: (
        f"{actor} removed {_detail(d, 'removedMemberName', 'a member')} from {target}"
    ),
    A.TEAM_MEMBER_ROLE_UPDATED: lambda actor, target, d: (
        f"{actor} updated role for {_detail(d, 'memberName', 'a member')} in {target}"
    ),
    A.TEAM_MEMBER_STATUS_UPDATED: lambda actor, target, d: (
        f"{actor} updated status for {_detail(d, 'memberName', 'a member')} in {target}"
    ),
    A.TEAM_MEMBER_DETAILS_UPDATED: lambda actor, target, d: (
        f"{actor} updated details for {target} in {_detail(d, 'teamName', 'the team')}"
    ),
    A.TEAM_LEAD_CHANGED: lambda actor, target, d: (
        f"{actor} changed lead of {target} to {_detail(d, 'newLeadName', 'a new lead')}"
    ),
    A.ATTENDANCE_CHECK_IN: lambda actor, target, d: f"{actor} checked in",
    A.ATTENDANCE_CHECK_OUT: lambda actor, target, d: f"{actor} checked out",
    A.ATTENDANCE_RECORD_UPDATED: lambda actor, target, d: f"{actor} updated attendance record",
    A.PAYROLL_GENERATED: lambda actor, target, d: (
        f"{actor} generated payroll for {_detail(d, 'period', 'a period')}"
    ),
    A.PAYROLL_STATUS_UPDATED: lambda actor, target, d: (
        f"{actor} updated payroll status to {_detail(d, 'newStatus', 'a new status')}"
    ),
    A.USER_PROFILE_UPDATED: lambda actor, target, d: f"{actor} updated profile",
    A.GENERIC_UPDATE: lambda actor, target, d: f"{actor} updated {target}",
    A.GENERIC_CREATE: lambda actor, target, d: f"{actor} created {target}",
    A.GENERIC_DELETE: lambda actor, target, d: f"{actor} deleted {target}",
}


def describe_target(activity: Activity, *, preview_length: int = ID_PREVIEW_LENGTH) -> str:
    """``target_name``, else ``ID: <id prefix>``, else ``an item``."""
    if activity.target_name:
        return activity.target_name
    if activity.target_id:
        return f"ID: {activity.target_id[:preview_length]}"
    return "an item"


def activity_display_message(
    activity: Activity,
    actor_name: str,
    *,
    preview_length: int = ID_PREVIEW_LENGTH,
) -> str:
    """Format *activity* as a sentence with *actor_name* as its subject.

    Known action types use a fixed template.  Legacy free-form actions are
    echoed: a multi-word action is followed by the target name when there is
    one, a single word by the described target.
    """
    target = describe_target(activity, preview_length=preview_length)
    details = activity.details or {}
    action = A.coerce(activity.action)
    if isinstance(action, A):
        return _TEMPLATES[action](actor_name, target, details)
    if isinstance(action, str) and action:
        if " " in action:
            message = action
            if activity.target_name:
                message += f" {activity.target_name}"
            return f"{actor_name} {message}"
        return f"{actor_name} {action} {target}"
    return f"{actor_name} updated {target}"


def _email_local_part(email: str | None) -> str | None:
    if not email:
        return None
    return email.split("@", 1)[0] or None


def resolve_actor_name(
    activity: Activity,
    *,
    viewer_id: str | None = None,
    users: Mapping[str, UserRef] | None = None,
    preview_length: int = ID_PREVIEW_LENGTH,
) -> str:
    """Display name of the user who performed *activity*; never empty."""
    if viewer_id and activity.user_id == viewer_id:
        return "You"
    user = (users or {}).get(activity.user_id)
    if user is not None:
        name = user.display_name or _email_local_part(user.email)
        if name:
            return name
    actor_name = (activity.details or {}).get("actorName")
    if actor_name:
        return str(actor_name)
    if activity.user_id:
        return f"User {activity.user_id[:preview_length]}"
    return "Someone"


def _title_case(action: str) -> str:
    return " ".join(word[:1].upper() + word[1:].lower() for word in action.split("_"))


def notification_title(activity: Activity) -> str:
    """Type prefix plus the title-cased action.

    ``task_assigned`` on a task gives ``Task Assigned`` (the action already
    names the prefix); ``member_joined`` on a team gives
    ``Team: Member Joined``.
    """
    activity_type = activity.type.value if isinstance(activity.type, ActivityType) else str(activity.type)
    title = TITLE_PREFIXES.get(activity_type, DEFAULT_TITLE_PREFIX)
    action = activity.action.value if isinstance(activity.action, A) else str(activity.action or "")
    if not action:
        return title
    action_text = _title_case(action)
    return action_text if title in action_text else f"{title}: {action_text}"


__all__ = [
    "DEFAULT_TITLE_PREFIX",
    "ID_PREVIEW_LENGTH",
    "TITLE_PREFIXES",
    "activity_display_message",
    "describe_target",
    "notification_title",
    "resolve_actor_name",
]
