"""Activity – record model for the activity log and notifications.

Activities are written by every mutating dashboard action and read back as
both the notification list and the dashboard feed.  ``action`` is normally an
:class:`ActivityActionType`; older documents carry free-form strings such as
``"updated the deadline of"``, which are kept verbatim.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from enum import Enum
from typing import Any

from teamsync.kernel.errors import UnknownActivityActionError


class ActivityType(str, Enum):
    PROJECT = "project"
    TASK = "task"
    TEAM = "team"
    ATTENDANCE = "attendance"
    PAYROLL = "payroll"
    USER = "user"


class ActivityActionType(str, Enum):
    # Project
    PROJECT_CREATED = "project_created"
    PROJECT_UPDATED = "project_updated"
    PROJECT_DELETED = "project_deleted"
    # Task
    TASK_CREATED = "task_created"
    TASK_UPDATED = "task_updated"
    TASK_COMPLETED = "task_completed"
    TASK_ASSIGNED = "task_assigned"
    TASK_STATUS_CHANGED = "task_status_changed"
    # Team
    TEAM_CREATED = "team_created"
    TEAM_UPDATED = "team_updated"
    TEAM_DELETED = "team_deleted"
    TEAM_MEMBER_ADDED = "team_member_added"
    TEAM_MEMBER_REMOVED = "team_member_removed"
    TEAM_MEMBER_ROLE_UPDATED = "team_member_role_updated"
    TEAM_MEMBER_STATUS_UPDATED = "team_member_status_updated"
    TEAM_MEMBER_DETAILS_UPDATED = "team_member_details_updated"
    TEAM_LEAD_CHANGED = "team_lead_changed"
    # Attendance
    ATTENDANCE_CHECK_IN = "attendance_check_in"
    ATTENDANCE_CHECK_OUT = "attendance_check_out"
    ATTENDANCE_RECORD_UPDATED = "attendance_record_updated"
    # Payroll
    PAYROLL_GENERATED = "payroll_generated"
    PAYROLL_STATUS_UPDATED = "payroll_status_updated"
    # User profile
    USER_PROFILE_UPDATED = "user_profile_updated"
    # Generic
    GENERIC_UPDATE = "generic_update"
    GENERIC_CREATE = "generic_create"
    GENERIC_DELETE = "generic_delete"

    @classmethod
    def coerce(cls, action: "ActivityActionType | str", *, strict: bool = False) -> "ActivityActionType | str":
        """Map *action* to a member; unknown strings pass through unless *strict*."""
        if isinstance(action, cls):
            return action
        try:
            return cls(action)
        except ValueError:
            if strict:
                raise UnknownActivityActionError(str(action)) from None
            return action


class Role(str, Enum):
    ADMIN = "admin"
    EMPLOYEE = "employee"


@dataclasses.dataclass(frozen=True)
class UserRef:
    """The parts of a user profile the activity surfaces need."""

    id: str
    display_name: str | None = None
    email: str | None = None
    role: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value

    @classmethod
    def from_mapping(cls, doc: Mapping[str, Any]) -> "UserRef":
        return cls(
            id=str(doc.get("id") or doc.get("uid") or ""),
            display_name=doc.get("displayName"),
            email=doc.get("email"),
            role=doc.get("role"),
        )


@dataclasses.dataclass(frozen=True)
class Activity:
    id: str
    user_id: str
    type: ActivityType | str
    action: ActivityActionType | str
    target_id: str | None = None
    target_name: str | None = None
    timestamp: Any = None
    team_id: str | None = None
    details: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    status: str | None = None

    @property
    def is_unread(self) -> bool:
        return self.status == "unread"

    @classmethod
    def from_mapping(cls, doc: Mapping[str, Any], *, strict: bool = False) -> "Activity":
        """Build from a stored document (camelCase keys).

        With *strict*, an action that is not an :class:`ActivityActionType`
        raises :class:`~teamsync.kernel.errors.UnknownActivityActionError`
        instead of being kept as a legacy string.
        """
        raw_type = doc.get("type", "")
        try:
            activity_type: ActivityType | str = ActivityType(raw_type)
        except ValueError:
            activity_type = raw_type
        return cls(
            id=str(doc.get("id", "")),
            user_id=str(doc.get("userId", "")),
            type=activity_type,
            action=ActivityActionType.coerce(doc.get("action", ""), strict=strict),
            target_id=doc.get("targetId"),
            target_name=doc.get("targetName"),
            timestamp=doc.get("timestamp"),
            team_id=doc.get("teamId"),
            details=dict(doc.get("details") or {}),
            status=doc.get("status"),
        )


__all__ = ["Activity", "ActivityActionType", "ActivityType", "Role", "UserRef"]
