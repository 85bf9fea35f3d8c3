"""Query – list view configurations for the dashboard screens.

Each constant is a :class:`ListViewConfig` that a screen hands to
:class:`~teamsync.query.pipeline.ListQuery`.  Field names follow the stored
documents (camelCase), so records loaded straight from the document store
can be derived without renaming.
"""
from __future__ import annotations

from typing import Any

from teamsync.kernel.types import MISSING, Record, ValueKind, get_field, kind_of
from teamsync.query.filters import Bucket, bucket
from teamsync.query.state import SortDirection
from teamsync.query.view import CategoryConfig, ListViewConfig, options, sort_options

PRIORITY_RANK: dict[str, int] = {"high": 3, "medium": 2, "low": 1}

TEAM_SIZE_BUCKETS = (
    Bucket("small", upper=6),
    Bucket("medium", lower=6, upper=11),
    Bucket("large", lower=11),
)

PROGRESS_BUCKETS = (
    Bucket("low", upper=30),
    Bucket("medium", lower=30, upper=70),
    Bucket("high", lower=70),
)


def priority_rank(record: Record) -> Any:
    """Numeric rank of ``record.priority`` (High=3 ... Low=1); unknown is MISSING."""
    value = get_field(record, "priority")
    if kind_of(value) is not ValueKind.STRING:
        return MISSING
    return PRIORITY_RANK.get(value.casefold(), MISSING)


def member_count(record: Record) -> Any:
    members = get_field(record, "members")
    return len(members) if kind_of(members) is ValueKind.ARRAY else 0


def completion_rate(record: Record) -> Any:
    """``metrics.completionRate``, treating an absent rate as 0."""
    rate = get_field(record, "metrics.completionRate")
    return rate if kind_of(rate) is ValueKind.NUMBER else 0


def member_display_name(record: Record) -> Any:
    name = get_field(record, "userData.displayName")
    if kind_of(name) is ValueKind.STRING and name:
        return name
    return get_field(record, "userData.email")


def lowered(field: str):
    """Projection reading *field* lower-cased, for case-insensitive categories."""

    def _project(record: Record) -> Any:
        value = get_field(record, field)
        return value.lower() if kind_of(value) is ValueKind.STRING else value

    _project.__name__ = f"lowered_{field}"
    return _project


_PRIORITY_OPTIONS = options(("High", "High"), ("Medium", "Medium"), ("Low", "Low"))

TASKS = ListViewConfig(
    name="tasks",
    default_sort_field="dueDate",
    search_fields=("name", "description"),
    categories=(
        CategoryConfig("priority", "Priority", _PRIORITY_OPTIONS),
        CategoryConfig(
            "status",
            "Status",
            options(
                ("backlog", "Backlog"),
                ("in_progress", "In progress"),
                ("completed", "Completed"),
                ("revision", "Revision"),
                ("done", "Done"),
                ("blocked", "Blocked"),
                ("rejected", "Rejected"),
            ),
        ),
    ),
    sort_options=sort_options(("dueDate", "Due date"), ("priority", "Priority"), ("name", "Name")),
    sort_accessors={"priority": priority_rank},
)

TEAMS = ListViewConfig(
    name="teams",
    default_sort_field="name",
    search_fields=("name", "description"),
    categories=(
        CategoryConfig(
            "size",
            "Team size",
            options(("small", "Small (1-5)"), ("medium", "Medium (6-10)"), ("large", "Large (10+)")),
            projection=bucket("members", TEAM_SIZE_BUCKETS),
        ),
        CategoryConfig(
            "progress",
            "Progress",
            options(("low", "Low (<30%)"), ("medium", "Medium (30-70%)"), ("high", "High (>70%)")),
            projection=bucket(completion_rate, PROGRESS_BUCKETS),
        ),
    ),
    sort_options=sort_options(("name", "Name"), ("members", "Members"), ("progress", "Progress")),
    sort_accessors={"members": member_count, "progress": completion_rate},
)

NOTIFICATIONS = ListViewConfig(
    name="notifications",
    default_sort_field="timestamp",
    default_sort_direction=SortDirection.DESCENDING,
    search_fields=("action", "targetName", "details.message"),
    categories=(
        CategoryConfig(
            "category",
            "Category",
            options(
                ("project", "Projects"),
                ("task", "Tasks"),
                ("team", "Teams"),
                ("attendance", "Attendance"),
                ("payroll", "Payroll"),
                ("user", "Users"),
            ),
            projection=lambda record: get_field(record, "type"),
        ),
    ),
    sort_options=sort_options(("timestamp", "Date"), ("type", "Type")),
)

MEMBERS = ListViewConfig(
    name="members",
    default_sort_field="name",
    search_fields=("userData.displayName", "userData.email", "role"),
    categories=(
        CategoryConfig("role", "Role", projection=lowered("role")),
        CategoryConfig("status", "Status", projection=lowered("status")),
    ),
    sort_options=sort_options(("name", "Name"), ("role", "Role"), ("joinedAt", "Joined")),
    sort_accessors={"name": member_display_name},
)

USERS = ListViewConfig(
    name="users",
    default_sort_field="displayName",
    search_fields=("displayName", "email"),
    categories=(
        CategoryConfig("role", "Role", options(("admin", "Admin"), ("employee", "Employee"))),
        CategoryConfig("department", "Department"),
        CategoryConfig(
            "status",
            "Status",
            options(("active", "Active"), ("inactive", "Inactive")),
            default_values=frozenset({"active"}),
        ),
    ),
    sort_options=sort_options(("displayName", "Name"), ("role", "Role"), ("createdAt", "Created")),
)

PROJECTS = ListViewConfig(
    name="projects",
    default_sort_field="name",
    search_fields=("name", "description"),
    categories=(
        CategoryConfig(
            "status",
            "Status",
            options(
                ("planning", "Planning"),
                ("in-progress", "In progress"),
                ("completed", "Completed"),
                ("on-hold", "On hold"),
            ),
        ),
        CategoryConfig("priority", "Priority", options(("low", "Low"), ("medium", "Medium"), ("high", "High"))),
    ),
    sort_options=sort_options(("name", "Name"), ("deadline", "Deadline"), ("priority", "Priority")),
    sort_accessors={"priority": priority_rank},
)

ATTENDANCE = ListViewConfig(
    name="attendance",
    default_sort_field="date",
    default_sort_direction=SortDirection.DESCENDING,
    search_fields=("notes",),
    categories=(CategoryConfig("teamId", "Team", multiple=False),),
    sort_options=sort_options(("date", "Date"), ("hoursWorked", "Hours"), ("earnings", "Earnings")),
)

ALL_VIEWS: dict[str, ListViewConfig] = {
    view.name: view for view in (TASKS, TEAMS, NOTIFICATIONS, MEMBERS, USERS, PROJECTS, ATTENDANCE)
}

__all__ = [
    "ALL_VIEWS",
    "ATTENDANCE",
    "MEMBERS",
    "NOTIFICATIONS",
    "PRIORITY_RANK",
    "PROGRESS_BUCKETS",
    "PROJECTS",
    "TASKS",
    "TEAMS",
    "TEAM_SIZE_BUCKETS",
    "USERS",
    "completion_rate",
    "lowered",
    "member_count",
    "member_display_name",
    "priority_rank",
]
