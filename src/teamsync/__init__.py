"""
teamsync – list query engine and activity formatting for the Team Sync dashboard.

Import path convention::

    from teamsync.query import ListQuery, QueryState, derive
    from teamsync.query.screens import TASKS
    from teamsync.activity import activity_display_message, resolve_actor_name
    from teamsync.kernel.errors import ValidationError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
