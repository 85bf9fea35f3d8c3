"""Testing helpers – builders and (hypothesis-backed) strategies.

The strategies import hypothesis lazily, so importing this package does not
require it.
"""

from teamsync.testing.builders import ActivityBuilder, Builder, RecordBuilder, UserRefBuilder
from teamsync.testing.strategies import (
    field_value_strategy,
    query_state_strategy,
    record_strategy,
)

__all__ = [
    "ActivityBuilder",
    "Builder",
    "RecordBuilder",
    "UserRefBuilder",
    "field_value_strategy",
    "query_state_strategy",
    "record_strategy",
]
