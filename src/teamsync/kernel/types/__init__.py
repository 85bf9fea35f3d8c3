"""Kernel types – value kinds and record field access."""
from teamsync.kernel.types.records import Record, field_items, get_field
from teamsync.kernel.types.values import (
    ARRAY_TYPES,
    MISSING,
    ValueKind,
    filter_token,
    is_timestamp_like,
    kind_of,
    to_datetime,
    to_epoch_millis,
)

__all__ = [
    "ARRAY_TYPES",
    "MISSING",
    "Record",
    "ValueKind",
    "field_items",
    "filter_token",
    "get_field",
    "is_timestamp_like",
    "kind_of",
    "to_datetime",
    "to_epoch_millis",
]
