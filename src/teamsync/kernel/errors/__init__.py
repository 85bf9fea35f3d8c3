"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    TeamSyncError                      (base.py)
    ├── DomainError                    (domain.py)
    │   ├── ValidationError
    │   │   └── InvalidQueryStateError
    │   └── UnknownActivityActionError
    └── ConfigError                    (teamsync.config.validation)
"""

from teamsync.kernel.errors.base import TeamSyncError
from teamsync.kernel.errors.domain import (
    DomainError,
    InvalidQueryStateError,
    UnknownActivityActionError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "InvalidQueryStateError",
    "TeamSyncError",
    "UnknownActivityActionError",
    "ValidationError",
]
