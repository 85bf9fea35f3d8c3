"""Specification pattern – composable record predicates.

The filter predicate set and the text matcher are both expressed as
specifications so a list view can combine them (``search & filters``) and
so callers may add screen-specific predicates without touching the engine.
"""

from __future__ import annotations

import abc
from collections.abc import Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class BaseSpecification(abc.ABC, Generic[T]):
    """Abstract record predicate; ``a & b`` builds an :class:`AllOf`.

    Example::

        class Overdue(BaseSpecification[dict]):
            def is_satisfied_by(self, candidate: dict) -> bool:
                return candidate["dueDate"] < today

        spec = Overdue() & CategorySpecification("status", {"in_progress"})
    """

    @abc.abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    def __call__(self, candidate: T) -> bool:
        return self.is_satisfied_by(candidate)

    def __and__(self, other: "BaseSpecification[T]") -> "AllOf[T]":
        return AllOf([self, other])


class AllOf(BaseSpecification[T]):
    """Conjunction; an empty conjunction is satisfied by every candidate."""

    def __init__(self, specs: Iterable[BaseSpecification[T]]) -> None:
        flat: list[BaseSpecification[T]] = []
        for spec in specs:
            flat.extend(spec.specs if isinstance(spec, AllOf) else [spec])
        self.specs: tuple[BaseSpecification[T], ...] = tuple(flat)

    def is_satisfied_by(self, candidate: T) -> bool:
        return all(spec.is_satisfied_by(candidate) for spec in self.specs)

    def __repr__(self) -> str:
        return f"AllOf({list(self.specs)!r})"


__all__ = ["AllOf", "BaseSpecification"]
