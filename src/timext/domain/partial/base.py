"""Completion protocol shared by the partial timestamp types."""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Self

from timext.domain.errors import ComponentError, ComponentOutOfRange, MissingComponent

if TYPE_CHECKING:
    from collections.abc import Callable


class Incomplete[C](ABC):
    """A value mirroring a complete type ``C`` with every component optional.

    ``into_complete`` and ``fallback`` raise :class:`ComponentError`; the ``checked_*``
    forms return ``None`` instead.
    """

    __slots__ = ()

    @classmethod
    @abstractmethod
    def from_complete(cls, complete: C) -> Self: ...

    @abstractmethod
    def into_complete(self) -> C: ...

    @abstractmethod
    def with_fallback(self, fallback: C) -> Self: ...

    def fallback(self, fallback: C) -> C:
        return self.with_fallback(fallback).into_complete()

    def checked_into_complete(self) -> C | None:
        try:
            return self.into_complete()
        except ComponentError:
            return None

    def checked_fallback(self, fallback: C) -> C | None:
        try:
            return self.fallback(fallback)
        except ComponentError:
            return None

    @property
    def is_complete(self) -> bool:
        return self.checked_into_complete() is not None


def check_range(name: str, value: object, low: int, high: int) -> int | None:
    """Validate a single optional component against its own domain."""

    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ComponentOutOfRange(name, f"`{name}` must be an integer, got {value!r}")
    if not low <= value <= high:
        raise ComponentOutOfRange(name, f"`{name}` must be in the range {low}..={high}")
    return int(value)


def require[T](name: str, value: T | None) -> T:
    if value is None:
        raise MissingComponent(name)
    return value


def build[T](component: str | None, factory: Callable[[], T]) -> T:
    """Run a validating constructor of the base library, translating its errors."""

    try:
        return factory()
    except (ValueError, OverflowError) as exc:
        raise ComponentOutOfRange(component, str(exc)) from exc


__all__ = ["Incomplete", "build", "check_range", "require"]
