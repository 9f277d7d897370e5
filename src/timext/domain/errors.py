"""Error definitions shared by the duration and partial timestamp types."""

from __future__ import annotations


class ArithmeticOverflow(OverflowError):
    """Raised when a month count does not fit in the signed 32-bit range."""


class ComponentError(ValueError):
    """Base class for failures while building or completing a partial value."""

    def __init__(self, component: str | None, message: str) -> None:
        super().__init__(message)
        self.component = component


class MissingComponent(ComponentError):
    """Raised when completion needs a component that is absent."""

    def __init__(self, component: str) -> None:
        super().__init__(component, f"component `{component}` does not exist")


class ComponentOutOfRange(ComponentError):
    """Raised when a component (or a combination of them) is not a valid value."""

    def __init__(self, component: str | None, message: str) -> None:
        super().__init__(component, message)


__all__ = [
    "ArithmeticOverflow",
    "ComponentError",
    "ComponentOutOfRange",
    "MissingComponent",
]
