"""Immutability enforcement for error evidence.

Load errors are handed to callers for matching and reporting; they must not
be altered on the way (for example by middleware that "cleans up" messages).
This module provides the exceptions raised when that contract is broken.

Design:
    - NOT subclasses of LoadError (different error domain)
    - Carry diagnostic context for post-mortem analysis
    - Immutable after construction
    - @final decorator prevents subclassing

Hierarchy:
    DataIntegrityError (base - system failures)
    └─ ImmutabilityViolationError (mutation attempt on frozen object)

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

__all__ = [
    "PYTHON_EXCEPTION_ATTRS",
    "DataIntegrityError",
    "ImmutabilityViolationError",
    "IntegrityContext",
]

# Python's exception handling sets these attributes when propagating exceptions.
# __notes__ was added in Python 3.11 for Exception Groups (PEP 654/678).
PYTHON_EXCEPTION_ATTRS: frozenset[str] = frozenset(
    ("__traceback__", "__context__", "__cause__", "__suppress_context__", "__notes__")
)


@dataclass(frozen=True, slots=True)
class IntegrityContext:
    """Context for integrity error diagnosis.

    Attributes:
        component: System component where error occurred (errors, loader)
        operation: Operation being performed (setattr, delattr)
        key: Attribute or identifier involved (optional)
    """

    component: str
    operation: str
    key: str | None = None


class DataIntegrityError(Exception):
    """Base exception for all data integrity failures.

    NOT a LoadError subclass. These are programming errors or tampering,
    not load failures, and should propagate to the top level.

    Attributes:
        context: Structured diagnostic context for post-mortem analysis
    """

    __slots__ = ("_context", "_frozen")

    _context: IntegrityContext | None
    _frozen: bool

    def __init__(
        self,
        message: str,
        context: IntegrityContext | None = None,
    ) -> None:
        """Initialize DataIntegrityError.

        Args:
            message: Human-readable error description
            context: Structured diagnostic context (optional)
        """
        super().__init__(message)
        object.__setattr__(self, "_context", context)
        object.__setattr__(self, "_frozen", True)

    def __setattr__(self, name: str, value: object) -> None:
        """Reject all attribute mutations after initialization.

        Raises:
            ImmutabilityViolationError: If attempting to modify after construction
        """
        if name in PYTHON_EXCEPTION_ATTRS:
            object.__setattr__(self, name, value)
            return
        if getattr(self, "_frozen", False):
            msg = f"Cannot modify integrity error attribute: {name}"
            raise ImmutabilityViolationError(
                msg, IntegrityContext("integrity", "setattr", name)
            )
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        """Reject all attribute deletions.

        Raises:
            ImmutabilityViolationError: Always
        """
        msg = f"Cannot delete integrity error attribute: {name}"
        raise ImmutabilityViolationError(msg, IntegrityContext("integrity", "delattr", name))

    @property
    def context(self) -> IntegrityContext | None:
        """Structured diagnostic context."""
        return self._context

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        return f"{self.__class__.__name__}({self.args[0]!r}, context={self._context!r})"


@final
class ImmutabilityViolationError(DataIntegrityError):
    """Attempt to mutate an immutable object.

    Raised when code attempts to modify a constructed LoadError or
    DataIntegrityError. This typically indicates a programming error.
    """
