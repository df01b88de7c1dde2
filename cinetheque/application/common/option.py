"""
Option type for lookups that may find nothing.

A lookup never raises for a missing entity: it returns ``Nothing`` and lets
the caller decide whether absence is an error.

Example:
    def find_by_id(director_id: DirectorId) -> Option[DirectorRecord]:
        director = ...
        return Some(director) if director else NOTHING

    # Usage
    found = service.find_by_id(DirectorId(1))
    if found.is_present:
        print(found.unwrap().first_name)
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")  # Present value type
U = TypeVar("U")  # Mapped value type


@dataclass(frozen=True)
class Some(Generic[T]):
    """An Option holding a value."""

    value: T

    @property
    def is_present(self) -> bool:
        """Always True for Some."""
        return True

    def unwrap(self) -> T:
        """Get the value."""
        return self.value

    def value_or(self, default: T) -> T:
        """Get the value (default is ignored for Some)."""
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Some[U]":
        """Apply a function to the value."""
        return Some(fn(self.value))

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@dataclass(frozen=True)
class Nothing:
    """An empty Option."""

    @property
    def is_present(self) -> bool:
        """Always False for Nothing."""
        return False

    def unwrap(self) -> None:
        """Raises ValueError - Nothing has no value."""
        raise ValueError("Cannot get value from Nothing")

    def value_or(self, default: T) -> T:
        """Return the default value for Nothing."""
        return default

    def map(self, fn: Callable[[T], U]) -> "Nothing":
        """No-op for Nothing - returns self."""
        return self

    def __repr__(self) -> str:
        return "Nothing"


NOTHING = Nothing()


def option_of(value: T | None) -> "Option[T]":
    """Wrap a possibly-None value."""
    return NOTHING if value is None else Some(value)


# Type alias for Option - a union of Some and Nothing
Option = Union[Some[T], Nothing]  # noqa: UP007
