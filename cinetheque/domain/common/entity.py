"""
Base class for Entities.

Entities have a distinct identity that runs through time. Two entities are
equal if they have the same identity, regardless of their attributes.

Example:
    @dataclass
    class Studio(Entity[StudioId]):
        id: StudioId
        studio_name: str
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .value_object import ValueObject

# Upper bound of the INTEGER primary key columns
MAX_ID = 2**31 - 1


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    The value 0 is the placeholder for an entity that has not been persisted
    yet; the database assigns the real identity on insert.
    """

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= MAX_ID:
            raise ValueError(f"{self.__class__.__name__} must be between 0 and {MAX_ID}")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def can_exist(cls, value: int | None) -> bool:
        """Whether a persisted entity could carry this identity."""
        return value is not None and 1 <= value <= MAX_ID

    @classmethod
    def generate(cls) -> Self:
        """Set placeholder id. Usually these are set by the database"""
        return cls(0)

    @property
    def is_assigned(self) -> bool:
        """Whether the persistence layer has assigned this identity."""
        return self.value != 0


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
