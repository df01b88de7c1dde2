from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class DirectorId(EntityId):
    """Strongly-typed director identifier."""

    value: int


@dataclass(frozen=True)
class MovieId(EntityId):
    """Strongly-typed movie identifier."""

    value: int


@dataclass(frozen=True)
class StudioId(EntityId):
    """Strongly-typed studio identifier."""

    value: int
