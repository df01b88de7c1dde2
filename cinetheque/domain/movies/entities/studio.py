"""Studio entity."""

from dataclasses import dataclass, field

from cinetheque.domain.common.entity import Entity
from cinetheque.domain.common.exceptions import ValidationError
from cinetheque.domain.common.value_objects.ids import StudioId
from cinetheque.domain.movies.entities.director import Director


@dataclass
class Studio(Entity[StudioId]):
    """
    Studio entity.

    Studio names are unique across the catalogue. The studio owns the
    association with its directors; a director belongs to at most one studio.
    """

    # Identity
    id: StudioId

    # Content
    studio_name: str
    studio_founded_year: int | None

    # Relationships
    directors: list[Director] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.studio_name or not self.studio_name.strip():
            raise ValidationError("Studio name cannot be empty", field="studio_name")

    def employs(self, director: Director) -> bool:
        return any(d.id == director.id for d in self.directors)

    def add_director(self, director: Director) -> bool:
        """
        Append a director to the studio.

        Returns:
            False if the director was already part of the studio
        """
        if self.employs(director):
            return False
        self.directors.append(director)
        return True

    def update_details(self, studio_name: str, studio_founded_year: int | None) -> None:
        self.studio_name = studio_name.strip()
        self.studio_founded_year = studio_founded_year
        self.__post_init__()

    # Factory methods
    @classmethod
    def create(
        cls,
        studio_name: str,
        studio_founded_year: int | None = None,
        directors: list[Director] | None = None,
    ) -> "Studio":
        """Factory for creating a new studio."""
        return cls(
            id=StudioId.generate(),
            studio_name=studio_name.strip(),
            studio_founded_year=studio_founded_year,
            directors=list(directors or []),
        )

    @classmethod
    def create_with_id(
        cls,
        id: StudioId,
        studio_name: str,
        studio_founded_year: int | None,
        directors: list[Director] | None = None,
    ) -> "Studio":
        """Factory for reconstituting a studio from persistence."""
        return cls(
            id=id,
            studio_name=studio_name,
            studio_founded_year=studio_founded_year,
            directors=list(directors or []),
        )
