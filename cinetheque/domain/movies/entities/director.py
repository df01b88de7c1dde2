"""Director entity."""

from dataclasses import dataclass, field
from datetime import date

from cinetheque.domain.common.entity import Entity
from cinetheque.domain.common.exceptions import ValidationError
from cinetheque.domain.common.value_objects.ids import DirectorId
from cinetheque.domain.movies.entities.movie import Movie
from cinetheque.domain.movies.entities.person import Person


@dataclass
class Director(Entity[DirectorId]):
    """
    Director entity.

    A director owns the ordered list of movies it directed. Every movie in
    ``movies_directed`` points back at this director through its
    ``director_id``.
    """

    # Identity
    id: DirectorId
    person: Person

    # Content
    oscar_count: int

    # Relationships
    movies_directed: list[Movie] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.oscar_count < 0:
            raise ValidationError(
                "Oscar count cannot be negative", field="oscar_count", value=self.oscar_count
            )

    # Query methods
    @property
    def first_name(self) -> str:
        return self.person.first_name

    @property
    def last_name(self) -> str:
        return self.person.last_name

    @property
    def birth_date(self) -> date | None:
        return self.person.birth_date

    def has_directed(self, movie: Movie) -> bool:
        """Check if a persisted movie is already in the directed list."""
        return movie.id.is_assigned and any(m.id == movie.id for m in self.movies_directed)

    # Command methods
    def direct(self, movie: Movie) -> None:
        """
        Add a movie to the directed list and set its back-reference.

        Calling it twice with the same persisted movie leaves a single entry.
        """
        movie.assign_director(self.id)
        if not self.has_directed(movie):
            self.movies_directed.append(movie)

    def update_details(self, person: Person, oscar_count: int) -> None:
        """Replace the person data and the oscar count."""
        self.person = person
        self.oscar_count = oscar_count
        self.__post_init__()

    # Factory methods
    @classmethod
    def create(
        cls,
        person: Person,
        oscar_count: int = 0,
        movies_directed: list[Movie] | None = None,
    ) -> "Director":
        """Factory for creating a new director."""
        return cls(
            id=DirectorId.generate(),
            person=person,
            oscar_count=oscar_count,
            movies_directed=list(movies_directed or []),
        )

    @classmethod
    def create_with_id(
        cls,
        id: DirectorId,
        person: Person,
        oscar_count: int,
        movies_directed: list[Movie] | None = None,
    ) -> "Director":
        """Factory for reconstituting a director from persistence."""
        return cls(
            id=id,
            person=person,
            oscar_count=oscar_count,
            movies_directed=list(movies_directed or []),
        )
