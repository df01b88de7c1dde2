"""Movie entity."""

from dataclasses import dataclass
from datetime import datetime

from cinetheque.domain.common.entity import Entity
from cinetheque.domain.common.exceptions import ValidationError
from cinetheque.domain.common.value_objects.ids import DirectorId, MovieId
from cinetheque.domain.movies.genre import Genre

MIN_RATING = 0.0
MAX_RATING = 10.0


@dataclass
class Movie(Entity[MovieId]):
    """
    Movie entity.

    ``director_id`` is a back-reference to the director whose
    ``movies_directed`` list contains this movie. It is None for a movie that
    has not been linked to a director yet.
    """

    # Identity
    id: MovieId

    # Content
    title: str
    release_date: datetime | None
    genre: Genre | None
    rating: float | None

    # Relationships
    director_id: DirectorId | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.title or not self.title.strip():
            raise ValidationError("Movie title cannot be empty", field="title")
        if self.rating is not None and not MIN_RATING <= self.rating <= MAX_RATING:
            raise ValidationError(
                f"Rating must be between {MIN_RATING:g} and {MAX_RATING:g}",
                field="rating",
                value=self.rating,
            )

    # Command methods
    def assign_director(self, director_id: DirectorId) -> None:
        """Set the back-reference to the directing director."""
        self.director_id = director_id

    def update_details(
        self,
        title: str,
        release_date: datetime | None,
        genre: Genre | None,
        rating: float | None,
    ) -> None:
        """Replace the scalar fields, re-checking the invariants."""
        self.title = title
        self.release_date = release_date
        self.genre = genre
        self.rating = rating
        self.__post_init__()

    # Factory methods
    @classmethod
    def create(
        cls,
        title: str,
        release_date: datetime | None = None,
        genre: Genre | None = None,
        rating: float | None = None,
    ) -> "Movie":
        """Factory for creating a new, unlinked movie."""
        return cls(
            id=MovieId.generate(),
            title=title,
            release_date=release_date,
            genre=genre,
            rating=rating,
        )

    @classmethod
    def create_with_id(
        cls,
        id: MovieId,
        title: str,
        release_date: datetime | None,
        genre: Genre | None,
        rating: float | None,
        director_id: DirectorId | None = None,
    ) -> "Movie":
        """Factory for reconstituting a movie from persistence."""
        return cls(
            id=id,
            title=title,
            release_date=release_date,
            genre=genre,
            rating=rating,
            director_id=director_id,
        )
