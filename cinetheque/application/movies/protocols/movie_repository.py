"""Protocol for Movie repository."""

from typing import Protocol

from cinetheque.application.common.option import Option
from cinetheque.domain.common.value_objects.ids import MovieId
from cinetheque.domain.movies.entities.movie import Movie


class MovieRepositoryProtocol(Protocol):
    """Protocol for Movie repository operations."""

    def save(self, movie: Movie) -> Movie:
        """
        Insert a new movie or update an existing one.

        The movie's ``director_id`` back-reference is persisted as well.

        Returns:
            Movie entity with its assigned identity
        """
        ...

    def find_by_id(self, movie_id: MovieId) -> Option[Movie]: ...

    def find_all(self) -> list[Movie]: ...

    def delete_by_id(self, movie_id: MovieId) -> None: ...

    def find_by_title(self, title: str) -> list[Movie]:
        """Get all movies with exactly this title, in identity order."""
        ...
