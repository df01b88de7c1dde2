"""Mapper for MovieRecord ↔ Movie conversion."""

from cinetheque.domain.common.value_objects.ids import MovieId
from cinetheque.domain.movies.entities.movie import Movie
from cinetheque.infrastructure.movies.schemas import MovieRecord


class MovieRecordMapper:
    """Mapper for MovieRecord ↔ Movie conversion."""

    def to_record(self, movie: Movie) -> MovieRecord:
        """Convert domain entity to transport record."""
        return MovieRecord(
            id=movie.id.value if movie.id.is_assigned else None,
            title=movie.title,
            release_date=movie.release_date,
            genre=movie.genre,
            rating=movie.rating,
            director_id=movie.director_id.value if movie.director_id else None,
        )

    def from_record(self, record: MovieRecord) -> Movie:
        """
        Convert transport record to domain entity.

        ``directorId`` is never copied: linking a movie to its director is the
        service's job, so the entity comes back unlinked.
        """
        return Movie.create_with_id(
            id=MovieId(record.id) if MovieId.can_exist(record.id) else MovieId.generate(),
            title=record.title,
            release_date=record.release_date,
            genre=record.genre,
            rating=record.rating,
        )

    def update_from(self, record: MovieRecord, movie: Movie) -> Movie:
        """Copy the scalar fields of the record onto an existing movie."""
        movie.update_details(
            title=record.title,
            release_date=record.release_date,
            genre=record.genre,
            rating=record.rating,
        )
        return movie
