"""Application service for directors."""

import structlog

from cinetheque.application.common.option import NOTHING, Option, Some
from cinetheque.application.common.unit_of_work import UnitOfWork
from cinetheque.application.movies.mappers.director_record_mapper import DirectorRecordMapper
from cinetheque.application.movies.protocols.director_repository import (
    DirectorRepositoryProtocol,
)
from cinetheque.application.movies.services.movie_service import MovieService
from cinetheque.domain.common.value_objects.ids import DirectorId, MovieId
from cinetheque.exceptions import InvalidError, NotFoundError
from cinetheque.infrastructure.movies.schemas import DirectorRecord, MovieRecord

logger = structlog.get_logger(__name__)


class DirectorService:
    """Application service for director operations."""

    def __init__(
        self,
        uow: UnitOfWork,
        director_repository: DirectorRepositoryProtocol,
        director_mapper: DirectorRecordMapper,
        movie_service: MovieService,
    ) -> None:
        self.uow = uow
        self.director_repository = director_repository
        self.director_mapper = director_mapper
        self.movie_mapper = director_mapper.movie_mapper
        self.movie_service = movie_service

    def create(self, record: DirectorRecord) -> DirectorRecord:
        """
        Create a director together with the movies in its record.

        Client-supplied ids, on the director and on its movies, are ignored:
        every movie of the record is inserted as a new movie of this director.

        Args:
            record: The director to create

        Returns:
            The created director with its assigned identity
        """
        with self.uow:
            director = self.director_mapper.from_record(record)
            director.id = DirectorId.generate()
            for movie in director.movies_directed:
                movie.id = MovieId.generate()

            director = self.director_repository.save(director)

        logger.info(
            "director_created",
            director_id=director.id.value,
            movie_count=len(director.movies_directed),
        )
        return self.director_mapper.to_record(director)

    def find_by_id(self, director_id: DirectorId) -> Option[DirectorRecord]:
        return self.director_repository.find_by_id(director_id).map(self.director_mapper.to_record)

    def find_all(self) -> list[DirectorRecord]:
        return [self.director_mapper.to_record(d) for d in self.director_repository.find_all()]

    def find_by_names(self, first_name: str, last_name: str) -> list[DirectorRecord]:
        """Get all directors with exactly this first and last name."""
        directors = self.director_repository.find_by_first_name_and_last_name(
            first_name, last_name
        )
        return [self.director_mapper.to_record(d) for d in directors]

    def update(self, record: DirectorRecord) -> Option[DirectorRecord]:
        """
        Update the person data and oscar count of an existing director.

        The movie list is left untouched; movies are linked through
        ``add_film_to_director``.

        Returns:
            The updated director, or Nothing when no director has the record's id

        Raises:
            InvalidError: If the record carries no id
        """
        if record.id is None:
            raise InvalidError("id", "must not be null")
        if not DirectorId.can_exist(record.id):
            logger.info("director_update_missing", director_id=record.id)
            return NOTHING

        with self.uow:
            found = self.director_repository.find_by_id(DirectorId(record.id))
            if not found.is_present:
                self.uow.mark_rollback_only()
                logger.info("director_update_missing", director_id=record.id)
                return NOTHING

            director = self.director_mapper.update_from(record, found.unwrap())
            director = self.director_repository.save(director)

        logger.info("director_updated", director_id=director.id.value)
        return Some(self.director_mapper.to_record(director))

    def delete(self, director_id: DirectorId) -> bool:
        """Delete a director, detaching its movies. Returns False when it does not exist."""
        with self.uow:
            if not self.director_repository.find_by_id(director_id).is_present:
                self.uow.mark_rollback_only()
                return False
            self.director_repository.delete_by_id(director_id)

        logger.info("director_deleted", director_id=director_id.value)
        return True

    def add_film_to_director(self, director_id: DirectorId, record: MovieRecord) -> MovieRecord:
        """
        Create a movie and add it to a director's movies.

        The movie is created and linked in a single transaction.

        Args:
            director_id: The director that directed the movie
            record: The movie to create; its ``id`` and ``directorId`` are ignored

        Returns:
            The created movie with ``directorId`` set to the director

        Raises:
            NotFoundError: If the director does not exist
        """
        with self.uow:
            found = self.director_repository.find_by_id(director_id)
            if not found.is_present:
                raise NotFoundError("Director", director_id.value)
            director = found.unwrap()

            created = self.movie_service.create(record.model_copy(update={"director_id": None}))
            movie = self.movie_mapper.from_record(created)
            director.direct(movie)
            director = self.director_repository.save(director)

        linked = next(m for m in director.movies_directed if m.id == movie.id)
        logger.info("film_added_to_director", director_id=director.id.value, movie_id=linked.id.value)
        return self.movie_mapper.to_record(linked)
