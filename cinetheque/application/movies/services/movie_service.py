"""Application service for movies."""

import structlog

from cinetheque.application.common.option import NOTHING, Option, Some
from cinetheque.application.common.unit_of_work import UnitOfWork
from cinetheque.application.movies.mappers.movie_record_mapper import MovieRecordMapper
from cinetheque.application.movies.protocols.director_repository import (
    DirectorRepositoryProtocol,
)
from cinetheque.application.movies.protocols.movie_repository import MovieRepositoryProtocol
from cinetheque.domain.common.value_objects.ids import DirectorId, MovieId
from cinetheque.exceptions import InvalidError, NotFoundError
from cinetheque.infrastructure.movies.schemas import MovieRecord

logger = structlog.get_logger(__name__)


class MovieService:
    """Application service for movie operations."""

    def __init__(
        self,
        uow: UnitOfWork,
        movie_repository: MovieRepositoryProtocol,
        director_repository: DirectorRepositoryProtocol,
        movie_mapper: MovieRecordMapper,
    ) -> None:
        self.uow = uow
        self.movie_repository = movie_repository
        self.director_repository = director_repository
        self.movie_mapper = movie_mapper

    def create(self, record: MovieRecord) -> MovieRecord:
        """
        Create a movie, linking it to its director when one is given.

        Args:
            record: The movie to create; its ``id`` is ignored

        Returns:
            The created movie with its assigned identity

        Raises:
            NotFoundError: If ``directorId`` names a director that does not exist
        """
        with self.uow:
            movie = self.movie_mapper.from_record(record.model_copy(update={"id": None}))

            if record.director_id is not None:
                if not DirectorId.can_exist(record.director_id):
                    raise NotFoundError("Director", record.director_id)
                director_id = DirectorId(record.director_id)
                if not self.director_repository.find_by_id(director_id).is_present:
                    raise NotFoundError("Director", record.director_id)
                movie.assign_director(director_id)

            movie = self.movie_repository.save(movie)

        logger.info("movie_created", movie_id=movie.id.value, title=movie.title)
        return self.movie_mapper.to_record(movie)

    def find_by_id(self, movie_id: MovieId) -> Option[MovieRecord]:
        return self.movie_repository.find_by_id(movie_id).map(self.movie_mapper.to_record)

    def find_all(self) -> list[MovieRecord]:
        return [self.movie_mapper.to_record(m) for m in self.movie_repository.find_all()]

    def find_by_title(self, title: str) -> list[MovieRecord]:
        return [self.movie_mapper.to_record(m) for m in self.movie_repository.find_by_title(title)]

    def update(self, record: MovieRecord) -> Option[MovieRecord]:
        """
        Update the scalar fields of an existing movie.

        Returns:
            The updated movie, or Nothing when no movie has the record's id

        Raises:
            InvalidError: If the record carries no id
        """
        if record.id is None:
            raise InvalidError("id", "must not be null")
        if not MovieId.can_exist(record.id):
            logger.info("movie_update_missing", movie_id=record.id)
            return NOTHING

        with self.uow:
            found = self.movie_repository.find_by_id(MovieId(record.id))
            if not found.is_present:
                self.uow.mark_rollback_only()
                logger.info("movie_update_missing", movie_id=record.id)
                return NOTHING

            movie = self.movie_mapper.update_from(record, found.unwrap())
            movie = self.movie_repository.save(movie)

        logger.info("movie_updated", movie_id=movie.id.value)
        return Some(self.movie_mapper.to_record(movie))

    def delete(self, movie_id: MovieId) -> bool:
        """Delete a movie. Returns False when it does not exist."""
        with self.uow:
            if not self.movie_repository.find_by_id(movie_id).is_present:
                self.uow.mark_rollback_only()
                return False
            self.movie_repository.delete_by_id(movie_id)

        logger.info("movie_deleted", movie_id=movie_id.value)
        return True
