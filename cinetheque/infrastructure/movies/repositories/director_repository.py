"""Repository for Director domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from cinetheque.application.common.option import Option, option_of
from cinetheque.domain.common.value_objects.ids import DirectorId
from cinetheque.domain.movies.entities.director import Director
from cinetheque.domain.movies.entities.movie import Movie
from cinetheque.infrastructure.movies.mappers.director_mapper import DirectorMapper
from cinetheque.models import Director as DirectorORM
from cinetheque.models import Movie as MovieORM

logger = logging.getLogger(__name__)


class DirectorRepository:
    """Repository for Director domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = DirectorMapper()

    def save(self, director: Director) -> Director:
        """
        Save a director entity and its movie collection.

        New movies of the director are inserted; persisted ones are updated
        and relinked to the director. Movies missing from the entity's list
        are left alone.

        Args:
            director: The director entity to save

        Returns:
            Saved director entity with database-generated values
        """
        if director.id.value == 0:
            orm_model = self.mapper.to_orm(director)
            self.db.add(orm_model)
        else:
            orm_model = self._get(director.id)
            if not orm_model:
                raise ValueError(f"Director with id {director.id.value} not found")
            self.mapper.to_orm(director, orm_model)

        self._sync_movies(orm_model, director.movies_directed)
        self.db.flush()
        logger.debug(f"Saved director {orm_model.id} with {len(orm_model.movies)} movies")
        return self.mapper.to_domain(orm_model)

    def find_by_id(self, director_id: DirectorId) -> Option[Director]:
        orm_model = self._get(director_id)
        return option_of(self.mapper.to_domain(orm_model) if orm_model else None)

    def find_all(self) -> list[Director]:
        stmt = select(DirectorORM).order_by(DirectorORM.id)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_first_name_and_last_name(self, first_name: str, last_name: str) -> list[Director]:
        stmt = (
            select(DirectorORM)
            .where(
                DirectorORM.first_name == first_name,
                DirectorORM.last_name == last_name,
            )
            .order_by(DirectorORM.id)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def delete_by_id(self, director_id: DirectorId) -> None:
        """Delete a director. The ORM nulls ``director_id`` on its movies."""
        orm_model = self._get(director_id)
        if orm_model:
            self.db.delete(orm_model)
            self.db.flush()

    def _get(self, director_id: DirectorId) -> DirectorORM | None:
        stmt = select(DirectorORM).where(DirectorORM.id == director_id.value)
        return self.db.execute(stmt).scalar_one_or_none()

    def _sync_movies(self, orm_model: DirectorORM, movies: list[Movie]) -> None:
        movie_mapper = self.mapper.movie_mapper
        linked_ids = {m.id for m in orm_model.movies if m.id is not None}

        for movie in movies:
            if not movie.id.is_assigned:
                orm_model.movies.append(movie_mapper.to_orm(movie))
                continue

            movie_orm = self.db.get(MovieORM, movie.id.value)
            if movie_orm is None:
                raise ValueError(f"Movie with id {movie.id.value} not found")
            movie_mapper.to_orm(movie, movie_orm)
            if movie_orm.id not in linked_ids:
                orm_model.movies.append(movie_orm)
