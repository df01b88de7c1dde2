"""Repository for Movie domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from cinetheque.application.common.option import Option, option_of
from cinetheque.domain.common.value_objects.ids import MovieId
from cinetheque.domain.movies.entities.movie import Movie
from cinetheque.infrastructure.movies.mappers.movie_mapper import MovieMapper
from cinetheque.models import Movie as MovieORM

logger = logging.getLogger(__name__)


class MovieRepository:
    """Repository for Movie domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = MovieMapper()

    def save(self, movie: Movie) -> Movie:
        """
        Save a movie entity.

        Args:
            movie: The movie entity to save

        Returns:
            Saved movie entity with database-generated values
        """
        if movie.id.value == 0:
            orm_model = self.mapper.to_orm(movie)
            self.db.add(orm_model)
            self.db.flush()
            logger.debug(f"Created movie {orm_model.title!r} (id={orm_model.id})")
        else:
            orm_model = self._get(movie.id)
            if not orm_model:
                raise ValueError(f"Movie with id {movie.id.value} not found")
            self.mapper.to_orm(movie, orm_model)
            self.db.flush()
            logger.debug(f"Updated movie {movie.id.value}")

        return self.mapper.to_domain(orm_model)

    def find_by_id(self, movie_id: MovieId) -> Option[Movie]:
        orm_model = self._get(movie_id)
        return option_of(self.mapper.to_domain(orm_model) if orm_model else None)

    def find_all(self) -> list[Movie]:
        stmt = select(MovieORM).order_by(MovieORM.id)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_title(self, title: str) -> list[Movie]:
        stmt = select(MovieORM).where(MovieORM.title == title).order_by(MovieORM.id)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def delete_by_id(self, movie_id: MovieId) -> None:
        orm_model = self._get(movie_id)
        if orm_model:
            self.db.delete(orm_model)
            self.db.flush()

    def _get(self, movie_id: MovieId) -> MovieORM | None:
        stmt = select(MovieORM).where(MovieORM.id == movie_id.value)
        return self.db.execute(stmt).scalar_one_or_none()
