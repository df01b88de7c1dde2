"""Mapper for Movie ORM ↔ Domain conversion."""

from cinetheque.domain.common.value_objects.ids import DirectorId, MovieId
from cinetheque.domain.movies.entities.movie import Movie
from cinetheque.models import Movie as MovieORM


class MovieMapper:
    """Mapper for Movie ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: MovieORM) -> Movie:
        """Convert ORM model to domain entity."""
        return Movie.create_with_id(
            id=MovieId(orm_model.id),
            title=orm_model.title,
            release_date=orm_model.release_date,
            genre=orm_model.genre,
            rating=orm_model.rating,
            director_id=DirectorId(orm_model.director_id) if orm_model.director_id else None,
        )

    def to_orm(self, domain_entity: Movie, orm_model: MovieORM | None = None) -> MovieORM:
        """Convert domain entity to ORM model."""
        director_id = (
            domain_entity.director_id.value
            if domain_entity.director_id and domain_entity.director_id.is_assigned
            else None
        )

        if orm_model:
            # Update existing
            orm_model.title = domain_entity.title
            orm_model.release_date = domain_entity.release_date
            orm_model.genre = domain_entity.genre
            orm_model.rating = domain_entity.rating
            if director_id:
                orm_model.director_id = director_id
            return orm_model

        # Create new
        return MovieORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            title=domain_entity.title,
            release_date=domain_entity.release_date,
            genre=domain_entity.genre,
            rating=domain_entity.rating,
            director_id=director_id,
        )
