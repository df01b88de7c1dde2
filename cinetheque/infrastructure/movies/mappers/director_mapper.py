"""Mapper for Director ORM ↔ Domain conversion."""

from cinetheque.domain.common.value_objects.ids import DirectorId
from cinetheque.domain.movies.entities.director import Director
from cinetheque.domain.movies.entities.person import Person
from cinetheque.infrastructure.movies.mappers.movie_mapper import MovieMapper
from cinetheque.models import Director as DirectorORM


class DirectorMapper:
    """Mapper for Director ORM ↔ Domain conversion."""

    def __init__(self, movie_mapper: MovieMapper | None = None) -> None:
        self.movie_mapper = movie_mapper or MovieMapper()

    def to_domain(self, orm_model: DirectorORM) -> Director:
        """Convert ORM model, with its movies, to domain entity."""
        return Director.create_with_id(
            id=DirectorId(orm_model.id),
            person=Person(
                first_name=orm_model.first_name,
                last_name=orm_model.last_name,
                birth_date=orm_model.birth_date,
            ),
            oscar_count=orm_model.oscar_count,
            movies_directed=[self.movie_mapper.to_domain(m) for m in orm_model.movies],
        )

    def to_orm(self, domain_entity: Director, orm_model: DirectorORM | None = None) -> DirectorORM:
        """
        Convert domain entity to ORM model.

        Only the director's own columns are written; the movie collection is
        synchronised by the repository.
        """
        if orm_model:
            # Update existing
            orm_model.first_name = domain_entity.first_name
            orm_model.last_name = domain_entity.last_name
            orm_model.birth_date = domain_entity.birth_date
            orm_model.oscar_count = domain_entity.oscar_count
            return orm_model

        # Create new
        return DirectorORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            first_name=domain_entity.first_name,
            last_name=domain_entity.last_name,
            birth_date=domain_entity.birth_date,
            oscar_count=domain_entity.oscar_count,
        )
