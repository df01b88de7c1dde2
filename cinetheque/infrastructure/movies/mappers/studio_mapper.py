"""Mapper for Studio ORM ↔ Domain conversion."""

from cinetheque.domain.common.value_objects.ids import StudioId
from cinetheque.domain.movies.entities.studio import Studio
from cinetheque.infrastructure.movies.mappers.director_mapper import DirectorMapper
from cinetheque.models import Studio as StudioORM


class StudioMapper:
    """Mapper for Studio ORM ↔ Domain conversion."""

    def __init__(self, director_mapper: DirectorMapper | None = None) -> None:
        self.director_mapper = director_mapper or DirectorMapper()

    def to_domain(self, orm_model: StudioORM) -> Studio:
        """Convert ORM model, with its directors, to domain entity."""
        return Studio.create_with_id(
            id=StudioId(orm_model.id),
            studio_name=orm_model.studio_name,
            studio_founded_year=orm_model.studio_founded_year,
            directors=[self.director_mapper.to_domain(d) for d in orm_model.directors],
        )

    def to_orm(self, domain_entity: Studio, orm_model: StudioORM | None = None) -> StudioORM:
        """Convert domain entity to ORM model. Directors are linked by the repository."""
        if orm_model:
            # Update existing
            orm_model.studio_name = domain_entity.studio_name
            orm_model.studio_founded_year = domain_entity.studio_founded_year
            return orm_model

        # Create new
        return StudioORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            studio_name=domain_entity.studio_name,
            studio_founded_year=domain_entity.studio_founded_year,
        )
