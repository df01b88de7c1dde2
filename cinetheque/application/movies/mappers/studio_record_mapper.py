"""Mapper for StudioRecord ↔ Studio conversion."""

from cinetheque.application.movies.mappers.director_record_mapper import DirectorRecordMapper
from cinetheque.domain.common.value_objects.ids import StudioId
from cinetheque.domain.movies.entities.studio import Studio
from cinetheque.infrastructure.movies.schemas import StudioRecord


class StudioRecordMapper:
    """Mapper for StudioRecord ↔ Studio conversion."""

    def __init__(self, director_mapper: DirectorRecordMapper) -> None:
        self.director_mapper = director_mapper

    def to_record(self, studio: Studio) -> StudioRecord:
        """Convert domain entity to transport record, directors included."""
        return StudioRecord(
            id=studio.id.value if studio.id.is_assigned else None,
            studio_name=studio.studio_name,
            studio_founded_year=studio.studio_founded_year,
            director_list=[self.director_mapper.to_record(d) for d in studio.directors],
        )

    def from_record(self, record: StudioRecord) -> Studio:
        """Convert transport record to domain entity."""
        return Studio.create_with_id(
            id=StudioId(record.id) if StudioId.can_exist(record.id) else StudioId.generate(),
            studio_name=record.studio_name,
            studio_founded_year=record.studio_founded_year,
            directors=[self.director_mapper.from_record(d) for d in record.director_list],
        )

    def update_from(self, record: StudioRecord, studio: Studio) -> Studio:
        """Copy name and founded year onto an existing studio."""
        studio.update_details(
            studio_name=record.studio_name,
            studio_founded_year=record.studio_founded_year,
        )
        return studio
