"""Mapper for DirectorRecord ↔ Director conversion."""

from cinetheque.application.movies.mappers.movie_record_mapper import MovieRecordMapper
from cinetheque.domain.common.value_objects.ids import DirectorId
from cinetheque.domain.movies.entities.director import Director
from cinetheque.domain.movies.entities.person import Person
from cinetheque.infrastructure.movies.schemas import DirectorRecord


class DirectorRecordMapper:
    """Mapper for DirectorRecord ↔ Director conversion."""

    def __init__(self, movie_mapper: MovieRecordMapper) -> None:
        self.movie_mapper = movie_mapper

    def to_record(self, director: Director) -> DirectorRecord:
        """Convert domain entity to transport record, movies included."""
        return DirectorRecord(
            id=director.id.value if director.id.is_assigned else None,
            first_name=director.first_name,
            last_name=director.last_name,
            birth_date=director.birth_date,
            oscar_count=director.oscar_count,
            movies_record=[self.movie_mapper.to_record(m) for m in director.movies_directed],
        )

    def from_record(self, record: DirectorRecord) -> Director:
        """
        Convert transport record to domain entity.

        Nested movies are translated but not linked back to the director.
        """
        return Director.create_with_id(
            id=DirectorId(record.id) if DirectorId.can_exist(record.id) else DirectorId.generate(),
            person=self._person_from(record),
            oscar_count=record.oscar_count,
            movies_directed=[self.movie_mapper.from_record(m) for m in record.movies_record],
        )

    def update_from(self, record: DirectorRecord, director: Director) -> Director:
        """Copy person data and oscar count onto an existing director."""
        director.update_details(person=self._person_from(record), oscar_count=record.oscar_count)
        return director

    @staticmethod
    def _person_from(record: DirectorRecord) -> Person:
        return Person(
            first_name=record.first_name,
            last_name=record.last_name,
            birth_date=record.birth_date,
        )
