"""Application service for studios."""

import structlog

from cinetheque.application.common.option import NOTHING, Option, Some
from cinetheque.application.common.unit_of_work import UnitOfWork
from cinetheque.application.movies.mappers.studio_record_mapper import StudioRecordMapper
from cinetheque.application.movies.protocols.director_repository import (
    DirectorRepositoryProtocol,
)
from cinetheque.application.movies.protocols.studio_repository import StudioRepositoryProtocol
from cinetheque.domain.common.value_objects.ids import DirectorId, StudioId
from cinetheque.domain.movies.entities.director import Director
from cinetheque.exceptions import AlreadyExistsError, InvalidError, NotFoundError
from cinetheque.infrastructure.movies.schemas import DirectorRecord, StudioRecord

logger = structlog.get_logger(__name__)


class StudioService:
    """Application service for studio operations."""

    def __init__(
        self,
        uow: UnitOfWork,
        studio_repository: StudioRepositoryProtocol,
        director_repository: DirectorRepositoryProtocol,
        studio_mapper: StudioRecordMapper,
    ) -> None:
        self.uow = uow
        self.studio_repository = studio_repository
        self.director_repository = director_repository
        self.studio_mapper = studio_mapper

    def create(self, record: StudioRecord) -> StudioRecord:
        """
        Create a studio employing the directors listed in the record.

        Args:
            record: The studio to create; directors are referenced by id

        Returns:
            The created studio with its assigned identity

        Raises:
            AlreadyExistsError: If a studio with the same name exists
            InvalidError: If a listed director has no id
            NotFoundError: If a listed director does not exist
        """
        with self.uow:
            if self.studio_repository.find_by_studio_name(record.studio_name).is_present:
                raise AlreadyExistsError("Studio", record.studio_name)

            directors = [self._resolve_director(d) for d in record.director_list]
            studio = self.studio_mapper.from_record(
                record.model_copy(update={"id": None, "director_list": []})
            )
            for director in directors:
                studio.add_director(director)
            studio = self.studio_repository.save(studio)

        logger.info("studio_created", studio_id=studio.id.value, studio_name=studio.studio_name)
        return self.studio_mapper.to_record(studio)

    def find_by_id(self, studio_id: StudioId) -> Option[StudioRecord]:
        return self.studio_repository.find_by_id(studio_id).map(self.studio_mapper.to_record)

    def find_all(self) -> list[StudioRecord]:
        return [self.studio_mapper.to_record(s) for s in self.studio_repository.find_all()]

    def update(self, record: StudioRecord) -> Option[StudioRecord]:
        """
        Update the name and founded year of an existing studio.

        Returns:
            The updated studio, or Nothing when no studio has the record's id

        Raises:
            InvalidError: If the record carries no id
            AlreadyExistsError: If the new name belongs to another studio
        """
        if record.id is None:
            raise InvalidError("id", "must not be null")
        if not StudioId.can_exist(record.id):
            logger.info("studio_update_missing", studio_id=record.id)
            return NOTHING

        with self.uow:
            found = self.studio_repository.find_by_id(StudioId(record.id))
            if not found.is_present:
                self.uow.mark_rollback_only()
                logger.info("studio_update_missing", studio_id=record.id)
                return NOTHING
            studio = found.unwrap()

            if record.studio_name != studio.studio_name:
                clash = self.studio_repository.find_by_studio_name(record.studio_name)
                if clash.is_present and clash.unwrap().id != studio.id:
                    raise AlreadyExistsError("Studio", record.studio_name)

            studio = self.studio_mapper.update_from(record, studio)
            studio = self.studio_repository.save(studio)

        logger.info("studio_updated", studio_id=studio.id.value)
        return Some(self.studio_mapper.to_record(studio))

    def delete(self, studio_id: StudioId) -> bool:
        """Delete a studio, detaching its directors. Returns False when it does not exist."""
        with self.uow:
            if not self.studio_repository.find_by_id(studio_id).is_present:
                self.uow.mark_rollback_only()
                return False
            self.studio_repository.delete_by_id(studio_id)

        logger.info("studio_deleted", studio_id=studio_id.value)
        return True

    def add_director(self, studio_id: StudioId, director_id: DirectorId) -> StudioRecord:
        """
        Add an existing director to an existing studio.

        A director belongs to at most one studio, so adding it here moves it
        out of any studio it worked for before.

        Raises:
            NotFoundError: If the studio or the director does not exist
        """
        with self.uow:
            found = self.studio_repository.find_by_id(studio_id)
            if not found.is_present:
                raise NotFoundError("Studio", studio_id.value)
            director = self.director_repository.find_by_id(director_id)
            if not director.is_present:
                raise NotFoundError("Director", director_id.value)

            studio = found.unwrap()
            studio.add_director(director.unwrap())
            studio = self.studio_repository.save(studio)

        logger.info(
            "director_added_to_studio", studio_id=studio.id.value, director_id=director_id.value
        )
        return self.studio_mapper.to_record(studio)

    def _resolve_director(self, record: DirectorRecord) -> Director:
        if record.id is None:
            raise InvalidError("directorList", "director id must not be null")
        if not DirectorId.can_exist(record.id):
            raise NotFoundError("Director", record.id)
        found = self.director_repository.find_by_id(DirectorId(record.id))
        if not found.is_present:
            raise NotFoundError("Director", record.id)
        return found.unwrap()
