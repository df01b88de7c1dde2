"""Repository for Studio domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from cinetheque.application.common.option import Option, option_of
from cinetheque.domain.common.value_objects.ids import StudioId
from cinetheque.domain.movies.entities.director import Director
from cinetheque.domain.movies.entities.studio import Studio
from cinetheque.exceptions import AlreadyExistsError
from cinetheque.infrastructure.movies.mappers.studio_mapper import StudioMapper
from cinetheque.models import Director as DirectorORM
from cinetheque.models import Studio as StudioORM

logger = logging.getLogger(__name__)


class StudioRepository:
    """Repository for Studio domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = StudioMapper()

    def save(self, studio: Studio) -> Studio:
        """
        Save a studio entity and link its directors.

        Args:
            studio: The studio entity to save

        Returns:
            Saved studio entity with database-generated values

        Raises:
            AlreadyExistsError: If another studio already has this name
        """
        if studio.id.value == 0:
            orm_model = self.mapper.to_orm(studio)
            self.db.add(orm_model)
        else:
            orm_model = self._get(studio.id)
            if not orm_model:
                raise ValueError(f"Studio with id {studio.id.value} not found")
            self.mapper.to_orm(studio, orm_model)

        self._sync_directors(orm_model, studio.directors)

        try:
            self.db.flush()
        except IntegrityError as e:
            # The transaction is rolled back by the enclosing unit of work
            if "studio_name" in str(e.orig):
                raise AlreadyExistsError("Studio", studio.studio_name) from e
            raise

        logger.debug(f"Saved studio {studio.studio_name!r} (id={orm_model.id})")
        return self.mapper.to_domain(orm_model)

    def find_by_id(self, studio_id: StudioId) -> Option[Studio]:
        orm_model = self._get(studio_id)
        return option_of(self.mapper.to_domain(orm_model) if orm_model else None)

    def find_all(self) -> list[Studio]:
        stmt = select(StudioORM).order_by(StudioORM.id)
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_studio_name(self, studio_name: str) -> Option[Studio]:
        stmt = select(StudioORM).where(StudioORM.studio_name == studio_name)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return option_of(self.mapper.to_domain(orm_model) if orm_model else None)

    def delete_by_id(self, studio_id: StudioId) -> None:
        """Delete a studio. The ORM nulls ``studio_id`` on its directors."""
        orm_model = self._get(studio_id)
        if orm_model:
            self.db.delete(orm_model)
            self.db.flush()

    def _get(self, studio_id: StudioId) -> StudioORM | None:
        stmt = select(StudioORM).where(StudioORM.id == studio_id.value)
        return self.db.execute(stmt).scalar_one_or_none()

    def _sync_directors(self, orm_model: StudioORM, directors: list[Director]) -> None:
        linked_ids = {d.id for d in orm_model.directors}

        for director in directors:
            if director.id.value in linked_ids:
                continue
            director_orm = self.db.get(DirectorORM, director.id.value)
            if director_orm is None:
                raise ValueError(f"Director with id {director.id.value} not found")
            orm_model.directors.append(director_orm)
