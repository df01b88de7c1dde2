"""SQLAlchemy implementation of the Unit of Work."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from cinetheque.application.common.unit_of_work import UnitOfWork
from cinetheque.exceptions import AlreadyExistsError, InternalError
from cinetheque.infrastructure.common.deadline import deadline_passed

logger = logging.getLogger(__name__)

# Keys in Session.info shared by every unit of work bound to the same session
DEPTH_KEY = "uow_depth"
ROLLBACK_ONLY_KEY = "uow_rollback_only"


class SQLAlchemyUnitOfWork(UnitOfWork):
    """
    Unit of work over a request-scoped SQLAlchemy session.

    Scopes opened on the same session nest: the nesting depth lives in
    ``Session.info`` so that a service calling another service commits once,
    when the outermost scope exits. A failure in an inner scope marks the
    whole transaction rollback-only. A commit reached after the request
    deadline rolls back instead and raises ``InternalError``.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    @property
    def depth(self) -> int:
        return int(self.session.info.get(DEPTH_KEY, 0))

    def begin(self) -> None:
        self.session.info[DEPTH_KEY] = self.depth + 1

    def commit(self) -> None:
        if self._leave() > 0:
            return

        if self.session.info.pop(ROLLBACK_ONLY_KEY, False):
            self.session.rollback()
            return

        if deadline_passed():
            self.session.rollback()
            logger.warning("Request deadline passed before commit, rolled back")
            raise InternalError()

        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.warning(f"Commit rejected by a database constraint: {e.orig}")
            raise AlreadyExistsError("Resource") from e

    def rollback(self) -> None:
        if self._leave() > 0:
            self.mark_rollback_only()
            return

        self.session.info.pop(ROLLBACK_ONLY_KEY, None)
        self.session.rollback()

    def mark_rollback_only(self) -> None:
        self.session.info[ROLLBACK_ONLY_KEY] = True

    def _leave(self) -> int:
        depth = max(self.depth - 1, 0)
        self.session.info[DEPTH_KEY] = depth
        return depth
