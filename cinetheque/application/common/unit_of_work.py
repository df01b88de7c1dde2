"""
Unit of Work interface.

A unit of work is the transactional scope of one mutating service operation.
It commits on normal exit and rolls back when the block raises or when the
service marked the scope rollback-only.

Example:
    class StudioService:
        def delete(self, studio_id: StudioId) -> bool:
            with self.uow:
                if not self.studio_repository.find_by_id(studio_id).is_present:
                    self.uow.mark_rollback_only()
                    return False
                self.studio_repository.delete_by_id(studio_id)
                return True
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Self


class UnitOfWork(ABC):
    """
    Unit of Work interface (Port).

    Infrastructure layer provides concrete implementations
    (e.g., SQLAlchemyUnitOfWork).
    """

    @abstractmethod
    def begin(self) -> None:
        """Open the transactional scope, or join the one already open."""
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        """
        Commit the current transaction.

        When scopes are nested only the outermost one commits.
        """
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        """
        Rollback the current transaction.

        This discards all changes made within the unit of work.
        """
        raise NotImplementedError

    @abstractmethod
    def mark_rollback_only(self) -> None:
        """Make the scope roll back on exit even though nothing was raised."""
        raise NotImplementedError

    def __enter__(self) -> Self:
        """Enter the unit of work context."""
        self.begin()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """
        Exit the unit of work context.

        If an exception occurred, rollback. Otherwise commit, which rolls
        back instead when the scope was marked rollback-only.
        """
        if exc_type is not None:
            self.rollback()
        else:
            self.commit()
