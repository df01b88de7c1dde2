"""Protocol for Studio repository."""

from typing import Protocol

from cinetheque.application.common.option import Option
from cinetheque.domain.common.value_objects.ids import StudioId
from cinetheque.domain.movies.entities.studio import Studio


class StudioRepositoryProtocol(Protocol):
    """Protocol for Studio repository operations."""

    def save(self, studio: Studio) -> Studio:
        """
        Insert a new studio or update an existing one.

        The studio's director list is persisted by director identity.

        Returns:
            Studio entity with its assigned identity

        Raises:
            AlreadyExistsError: If the store rejects a duplicate studio name
        """
        ...

    def find_by_id(self, studio_id: StudioId) -> Option[Studio]: ...

    def find_all(self) -> list[Studio]: ...

    def delete_by_id(self, studio_id: StudioId) -> None:
        """Delete a studio. Its directors are kept and detached."""
        ...

    def find_by_studio_name(self, studio_name: str) -> Option[Studio]:
        """Get the studio carrying this exact name, if any."""
        ...
