"""Protocol for Director repository."""

from typing import Protocol

from cinetheque.application.common.option import Option
from cinetheque.domain.common.value_objects.ids import DirectorId
from cinetheque.domain.movies.entities.director import Director


class DirectorRepositoryProtocol(Protocol):
    """Protocol for Director repository operations."""

    def save(self, director: Director) -> Director:
        """
        Insert a new director or update an existing one.

        The director's movie collection is persisted with it.

        Args:
            director: The director entity; a placeholder id means insert

        Returns:
            Director entity with its assigned identity
        """
        ...

    def find_by_id(self, director_id: DirectorId) -> Option[Director]: ...

    def find_all(self) -> list[Director]: ...

    def delete_by_id(self, director_id: DirectorId) -> None:
        """Delete a director. Its movies are kept and detached."""
        ...

    def find_by_first_name_and_last_name(self, first_name: str, last_name: str) -> list[Director]:
        """
        Get all directors with exactly this first and last name.

        Args:
            first_name: First name to match
            last_name: Last name to match

        Returns:
            List of director entities in identity order
        """
        ...
