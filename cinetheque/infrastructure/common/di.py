from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from cinetheque.core import Container, container
from cinetheque.database import DatabaseSession

T = TypeVar("T")


def inject_service(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency for a container provider.

    Each request gets its own container bound to its database session, so
    concurrent requests never share a session through the provider graph.
    """
    name = next(key for key, value in container.providers.items() if value is provider)

    def dependency(db: DatabaseSession) -> T:
        scoped = Container()
        scoped.db.override(db)
        return getattr(scoped, name)()

    return dependency
