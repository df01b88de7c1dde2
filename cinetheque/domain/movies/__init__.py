"""Movie catalogue bounded context."""

from .entities import Director, Movie, Person, Studio
from .genre import Continent, Genre

__all__ = ["Continent", "Director", "Genre", "Movie", "Person", "Studio"]
