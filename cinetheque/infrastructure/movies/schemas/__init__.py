"""Movie catalogue schemas."""

from cinetheque.infrastructure.movies.schemas.director_schemas import DirectorRecord
from cinetheque.infrastructure.movies.schemas.movie_schemas import MovieRecord
from cinetheque.infrastructure.movies.schemas.studio_schemas import StudioRecord

__all__ = [
    "DirectorRecord",
    "MovieRecord",
    "StudioRecord",
]
