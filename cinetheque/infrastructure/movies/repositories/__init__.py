from .director_repository import DirectorRepository
from .movie_repository import MovieRepository
from .studio_repository import StudioRepository

__all__ = ["DirectorRepository", "MovieRepository", "StudioRepository"]
