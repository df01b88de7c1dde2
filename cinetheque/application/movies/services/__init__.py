from .director_service import DirectorService
from .movie_service import MovieService
from .studio_service import StudioService

__all__ = ["DirectorService", "MovieService", "StudioService"]
