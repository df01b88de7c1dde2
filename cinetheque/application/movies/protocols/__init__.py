from .director_repository import DirectorRepositoryProtocol
from .movie_repository import MovieRepositoryProtocol
from .studio_repository import StudioRepositoryProtocol

__all__ = [
    "DirectorRepositoryProtocol",
    "MovieRepositoryProtocol",
    "StudioRepositoryProtocol",
]
