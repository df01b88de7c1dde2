from .director_mapper import DirectorMapper
from .movie_mapper import MovieMapper
from .studio_mapper import StudioMapper

__all__ = ["DirectorMapper", "MovieMapper", "StudioMapper"]
