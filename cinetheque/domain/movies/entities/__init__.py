from .director import Director
from .movie import Movie
from .person import Person
from .studio import Studio

__all__ = ["Director", "Movie", "Person", "Studio"]
