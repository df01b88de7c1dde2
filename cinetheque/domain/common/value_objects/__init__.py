from .ids import DirectorId, MovieId, StudioId

__all__ = ["DirectorId", "MovieId", "StudioId"]
