"""FastAPI dependencies resolving catalogue identities from the request path.

A path id that no stored entity can carry (zero, negative or past the
primary key range) names nothing, so it answers 404 like any unknown id.
"""

from typing import Annotated

from fastapi import Depends, Path

from cinetheque.domain.common.value_objects.ids import DirectorId, MovieId, StudioId
from cinetheque.exceptions import NotFoundError


def director_id_path(
    director_id: Annotated[int, Path(description="ID of the director")],
) -> DirectorId:
    if not DirectorId.can_exist(director_id):
        raise NotFoundError("Director", director_id)
    return DirectorId(director_id)


def movie_id_path(movie_id: Annotated[int, Path(description="ID of the movie")]) -> MovieId:
    if not MovieId.can_exist(movie_id):
        raise NotFoundError("Movie", movie_id)
    return MovieId(movie_id)


def studio_id_path(studio_id: Annotated[int, Path(description="ID of the studio")]) -> StudioId:
    if not StudioId.can_exist(studio_id):
        raise NotFoundError("Studio", studio_id)
    return StudioId(studio_id)


DirectorIdPath = Annotated[DirectorId, Depends(director_id_path)]
MovieIdPath = Annotated[MovieId, Depends(movie_id_path)]
StudioIdPath = Annotated[StudioId, Depends(studio_id_path)]
