import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response
from starlette import status

from cinetheque.application.movies.services import MovieService
from cinetheque.config import get_settings
from cinetheque.core import container
from cinetheque.exceptions import NotFoundError
from cinetheque.infrastructure.common.di import inject_service
from cinetheque.infrastructure.identity import require_authority
from cinetheque.infrastructure.movies.dependencies import MovieIdPath
from cinetheque.infrastructure.movies.schemas import MovieRecord

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/movies", tags=["movies"])
settings = get_settings()


@router.get(
    "",
    response_model=list[MovieRecord],
    status_code=status.HTTP_200_OK,
    responses={status.HTTP_204_NO_CONTENT: {"description": "No movies"}},
)
def get_movies(
    service: MovieService = Depends(inject_service(container.movie_service)),
) -> list[MovieRecord] | Response:
    """Get all movies in creation order, or 204 when there are none."""
    movies = service.find_all()
    if not movies:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return movies


@router.get(
    "/search",
    response_model=list[MovieRecord],
    status_code=status.HTTP_200_OK,
    responses={status.HTTP_204_NO_CONTENT: {"description": "No matching movies"}},
)
def search_movies(
    title: Annotated[str, Query(min_length=1, description="Exact movie title")],
    service: MovieService = Depends(inject_service(container.movie_service)),
) -> list[MovieRecord] | Response:
    movies = service.find_by_title(title)
    if not movies:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return movies


@router.get("/{movie_id}", response_model=MovieRecord, status_code=status.HTTP_200_OK)
def get_movie(
    movie_id: MovieIdPath,
    service: MovieService = Depends(inject_service(container.movie_service)),
) -> MovieRecord:
    found = service.find_by_id(movie_id)
    if not found.is_present:
        raise NotFoundError("Movie", movie_id.value)
    return found.unwrap()


@router.post("/add", response_model=MovieRecord, status_code=status.HTTP_201_CREATED)
def create_movie(
    record: MovieRecord,
    service: MovieService = Depends(inject_service(container.movie_service)),
) -> MovieRecord:
    """
    Create a movie.

    When ``directorId`` is set the movie is added to that director's movies.

    Raises:
        NotFoundError: If ``directorId`` names a director that does not exist
    """
    return service.create(record)


@router.put("/update", response_model=MovieRecord, status_code=status.HTTP_200_OK)
def update_movie(
    record: MovieRecord,
    service: MovieService = Depends(inject_service(container.movie_service)),
) -> MovieRecord:
    """Update a movie's title, release date, genre and rating."""
    updated = service.update(record)
    if not updated.is_present:
        raise NotFoundError("Movie", record.id)
    return updated.unwrap()


@router.delete(
    "/{movie_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_authority(settings.ADMIN_AUTHORITY))],
)
def delete_movie(
    movie_id: MovieIdPath,
    service: MovieService = Depends(inject_service(container.movie_service)),
) -> Response:
    if not service.delete(movie_id):
        raise NotFoundError("Movie", movie_id.value)
    logger.info(f"Deleted movie {movie_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
