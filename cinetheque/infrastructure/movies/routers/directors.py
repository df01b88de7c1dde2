import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response
from starlette import status

from cinetheque.application.movies.services import DirectorService
from cinetheque.config import get_settings
from cinetheque.core import container
from cinetheque.exceptions import NotFoundError
from cinetheque.infrastructure.common.di import inject_service
from cinetheque.infrastructure.identity import require_authority
from cinetheque.infrastructure.movies.dependencies import DirectorIdPath
from cinetheque.infrastructure.movies.schemas import DirectorRecord, MovieRecord

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/directors", tags=["directors"])
settings = get_settings()


@router.get(
    "",
    response_model=list[DirectorRecord],
    status_code=status.HTTP_200_OK,
    responses={status.HTTP_204_NO_CONTENT: {"description": "No directors"}},
)
def get_directors(
    service: DirectorService = Depends(inject_service(container.director_service)),
) -> list[DirectorRecord] | Response:
    """
    Get all directors in creation order.

    Returns:
        The directors, or 204 No Content when there are none
    """
    directors = service.find_all()
    if not directors:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return directors


@router.get(
    "/search",
    response_model=list[DirectorRecord],
    status_code=status.HTTP_200_OK,
    responses={status.HTTP_204_NO_CONTENT: {"description": "No matching directors"}},
)
def search_directors(
    first_name: Annotated[str, Query(alias="firstName", min_length=1)],
    last_name: Annotated[str, Query(alias="lastName", min_length=1)],
    service: DirectorService = Depends(inject_service(container.director_service)),
) -> list[DirectorRecord] | Response:
    """Get the directors with exactly this first and last name."""
    directors = service.find_by_names(first_name, last_name)
    if not directors:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return directors


@router.get("/{director_id}", response_model=DirectorRecord, status_code=status.HTTP_200_OK)
def get_director(
    director_id: DirectorIdPath,
    service: DirectorService = Depends(inject_service(container.director_service)),
) -> DirectorRecord:
    """
    Get a director with the movies it directed.

    Raises:
        NotFoundError: If the director does not exist
    """
    found = service.find_by_id(director_id)
    if not found.is_present:
        raise NotFoundError("Director", director_id.value)
    return found.unwrap()


@router.post("/add", response_model=DirectorRecord, status_code=status.HTTP_201_CREATED)
def create_director(
    record: DirectorRecord,
    service: DirectorService = Depends(inject_service(container.director_service)),
) -> DirectorRecord:
    """Create a director, together with the movies listed in the record."""
    return service.create(record)


@router.put("/update", response_model=DirectorRecord, status_code=status.HTTP_200_OK)
def update_director(
    record: DirectorRecord,
    service: DirectorService = Depends(inject_service(container.director_service)),
) -> DirectorRecord:
    """
    Update a director's name, birth date and oscar count.

    Raises:
        NotFoundError: If no director has the record's id
    """
    updated = service.update(record)
    if not updated.is_present:
        raise NotFoundError("Director", record.id)
    return updated.unwrap()


@router.delete(
    "/{director_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_authority(settings.ADMIN_AUTHORITY))],
)
def delete_director(
    director_id: DirectorIdPath,
    service: DirectorService = Depends(inject_service(container.director_service)),
) -> Response:
    """
    Delete a director. Its movies are kept, without a director.

    Raises:
        NotFoundError: If the director does not exist
    """
    if not service.delete(director_id):
        raise NotFoundError("Director", director_id.value)
    logger.info(f"Deleted director {director_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{director_id}/movies", response_model=MovieRecord, status_code=status.HTTP_201_CREATED
)
def add_film_to_director(
    director_id: DirectorIdPath,
    record: MovieRecord,
    service: DirectorService = Depends(inject_service(container.director_service)),
) -> MovieRecord:
    """
    Create a movie directed by this director.

    Raises:
        NotFoundError: If the director does not exist
    """
    return service.add_film_to_director(director_id, record)
