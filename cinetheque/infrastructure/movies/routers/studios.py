import logging

from fastapi import APIRouter, Depends, Response
from starlette import status

from cinetheque.application.movies.services import StudioService
from cinetheque.config import get_settings
from cinetheque.core import container
from cinetheque.exceptions import NotFoundError
from cinetheque.infrastructure.common.di import inject_service
from cinetheque.infrastructure.identity import require_authority
from cinetheque.infrastructure.movies.dependencies import DirectorIdPath, StudioIdPath
from cinetheque.infrastructure.movies.schemas import StudioRecord

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/studios", tags=["studios"])
settings = get_settings()


@router.get(
    "",
    response_model=list[StudioRecord],
    status_code=status.HTTP_200_OK,
    responses={status.HTTP_204_NO_CONTENT: {"description": "No studios"}},
)
def get_studios(
    service: StudioService = Depends(inject_service(container.studio_service)),
) -> list[StudioRecord] | Response:
    """Get all studios with their directors, or 204 when there are none."""
    studios = service.find_all()
    if not studios:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    return studios


@router.get("/{studio_id}/studio", response_model=StudioRecord, status_code=status.HTTP_200_OK)
def get_studio(
    studio_id: StudioIdPath,
    service: StudioService = Depends(inject_service(container.studio_service)),
) -> StudioRecord:
    """
    Get a studio with its directors.

    Raises:
        NotFoundError: If the studio does not exist
    """
    found = service.find_by_id(studio_id)
    if not found.is_present:
        raise NotFoundError("Studio", studio_id.value)
    return found.unwrap()


@router.post("/add", response_model=StudioRecord, status_code=status.HTTP_201_CREATED)
def create_studio(
    record: StudioRecord,
    service: StudioService = Depends(inject_service(container.studio_service)),
) -> StudioRecord:
    """
    Create a studio. Directors in ``directorList`` are referenced by id.

    Raises:
        AlreadyExistsError: If the studio name is taken
        NotFoundError: If a listed director does not exist
    """
    return service.create(record)


@router.put("/update", response_model=StudioRecord, status_code=status.HTTP_200_OK)
def update_studio(
    record: StudioRecord,
    service: StudioService = Depends(inject_service(container.studio_service)),
) -> StudioRecord:
    """Rename a studio or change its founded year."""
    updated = service.update(record)
    if not updated.is_present:
        raise NotFoundError("Studio", record.id)
    return updated.unwrap()


@router.delete(
    "/{studio_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_authority(settings.ADMIN_AUTHORITY))],
)
def delete_studio(
    studio_id: StudioIdPath,
    service: StudioService = Depends(inject_service(container.studio_service)),
) -> Response:
    """Delete a studio. Its directors are kept, without a studio."""
    if not service.delete(studio_id):
        raise NotFoundError("Studio", studio_id.value)
    logger.info(f"Deleted studio {studio_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{studio_id}/directors/{director_id}",
    response_model=StudioRecord,
    status_code=status.HTTP_200_OK,
)
def add_director_to_studio(
    studio_id: StudioIdPath,
    director_id: DirectorIdPath,
    service: StudioService = Depends(inject_service(container.studio_service)),
) -> StudioRecord:
    """Add an existing director to a studio."""
    return service.add_director(studio_id, director_id)
