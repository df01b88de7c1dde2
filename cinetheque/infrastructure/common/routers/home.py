from fastapi import APIRouter
from pydantic import BaseModel
from starlette import status

from cinetheque.config import get_settings

router = APIRouter(tags=["home"])


class WelcomeMessage(BaseModel):
    """Public landing payload."""

    message: str
    version: str


@router.get("/home", response_model=WelcomeMessage, status_code=status.HTTP_200_OK)
def home() -> WelcomeMessage:
    """Public welcome endpoint; the only catalogue route that needs no session."""
    settings = get_settings()
    return WelcomeMessage(message=f"Welcome to {settings.PROJECT_NAME}", version=settings.VERSION)
