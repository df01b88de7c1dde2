"""Pydantic schemas for Movie API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field, field_serializer, field_validator

from cinetheque.domain.movies.genre import Genre
from cinetheque.infrastructure.movies.schemas.validators import (
    RECORD_CONFIG,
    format_release_date,
    parse_release_date,
    require_not_blank,
)


class MovieRecord(BaseModel):
    """Transport record for a movie."""

    model_config = RECORD_CONFIG

    id: int | None = Field(None, description="Server-assigned identity, ignored on create")
    title: str = Field("", validate_default=True, description="Movie title")
    release_date: datetime | None = Field(
        None, description="Release date and time, formatted dd/MM/yyyy:HH:mm"
    )
    genre: Genre | None = Field(None, description="Movie genre")
    rating: float | None = Field(None, description="Rating between 0 and 10")
    director_id: int | None = Field(None, description="Identity of the directing director")

    @field_validator("title", mode="before")
    @classmethod
    def title_not_blank(cls, value: object) -> object:
        return require_not_blank(value)

    @field_validator("release_date", mode="before")
    @classmethod
    def release_date_format(cls, value: object) -> object:
        return parse_release_date(value)

    @field_validator("rating")
    @classmethod
    def rating_in_range(cls, value: float | None) -> float | None:
        if value is not None and not 0 <= value <= 10:
            raise ValueError("must be between 0 and 10")
        return value

    @field_serializer("release_date")
    def serialize_release_date(self, value: datetime | None) -> str | None:
        return format_release_date(value)
