"""Pydantic schemas for Studio API request/response validation."""

from pydantic import BaseModel, Field, field_validator

from cinetheque.infrastructure.movies.schemas.director_schemas import DirectorRecord
from cinetheque.infrastructure.movies.schemas.validators import (
    RECORD_CONFIG,
    require_int_column,
    require_not_blank,
)


class StudioRecord(BaseModel):
    """Transport record for a studio and its directors."""

    model_config = RECORD_CONFIG

    id: int | None = Field(None, description="Server-assigned identity, ignored on create")
    studio_name: str = Field("", validate_default=True, description="Unique studio name")
    studio_founded_year: int | None = Field(None, description="Year the studio was founded")
    director_list: list[DirectorRecord] = Field(
        default_factory=list, description="Directors employed by the studio"
    )

    @field_validator("studio_name", mode="before")
    @classmethod
    def studio_name_not_blank(cls, value: object) -> object:
        value = require_not_blank(value)
        # Names are unique once surrounding whitespace is dropped
        return value.strip() if isinstance(value, str) else value

    @field_validator("studio_founded_year")
    @classmethod
    def founded_year_storable(cls, value: int | None) -> int | None:
        return require_int_column(value)

    @field_validator("director_list", mode="before")
    @classmethod
    def directors_default(cls, value: object) -> object:
        return [] if value is None else value
