"""Pydantic schemas for Director API request/response validation."""

from datetime import date

from pydantic import BaseModel, Field, field_serializer, field_validator

from cinetheque.infrastructure.movies.schemas.movie_schemas import MovieRecord
from cinetheque.infrastructure.movies.schemas.validators import (
    RECORD_CONFIG,
    format_birth_date,
    parse_birth_date,
    require_int_column,
    require_not_blank,
)


class DirectorRecord(BaseModel):
    """Transport record for a director and the movies it directed."""

    model_config = RECORD_CONFIG

    id: int | None = Field(None, description="Server-assigned identity, ignored on create")
    first_name: str = Field("", validate_default=True, description="First name")
    last_name: str = Field("", validate_default=True, description="Last name")
    birth_date: date | None = Field(None, description="Birth date, formatted dd/MM/yyyy")
    oscar_count: int = Field(0, description="Number of Oscars won")
    movies_record: list[MovieRecord] = Field(
        default_factory=list, description="Movies directed, in insertion order"
    )

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def name_not_blank(cls, value: object) -> object:
        return require_not_blank(value)

    @field_validator("birth_date", mode="before")
    @classmethod
    def birth_date_format(cls, value: object) -> object:
        return parse_birth_date(value)

    @field_validator("oscar_count", mode="before")
    @classmethod
    def oscar_count_default(cls, value: object) -> object:
        return 0 if value is None else value

    @field_validator("oscar_count")
    @classmethod
    def oscar_count_not_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("must be greater than or equal to 0")
        require_int_column(value)
        return value

    @field_validator("movies_record", mode="before")
    @classmethod
    def movies_default(cls, value: object) -> object:
        return [] if value is None else value

    @field_serializer("birth_date")
    def serialize_birth_date(self, value: date | None) -> str | None:
        return format_birth_date(value)
