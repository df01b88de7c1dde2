"""SQLAlchemy ORM models for the movie catalogue."""

from datetime import date, datetime

from sqlalchemy import (
    CheckConstraint,
    Date,
    DateTime,
    Enum,
    Float,
    ForeignKey,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cinetheque.database import Base
from cinetheque.domain.movies.genre import Continent, Genre


class Person(Base):
    """Base table for every person; subclasses are joined on ``id``."""

    __tablename__ = "person"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    type: Mapped[str] = mapped_column(String(31), nullable=False)

    __mapper_args__ = {
        "polymorphic_on": "type",
        "polymorphic_identity": "person",
    }


class Director(Person):
    """A person who directs movies."""

    __tablename__ = "director"
    __table_args__ = (CheckConstraint("oscar_count >= 0", name="ck_director_oscar_count"),)

    id: Mapped[int] = mapped_column(ForeignKey("person.id", ondelete="CASCADE"), primary_key=True)
    oscar_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    studio_id: Mapped[int | None] = mapped_column(
        ForeignKey("studio.id", ondelete="SET NULL"), nullable=True, index=True
    )

    # Relationships
    movies: Mapped[list["Movie"]] = relationship(
        back_populates="director", order_by="Movie.id", lazy="selectin"
    )
    studio: Mapped["Studio | None"] = relationship(back_populates="directors")

    __mapper_args__ = {"polymorphic_identity": "director"}


class Movie(Base):
    """A movie, optionally linked to the director who directed it."""

    __tablename__ = "movie"
    __table_args__ = (
        CheckConstraint("rating >= 0 AND rating <= 10", name="ck_movie_rating_range"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    release_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    genre: Mapped[Genre | None] = mapped_column(
        Enum(Genre, name="genre", native_enum=False, length=32), nullable=True
    )
    rating: Mapped[float | None] = mapped_column(Float, nullable=True)
    director_id: Mapped[int | None] = mapped_column(
        ForeignKey("director.id", ondelete="SET NULL"), nullable=True, index=True
    )

    # Relationships
    director: Mapped["Director | None"] = relationship(back_populates="movies")


class Studio(Base):
    """A studio employing directors. Studio names are unique."""

    __tablename__ = "studio"
    __table_args__ = (UniqueConstraint("studio_name", name="uq_studio_studio_name"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    studio_name: Mapped[str] = mapped_column(String(255), nullable=False)
    studio_founded_year: Mapped[int | None] = mapped_column(Integer, nullable=True)

    # Relationships
    directors: Mapped[list["Director"]] = relationship(
        back_populates="studio", order_by="Director.id", lazy="selectin"
    )


class Country(Base):
    """Reference table of countries. Persisted only; no service reads it yet."""

    __tablename__ = "country"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    country_name: Mapped[str] = mapped_column(String(50), nullable=False)
    continent: Mapped[Continent | None] = mapped_column(
        Enum(Continent, name="continent", native_enum=False, length=32), nullable=True
    )
