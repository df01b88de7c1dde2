"""Tests for the movie catalogue entities."""

from datetime import date, datetime

import pytest

from cinetheque.domain.common.exceptions import ValidationError
from cinetheque.domain.common.value_objects.ids import DirectorId, MovieId, StudioId
from cinetheque.domain.movies.entities import Director, Movie, Person, Studio
from cinetheque.domain.movies.genre import Genre


def make_movie(movie_id: int = 0, title: str = "Pulp Fiction") -> Movie:
    return Movie.create_with_id(
        id=MovieId(movie_id),
        title=title,
        release_date=datetime(1994, 10, 14, 20, 0),
        genre=Genre.CRIME,
        rating=8.9,
    )


def make_director(director_id: int = 1) -> Director:
    return Director.create_with_id(
        id=DirectorId(director_id),
        person=Person("Quentin", "Tarantino", date(1963, 3, 27)),
        oscar_count=2,
    )


class TestEntityId:
    def test_generate_is_unassigned(self) -> None:
        assert not MovieId.generate().is_assigned
        assert MovieId(3).is_assigned

    def test_negative_id_rejected(self) -> None:
        with pytest.raises(ValueError, match="between 0"):
            DirectorId(-1)

    def test_id_above_column_range_rejected(self) -> None:
        with pytest.raises(ValueError):
            StudioId(2**31)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(1, True), (2**31 - 1, True), (0, False), (-4, False), (2**70, False), (None, False)],
    )
    def test_can_exist(self, value: int | None, expected: bool) -> None:
        assert MovieId.can_exist(value) is expected


class TestPerson:
    def test_full_name(self) -> None:
        assert Person("Agnès", "Varda").full_name == "Agnès Varda"

    @pytest.mark.parametrize(("first", "last"), [("", "Varda"), ("Agnès", "  ")])
    def test_blank_names_rejected(self, first: str, last: str) -> None:
        with pytest.raises(ValidationError):
            Person(first, last)


class TestMovie:
    def test_create_is_unlinked(self) -> None:
        movie = Movie.create("Jackie Brown")

        assert not movie.id.is_assigned
        assert movie.director_id is None

    def test_rating_bounds(self) -> None:
        assert Movie.create("Edge", rating=0.0).rating == 0.0
        assert Movie.create("Edge", rating=10.0).rating == 10.0
        with pytest.raises(ValidationError) as exc_info:
            Movie.create("Too good", rating=10.1)
        assert exc_info.value.field == "rating"

    def test_update_details_rechecks_title(self) -> None:
        movie = make_movie(1)

        with pytest.raises(ValidationError):
            movie.update_details(title=" ", release_date=None, genre=None, rating=None)


class TestDirector:
    def test_negative_oscar_count_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Director.create(Person("Quentin", "Tarantino"), oscar_count=-1)

    def test_direct_sets_back_reference(self) -> None:
        director = make_director(4)
        movie = make_movie(10)

        director.direct(movie)

        assert movie.director_id == DirectorId(4)
        assert director.movies_directed == [movie]

    def test_direct_same_movie_twice(self) -> None:
        director = make_director()
        director.direct(make_movie(10))
        director.direct(make_movie(10))

        assert len(director.movies_directed) == 1

    def test_direct_new_movies_are_all_kept(self) -> None:
        director = make_director()
        director.direct(make_movie(title="Reservoir Dogs"))
        director.direct(make_movie(title="Death Proof"))

        assert [m.title for m in director.movies_directed] == ["Reservoir Dogs", "Death Proof"]

    def test_update_details(self) -> None:
        director = make_director()

        director.update_details(Person("Q.", "Tarantino"), oscar_count=3)

        assert director.first_name == "Q."
        assert director.oscar_count == 3


class TestStudio:
    def test_create_strips_name(self) -> None:
        assert Studio.create("  Miramax ").studio_name == "Miramax"

    def test_blank_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Studio.create_with_id(StudioId(1), " ", None)

    def test_add_director_once(self) -> None:
        studio = Studio.create("Miramax")

        assert studio.add_director(make_director(2)) is True
        assert studio.add_director(make_director(2)) is False
        assert len(studio.directors) == 1
        assert studio.employs(make_director(2))
