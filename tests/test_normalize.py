import pytest

from movie_api.services.models import Genre
from movie_api.services.normalize import (
    filter_details,
    genre_names,
    map_genre_ids_to_names,
)

PLACEHOLDER = "https://via.placeholder.com/500x750?text=No+Image"


def test_map_genre_ids_drops_unknown_ids():
    assert map_genre_ids_to_names([28, 99], [{"id": 28, "name": "Action"}]) == ["Action"]
    assert map_genre_ids_to_names([1, 2], []) == []
    assert map_genre_ids_to_names([], [{"id": 28, "name": "Action"}]) == []


def test_map_genre_ids_keeps_input_order():
    table = [Genre(18, "Drama"), Genre(28, "Action"), Genre(35, "Comedy")]
    assert map_genre_ids_to_names([35, 18, 28], table) == ["Comedy", "Drama", "Action"]


@pytest.mark.parametrize("ids, table", [(None, []), ("28", [{"id": 28, "name": "Action"}]), ([28], None)])
def test_map_genre_ids_unavailable_fallback(ids, table):
    assert map_genre_ids_to_names(ids, table) == ["genres unavailable"]


def test_map_genre_ids_first_table_match_wins():
    table = [{"id": 28, "name": "Action"}, {"id": 28, "name": "Acción"}]
    assert map_genre_ids_to_names([28], table) == ["Action"]


def test_genre_names_from_embedded_objects():
    assert genre_names([{"id": 28, "name": "Action"}, Genre(18, "Drama")]) == ["Action", "Drama"]


def test_filter_details_passes_fields_through(settings):
    movie = filter_details(
        {
            "id": 1,
            "title": "Arrival",
            "overview": "Linguist meets heptapods.",
            "release_date": "2016-11-11",
            "genres": ["Drama", "Science Fiction"],
            "vote_average": 7.666,
            "poster_path": "/arrival.jpg",
        },
        settings=settings,
    )
    assert movie.to_dict() == {
        "title": "Arrival",
        "description": "Linguist meets heptapods.",
        "release_date": "2016-11-11",
        "genres": ["Drama", "Science Fiction"],
        "vote_average": 7.7,
        "poster_path": "https://image.tmdb.org/t/p/w500/arrival.jpg",
    }


def test_filter_details_fills_every_missing_field(settings):
    movie = filter_details({"id": 1}, settings=settings)
    assert movie.title == "title unavailable"
    assert movie.description == "description unavailable"
    assert movie.release_date == "date unavailable"
    assert movie.genres == ["genres unavailable"]
    assert movie.vote_average == "score unavailable"
    assert movie.poster_path == PLACEHOLDER


@pytest.mark.parametrize(
    "missing, field, expected",
    [
        ("title", "title", "title unavailable"),
        ("overview", "description", "description unavailable"),
        ("release_date", "release_date", "date unavailable"),
        ("genres", "genres", ["genres unavailable"]),
        ("vote_average", "vote_average", "score unavailable"),
        ("poster_path", "poster_path", PLACEHOLDER),
    ],
)
def test_filter_details_fallbacks_are_independent(settings, missing, field, expected):
    raw = {
        "title": "T",
        "overview": "O",
        "release_date": "2020-01-01",
        "genres": ["Drama"],
        "vote_average": 5.0,
        "poster_path": "/p.jpg",
    }
    complete = filter_details(raw, settings=settings).to_dict()
    del raw[missing]
    result = filter_details(raw, settings=settings).to_dict()
    assert result[field] == expected
    assert {k: v for k, v in result.items() if k != field} == {k: v for k, v in complete.items() if k != field}


def test_filter_details_zero_score_is_not_missing(settings):
    assert filter_details({"vote_average": 0}, settings=settings).vote_average == 0


def test_filter_details_empty_genres_stay_empty(settings):
    assert filter_details({"genres": []}, settings=settings).genres == []


def test_filter_details_empty_poster_uses_placeholder(settings):
    assert filter_details({"poster_path": None}, settings=settings).poster_path == PLACEHOLDER
    assert filter_details({"poster_path": ""}, settings=settings).poster_path == PLACEHOLDER


def test_genre_names_skips_entries_without_name():
    assert genre_names([{"id": 28}, {"id": 18, "name": "Drama"}, {"id": 1, "name": None}, None]) == ["Drama"]
