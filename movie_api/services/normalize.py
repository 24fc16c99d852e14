"""Genre-name mapping and the public movie shape."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from movie_api.core.config import Settings, get_settings
from movie_api.services.models import Genre, NormalizedMovie

UNKNOWN_GENRE = "unknown genre"
GENRES_UNAVAILABLE = "genres unavailable"
TITLE_UNAVAILABLE = "title unavailable"
DESCRIPTION_UNAVAILABLE = "description unavailable"
DATE_UNAVAILABLE = "date unavailable"
SCORE_UNAVAILABLE = "score unavailable"


def _genre_pair(entry: Genre | Mapping[str, Any]) -> tuple[Any, Any]:
    if isinstance(entry, Genre):
        return entry.id, entry.name
    return entry.get("id"), entry.get("name")


def map_genre_ids_to_names(
    genre_ids: Iterable[int] | None,
    genre_table: Iterable[Genre | Mapping[str, Any]] | None,
) -> list[str]:
    """Translate TMDb genre ids into names using ``genre_table``.

    Ids missing from the table are dropped. A missing id list or table yields
    ``["genres unavailable"]`` instead.
    """

    if genre_ids is None or genre_table is None or not isinstance(genre_ids, (list, tuple)):
        return [GENRES_UNAVAILABLE]

    names_by_id: dict[Any, Any] = {}
    for entry in genre_table:
        genre_id, name = _genre_pair(entry)
        names_by_id.setdefault(genre_id, name)

    names = [names_by_id.get(genre_id, UNKNOWN_GENRE) for genre_id in genre_ids]
    return [name for name in names if name != UNKNOWN_GENRE]


def genre_names(genres: Iterable[Genre | Mapping[str, Any]]) -> list[str]:
    """Plain names from an embedded ``genres`` list of ``{id, name}`` objects."""

    names = [_genre_pair(entry)[1] for entry in genres if isinstance(entry, (Genre, Mapping))]
    return [name for name in names if name]


def build_poster_url(path: str | None, *, settings: Settings | None = None) -> str:
    settings = settings or get_settings()
    if not path:
        return settings.poster_placeholder_url
    return f"{settings.tmdb_image_base.rstrip('/')}{path}"


def filter_details(movie: Mapping[str, Any], *, settings: Settings | None = None) -> NormalizedMovie:
    """Reduce a raw TMDb movie to the public shape, filling every gap."""

    vote_average = movie.get("vote_average")
    genres = movie.get("genres")
    return NormalizedMovie(
        title=movie.get("title") or TITLE_UNAVAILABLE,
        description=movie.get("overview") or DESCRIPTION_UNAVAILABLE,
        release_date=movie.get("release_date") or DATE_UNAVAILABLE,
        genres=list(genres) if genres is not None else [GENRES_UNAVAILABLE],
        vote_average=round(float(vote_average), 1) if vote_average is not None else SCORE_UNAVAILABLE,
        poster_path=build_poster_url(movie.get("poster_path"), settings=settings),
    )
