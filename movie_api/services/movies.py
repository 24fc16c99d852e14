"""Listing and lookup orchestration on top of the TMDb client."""

from __future__ import annotations

import logging
from typing import Any

from movie_api.core.config import Settings, get_settings
from movie_api.services.models import NormalizedMovie
from movie_api.services.normalize import filter_details, genre_names, map_genre_ids_to_names
from movie_api.services.tmdb import TMDbClient


logger = logging.getLogger(__name__)

DEFAULT_SORT = "popularity.desc"


class MoviesNotFound(Exception):
    """Raised when a listing yields no movies for the given filters."""


class MovieNotFound(Exception):
    """Raised when TMDb has no movie for the requested id."""

    def __init__(self, movie_id: str | int) -> None:
        super().__init__(f"No movie was found with the ID {movie_id}.")
        self.movie_id = movie_id


class MovieService:
    """Builds the public movie listings out of TMDb discover/detail calls."""

    def __init__(self, client: TMDbClient | None = None, *, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.client = client or TMDbClient(self.settings)

    def list_movies(
        self,
        *,
        page: int = 1,
        language: str | None = None,
        year: int | None = None,
        sort_by: str = DEFAULT_SORT,
    ) -> list[NormalizedMovie]:
        """Collect discover pages from ``page`` on until the target count is reached.

        The last page fetched may overshoot the target; the surplus is cut
        after the loop. An empty page ends the loop early.
        """

        language = language or self.settings.tmdb_language
        target = self.settings.listing_target
        lookup = self.client.fetch_genres(language)

        movies: list[dict[str, Any]] = []
        current_page = page
        while len(movies) < target:
            results = self.client.discover_movies(
                page=current_page,
                language=language,
                year=year,
                sort_by=sort_by,
            )
            if not results:
                break
            for item in results:
                movies.append({**item, "genres": map_genre_ids_to_names(item.get("genre_ids"), lookup.genres)})
            current_page += 1

        logger.info(
            "Accumulated %d movies from page %d onwards (lang=%s, year=%s, sort=%s)",
            len(movies),
            page,
            language,
            year,
            sort_by,
        )
        if not movies:
            raise MoviesNotFound("No movies were found with the selected filters.")
        return [filter_details(movie, settings=self.settings) for movie in movies[:target]]

    def get_movie(self, movie_id: str | int, *, language: str | None = None) -> NormalizedMovie:
        """Fetch one movie by TMDb id and normalize it."""

        language = language or self.settings.tmdb_language
        lookup = self.client.fetch_genres(language)
        details = self.client.get_movie(movie_id, language=language)
        if not details:
            raise MovieNotFound(movie_id)

        embedded = details.get("genres")
        if embedded is not None:
            names = genre_names(embedded)
        else:
            names = map_genre_ids_to_names(details.get("genre_ids"), lookup.genres)
        return filter_details({**details, "genres": names}, settings=self.settings)
