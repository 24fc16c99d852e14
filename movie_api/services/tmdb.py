"""Thin wrapper around the TMDb API to fetch movie and genre data."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import logging

import httpx

from movie_api.core.config import Settings, get_settings
from movie_api.services.models import Genre, GenreLookup


logger = logging.getLogger(__name__)


class TMDbError(Exception):
    """Base exception for TMDb-related failures."""


class TMDbNotFound(TMDbError):
    """Raised when TMDb answers 404 for the requested resource."""


class TMDbClient:
    """Simple TMDb HTTP client using API key auth."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.api_key = settings.tmdb_api_key
        self.base_url = settings.tmdb_base_url.rstrip("/")
        self.default_language = settings.tmdb_language
        self.timeout = settings.tmdb_timeout
        self._transport = transport

    def _request(self, method: str, path: str, *, params: dict[str, Any] | None = None) -> Any:
        if not self.api_key:
            raise TMDbError("TMDB_API_KEY is not configured")
        url = f"{self.base_url}{path}"
        query = {"api_key": self.api_key}
        if params:
            query.update({k: v for k, v in params.items() if v is not None})
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.request(method, url, params=query)
        except httpx.HTTPError as exc:
            raise TMDbError(f"TMDb request to {path} failed: {exc}") from exc
        if response.status_code == httpx.codes.NOT_FOUND:
            raise TMDbNotFound(f"TMDb returned 404 for {path}")
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise TMDbError(str(exc)) from exc
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise TMDbError(f"TMDb returned an invalid JSON body for {path}") from exc

    def fetch_genres(self, language: str | None = None) -> GenreLookup:
        """Fetch the movie genre table; failures degrade to an empty table."""

        try:
            payload = self._request(
                "GET",
                "/genre/movie/list",
                params={"language": language or self.default_language},
            )
        except TMDbError as exc:
            logger.warning("Could not fetch TMDb genres: %s", exc)
            return GenreLookup(genres=[], error=str(exc))
        logger.debug("TMDb genre payload: %s", payload)
        raw = payload.get("genres") if isinstance(payload, dict) else None
        if not isinstance(raw, list):
            logger.warning("TMDb genre payload has no genre list: %r", payload)
            return GenreLookup(genres=[], error="TMDb genre payload has no genre list")
        genres = [
            Genre(id=item["id"], name=item["name"])
            for item in raw
            if isinstance(item, dict) and "id" in item and item.get("name")
        ]
        return GenreLookup(genres=genres)

    def discover_movies(
        self,
        *,
        page: int = 1,
        language: str | None = None,
        year: int | None = None,
        sort_by: str = "popularity.desc",
    ) -> list[dict[str, Any]]:
        """Return the ``results`` list of one discover page (possibly empty)."""

        payload = self._request(
            "GET",
            "/discover/movie",
            params={
                "language": language or self.default_language,
                "page": page,
                "primary_release_year": year,
                "sort_by": sort_by,
                "include_adult": False,
            },
        )
        logger.debug("TMDb discover payload (page %s): %s", page, payload)
        if payload is not None and not isinstance(payload, dict):
            raise TMDbError("TMDb discover payload is not an object")
        return (payload or {}).get("results") or []

    def get_movie(self, movie_id: str | int, *, language: str | None = None) -> dict[str, Any] | None:
        """Return the raw movie record, or ``None`` when TMDb has no such id."""

        try:
            details = self._request(
                "GET",
                f"/movie/{quote(str(movie_id), safe='')}",
                params={"language": language or self.default_language},
            )
        except TMDbNotFound:
            return None
        logger.debug("TMDb details payload: %s", details)
        if details is not None and not isinstance(details, dict):
            raise TMDbError(f"TMDb movie payload for {movie_id} is not an object")
        return details or None
