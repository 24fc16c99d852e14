"""Shared dataclasses for service layer."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass(slots=True, frozen=True)
class Genre:
    """One entry of the TMDb genre table."""

    id: int
    name: str


@dataclass(slots=True)
class GenreLookup:
    """Outcome of a genre table fetch.

    A failed fetch still yields a usable (empty) table so that listings keep
    working; ``error`` records why the table is empty.
    """

    genres: list[Genre] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class NormalizedMovie:
    """Public movie shape returned by the API."""

    title: str
    description: str
    release_date: str
    genres: list[str]
    vote_average: float | str
    poster_path: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
