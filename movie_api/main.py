"""FastAPI entrypoint exposing the TMDb-backed movie listings."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from movie_api.core.config import Settings, get_settings
from movie_api.exceptions import (
    UNEXPECTED_ERROR,
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from movie_api.services.movies import DEFAULT_SORT, MovieNotFound, MoviesNotFound, MovieService

logger = logging.getLogger(__name__)


class MovieOut(BaseModel):
    title: str
    description: str
    release_date: str
    genres: list[str]
    vote_average: float | str
    poster_path: str


class MovieListResponse(BaseModel):
    status: str = "ok"
    data: list[MovieOut]


class MovieResponse(BaseModel):
    status: str = "ok"
    data: MovieOut


class ErrorResponse(BaseModel):
    status: str = "error"
    msg: str


def get_movie_service() -> MovieService:
    """Per-request service bound to the process settings."""

    return MovieService(settings=get_settings())


router = APIRouter(prefix="/api/v1", responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})


@router.get("/movies", response_model=MovieListResponse)
def list_movies(
    page: int = Query(1, ge=1),
    lang: str | None = Query(None, description="TMDb language tag, e.g. es-ES"),
    year: int | None = Query(None, description="Exact primary release year"),
    order: str = Query(DEFAULT_SORT, description="TMDb sort_by key"),
    service: MovieService = Depends(get_movie_service),
) -> MovieListResponse:
    """Up to 50 discover results with genre names and normalized fields."""

    try:
        movies = service.list_movies(page=page, language=lang, year=year, sort_by=order)
    except MoviesNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Listing movies failed (page=%s, lang=%s, year=%s, order=%s)", page, lang, year, order)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR) from exc
    return MovieListResponse(data=[MovieOut(**movie.to_dict()) for movie in movies])


@router.get("/movies/{movie_id}", response_model=MovieResponse)
def get_movie(
    movie_id: str,
    lang: str | None = Query(None, description="TMDb language tag, e.g. es-ES"),
    service: MovieService = Depends(get_movie_service),
) -> MovieResponse:
    try:
        movie = service.get_movie(movie_id, language=lang)
    except MovieNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Fetching movie %s failed", movie_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR) from exc
    return MovieResponse(data=MovieOut(**movie.to_dict()))


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        if not settings.tmdb_api_key:
            logger.warning("TMDB_API_KEY is not set; every movie request will fail")
        yield

    application = FastAPI(title="Movie Listing API", lifespan=lifespan)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)
    application.include_router(router)

    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        application.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.debug("Static directory %s not found, skipping mount", static_dir)
    return application


app = create_app()
