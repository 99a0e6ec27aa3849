from typing import List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Response, status

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.catalog.driven_adapter.catalog_handler_impl import CatalogHandlerImpl
from src.service.catalog.driving_adapter.http_controller.schema.catalog_schema import (
    CinemaCreateRequest,
    CinemaResponse,
    MovieCreateRequest,
    MovieResponse,
)


router = APIRouter()


@router.post('/cinema', status_code=status.HTTP_201_CREATED)
@Logger.io
@inject
def register_cinema(
    request: CinemaCreateRequest,
    catalog: CatalogHandlerImpl = Depends(Provide[Container.catalog_handler]),
) -> CinemaResponse:
    cinema = catalog.register_cinema(
        cinema_id=request.id, code=request.code, class_type=request.class_type
    )
    return CinemaResponse(id=cinema.id, code=cinema.code, class_type=cinema.class_type.value)


@router.get('/cinema')
@Logger.io
@inject
def list_cinemas(
    catalog: CatalogHandlerImpl = Depends(Provide[Container.catalog_handler]),
) -> List[CinemaResponse]:
    return [
        CinemaResponse(id=cinema.id, code=cinema.code, class_type=cinema.class_type.value)
        for cinema in catalog.list_cinemas()
    ]


@router.delete('/cinema/{cinema_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
@inject
def remove_cinema(
    cinema_id: int,
    catalog: CatalogHandlerImpl = Depends(Provide[Container.catalog_handler]),
) -> Response:
    catalog.remove_cinema(cinema_id=cinema_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post('/movie', status_code=status.HTTP_201_CREATED)
@Logger.io
@inject
def register_movie(
    request: MovieCreateRequest,
    catalog: CatalogHandlerImpl = Depends(Provide[Container.catalog_handler]),
) -> MovieResponse:
    movie = catalog.register_movie(
        movie_id=request.id, title=request.title, is_blockbuster=request.is_blockbuster
    )
    return MovieResponse(id=movie.id, title=movie.title, is_blockbuster=movie.is_blockbuster)


@router.get('/movie/{movie_id}')
@Logger.io
@inject
def get_movie(
    movie_id: int,
    catalog: CatalogHandlerImpl = Depends(Provide[Container.catalog_handler]),
) -> MovieResponse:
    movie = catalog.get_movie(movie_id=movie_id)
    return MovieResponse(id=movie.id, title=movie.title, is_blockbuster=movie.is_blockbuster)
