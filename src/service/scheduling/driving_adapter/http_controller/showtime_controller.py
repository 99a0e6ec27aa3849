from typing import List, Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Response, status

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.scheduling.app.showtime_registry import ShowtimeRegistry
from src.service.scheduling.driving_adapter.http_controller.schema.showtime_schema import (
    SeatMapResponse,
    ShowtimeCreateRequest,
    ShowtimeDetailsUpdateRequest,
    ShowtimeRescheduleRequest,
    ShowtimeResponse,
)
from src.service.shared_kernel.domain.enum.seat_state import SeatState


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
@inject
def create_showtime(
    request: ShowtimeCreateRequest,
    registry: ShowtimeRegistry = Depends(Provide[Container.showtime_registry]),
    settings: Settings = Depends(Provide[Container.config_service]),
) -> ShowtimeResponse:
    showtime_id = registry.add(
        cinema_id=request.cinema_id,
        movie_id=request.movie_id,
        show_datetime=request.show_datetime,
        show_type=request.show_type,
        rows=request.rows or settings.DEFAULT_SEAT_ROWS,
        cols=request.cols or settings.DEFAULT_SEAT_COLS,
    )
    return ShowtimeResponse.from_entity(registry.get(showtime_id))


@router.get('')
@Logger.io
@inject
def list_showtimes(
    movie_id: Optional[int] = None,
    cinema_id: Optional[int] = None,
    registry: ShowtimeRegistry = Depends(Provide[Container.showtime_registry]),
) -> List[ShowtimeResponse]:
    if movie_id is not None:
        showtimes = registry.list_by_movie(movie_id)
    elif cinema_id is not None:
        showtimes = registry.list_by_cinema(cinema_id)
    else:
        showtimes = registry.list_all()
    return [ShowtimeResponse.from_entity(showtime) for showtime in showtimes]


@router.get('/{showtime_id}')
@Logger.io
@inject
def get_showtime(
    showtime_id: int,
    registry: ShowtimeRegistry = Depends(Provide[Container.showtime_registry]),
) -> ShowtimeResponse:
    return ShowtimeResponse.from_entity(registry.get(showtime_id))


@router.get('/{showtime_id}/seats')
@Logger.io
@inject
def get_seat_map(
    showtime_id: int,
    registry: ShowtimeRegistry = Depends(Provide[Container.showtime_registry]),
) -> SeatMapResponse:
    showtime = registry.get(showtime_id)
    grid = showtime.seats.snapshot()
    flat = [state for row in grid for state in row]
    return SeatMapResponse(
        showtime_id=showtime.id,
        rows=showtime.seats.rows,
        cols=showtime.seats.cols,
        seats=[[state.value for state in row] for row in grid],
        free=flat.count(SeatState.FREE),
        held=flat.count(SeatState.HELD),
        occupied=flat.count(SeatState.OCCUPIED),
    )


@router.patch('/{showtime_id}/schedule')
@Logger.io
@inject
def reschedule_showtime(
    showtime_id: int,
    request: ShowtimeRescheduleRequest,
    registry: ShowtimeRegistry = Depends(Provide[Container.showtime_registry]),
) -> ShowtimeResponse:
    showtime = registry.reschedule(
        showtime_id, cinema_id=request.cinema_id, show_datetime=request.show_datetime
    )
    return ShowtimeResponse.from_entity(showtime)


@router.patch('/{showtime_id}/details')
@Logger.io
@inject
def update_showtime_details(
    showtime_id: int,
    request: ShowtimeDetailsUpdateRequest,
    registry: ShowtimeRegistry = Depends(Provide[Container.showtime_registry]),
) -> ShowtimeResponse:
    showtime = registry.update_details(
        showtime_id, movie_id=request.movie_id, show_type=request.show_type
    )
    return ShowtimeResponse.from_entity(showtime)


@router.delete('/{showtime_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
@inject
def delete_showtime(
    showtime_id: int,
    registry: ShowtimeRegistry = Depends(Provide[Container.showtime_registry]),
) -> Response:
    registry.remove(showtime_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
