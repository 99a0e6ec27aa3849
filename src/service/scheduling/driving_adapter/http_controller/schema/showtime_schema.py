from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.service.scheduling.domain.entity.showtime_entity import Showtime
from src.service.scheduling.domain.enum.show_type import ShowType
from src.service.shared_kernel.domain.enum.seat_state import SeatState


class ShowtimeCreateRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'cinema_id': 1,
                'movie_id': 1,
                'show_datetime': '2024-01-01T18:00:00',
                'show_type': 'digital',
                'rows': 5,
                'cols': 5,
            }
        }
    )

    cinema_id: int
    movie_id: int
    show_datetime: datetime
    show_type: ShowType
    rows: Optional[int] = Field(default=None, ge=1)  # Defaults to DEFAULT_SEAT_ROWS
    cols: Optional[int] = Field(default=None, ge=1)  # Defaults to DEFAULT_SEAT_COLS


class ShowtimeRescheduleRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={'example': {'cinema_id': 2, 'show_datetime': '2024-01-01T21:00:00'}}
    )

    cinema_id: int
    show_datetime: datetime


class ShowtimeDetailsUpdateRequest(BaseModel):
    model_config = ConfigDict(json_schema_extra={'example': {'movie_id': 2, 'show_type': 'imax'}})

    movie_id: Optional[int] = None
    show_type: Optional[ShowType] = None


class ShowtimeResponse(BaseModel):
    id: int
    cinema_id: int
    movie_id: int
    show_datetime: datetime
    show_type: str
    rows: int
    cols: int
    free_seats: int

    @classmethod
    def from_entity(cls, showtime: Showtime) -> 'ShowtimeResponse':
        return cls(
            id=showtime.id,
            cinema_id=showtime.cinema_id,
            movie_id=showtime.movie_id,
            show_datetime=showtime.show_datetime,
            show_type=showtime.show_type.value,
            rows=showtime.seats.rows,
            cols=showtime.seats.cols,
            free_seats=showtime.seats.count(SeatState.FREE),
        )


class SeatMapResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'showtime_id': 1,
                'rows': 2,
                'cols': 2,
                'seats': [['occupied', 'free'], ['held', 'free']],
                'free': 2,
                'held': 1,
                'occupied': 1,
            }
        }
    )

    showtime_id: int
    rows: int
    cols: int
    seats: List[List[str]]
    free: int
    held: int
    occupied: int
