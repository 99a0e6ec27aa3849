from datetime import datetime, timezone
from typing import Optional

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.scheduling.domain.enum.show_type import ShowType
from src.service.shared_kernel.domain.seat_matrix import SeatMatrix


@attrs.define(eq=False)
class Showtime:
    id: int
    cinema_id: int
    movie_id: int
    show_datetime: datetime
    show_type: ShowType
    seats: SeatMatrix = attrs.field(repr=False)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        id: int,
        cinema_id: int,
        movie_id: int,
        show_datetime: datetime,
        show_type: ShowType,
        rows: int,
        cols: int,
        lock_timeout: Optional[float] = None,
    ) -> 'Showtime':
        now = datetime.now(timezone.utc)
        return cls(
            id=id,
            cinema_id=cinema_id,
            movie_id=movie_id,
            show_datetime=show_datetime,
            show_type=ShowType(show_type),
            seats=SeatMatrix(
                rows=rows, cols=cols, name=f'showtime-{id}', lock_timeout=lock_timeout
            ),
            created_at=now,
            updated_at=now,
        )

    def move_to(self, *, cinema_id: int, show_datetime: datetime) -> None:
        self.cinema_id = cinema_id
        self.show_datetime = show_datetime
        self.updated_at = datetime.now(timezone.utc)

    def change_details(
        self, *, movie_id: Optional[int] = None, show_type: Optional[ShowType] = None
    ) -> None:
        if movie_id is not None:
            self.movie_id = movie_id
        if show_type is not None:
            self.show_type = ShowType(show_type)
        self.updated_at = datetime.now(timezone.utc)
