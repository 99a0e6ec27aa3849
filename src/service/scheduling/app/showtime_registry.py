"""
Showtime Registry

Owns every showtime and enforces the scheduling invariant:

[Business Invariants]
- No two showtimes of the same cinema share an exactly equal show datetime
  (point equality; the movie runtime is not consulted)
- Movie / show type of a showtime can only change while it has no bookings
- A showtime can only be removed while it has no bookings
- Cinema and movie must be known to the catalog

Clash check-then-act runs under the affected cinema locks, so two concurrent
add/reschedule calls can never admit the same slot twice. The lock pool is
shared with BookingLedger, which commits bookings under the same cinema lock.
"""

from datetime import datetime
from typing import List, Optional

from src.platform.concurrency.resource_lock import KeyedLockPool
from src.platform.exception.exceptions import (
    ClashDetectedError,
    HasDependentBookingsError,
    NotFoundError,
)
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_catalog_query_handler import ICatalogQueryHandler
from src.service.scheduling.app.interface.i_showtime_repo import IShowtimeRepo
from src.service.scheduling.domain.entity.showtime_entity import Showtime
from src.service.scheduling.domain.enum.show_type import ShowType
from src.service.shared_kernel.app.interface.i_booking_reference_query import (
    IBookingReferenceQuery,
)


class ShowtimeRegistry:
    def __init__(
        self,
        *,
        showtime_repo: IShowtimeRepo,
        booking_reference_query: IBookingReferenceQuery,
        catalog_query_handler: ICatalogQueryHandler,
        cinema_locks: Optional[KeyedLockPool] = None,
        lock_timeout: Optional[float] = None,
    ) -> None:
        self.showtime_repo = showtime_repo
        self.booking_reference_query = booking_reference_query
        self.catalog_query_handler = catalog_query_handler
        self.lock_timeout = lock_timeout
        self._cinema_locks = cinema_locks or KeyedLockPool(prefix='cinema', timeout=lock_timeout)

    def has_clash(
        self,
        cinema_id: int,
        show_datetime: datetime,
        exclude_showtime_id: Optional[int] = None,
    ) -> bool:
        return any(
            showtime.show_datetime == show_datetime
            for showtime in self.showtime_repo.list_by_cinema(cinema_id=cinema_id)
            if showtime.id != exclude_showtime_id
        )

    @Logger.io
    def add(
        self,
        *,
        cinema_id: int,
        movie_id: int,
        show_datetime: datetime,
        show_type: ShowType,
        rows: int,
        cols: int,
    ) -> int:
        self.catalog_query_handler.get_cinema(cinema_id=cinema_id)
        self.catalog_query_handler.get_movie(movie_id=movie_id)

        with self._cinema_locks.hold(cinema_id):
            if self.has_clash(cinema_id, show_datetime):
                raise ClashDetectedError(
                    f'Cinema {cinema_id} already has a showing at {show_datetime:%Y-%m-%d %H:%M}'
                )
            showtime = Showtime.create(
                id=self.showtime_repo.next_id(),
                cinema_id=cinema_id,
                movie_id=movie_id,
                show_datetime=show_datetime,
                show_type=show_type,
                rows=rows,
                cols=cols,
                lock_timeout=self.lock_timeout,
            )
            self.showtime_repo.add(showtime=showtime)

        Logger.base.info(
            f'🎬 [SCHEDULE] Showtime {showtime.id}: cinema {cinema_id}, movie {movie_id} '
            f'at {show_datetime:%Y-%m-%d %H:%M} ({rows}x{cols})'
        )
        return showtime.id

    @Logger.io
    def get(self, showtime_id: int) -> Showtime:
        showtime = self.showtime_repo.get_by_id(showtime_id=showtime_id)
        if showtime is None:
            raise NotFoundError(f'Showtime {showtime_id} not found')
        return showtime

    @Logger.io
    def reschedule(
        self, showtime_id: int, *, cinema_id: int, show_datetime: datetime
    ) -> Showtime:
        showtime = self.get(showtime_id)
        self.catalog_query_handler.get_cinema(cinema_id=cinema_id)
        # Both the source and the target cinema are locked for a move across cinemas
        with self._cinema_locks.hold(showtime.cinema_id, cinema_id):
            if self.has_clash(cinema_id, show_datetime, exclude_showtime_id=showtime_id):
                raise ClashDetectedError(
                    f'Cinema {cinema_id} already has a showing at {show_datetime:%Y-%m-%d %H:%M}'
                )
            previous = (showtime.cinema_id, showtime.show_datetime)
            showtime.move_to(cinema_id=cinema_id, show_datetime=show_datetime)

        Logger.base.info(
            f'🔁 [SCHEDULE] Showtime {showtime_id}: cinema {previous[0]} -> {cinema_id}, '
            f'{previous[1]:%Y-%m-%d %H:%M} -> {show_datetime:%Y-%m-%d %H:%M}'
        )
        return showtime

    @Logger.io
    def update_details(
        self,
        showtime_id: int,
        *,
        movie_id: Optional[int] = None,
        show_type: Optional[ShowType] = None,
    ) -> Showtime:
        showtime = self.get(showtime_id)
        if movie_id is not None:
            self.catalog_query_handler.get_movie(movie_id=movie_id)
        with self._cinema_locks.hold(showtime.cinema_id):
            if self.booking_reference_query.has_bookings_for_showtime(showtime_id=showtime_id):
                raise HasDependentBookingsError(
                    f'Unable to change showtime {showtime_id} with associated bookings'
                )
            showtime.change_details(movie_id=movie_id, show_type=show_type)
        return showtime

    @Logger.io
    def remove(self, showtime_id: int) -> None:
        showtime = self.get(showtime_id)
        with self._cinema_locks.hold(showtime.cinema_id):
            if self.booking_reference_query.has_bookings_for_showtime(showtime_id=showtime_id):
                raise HasDependentBookingsError(
                    f'Unable to remove showtime {showtime_id} with associated bookings'
                )
            self.showtime_repo.remove(showtime_id=showtime_id)
        Logger.base.info(f'🗑️ [SCHEDULE] Showtime {showtime_id} removed')

    def list_all(self) -> List[Showtime]:
        return self.showtime_repo.list_all()

    def list_by_movie(self, movie_id: int) -> List[Showtime]:
        return self.showtime_repo.list_by_movie(movie_id=movie_id)

    def list_by_cinema(self, cinema_id: int) -> List[Showtime]:
        return self.showtime_repo.list_by_cinema(cinema_id=cinema_id)
