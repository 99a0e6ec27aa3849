from itertools import count
import threading
from typing import Dict, List

from src.service.scheduling.app.interface.i_showtime_repo import IShowtimeRepo
from src.service.scheduling.domain.entity.showtime_entity import Showtime


class ShowtimeRepoImpl(IShowtimeRepo):
    """In-memory showtime store; dict insertion order is the listing order"""

    def __init__(self) -> None:
        self._showtimes: Dict[int, Showtime] = {}
        self._ids = count(1)
        self._guard = threading.Lock()

    def next_id(self) -> int:
        with self._guard:
            return next(self._ids)

    def add(self, *, showtime: Showtime) -> Showtime:
        with self._guard:
            self._showtimes[showtime.id] = showtime
        return showtime

    def get_by_id(self, *, showtime_id: int) -> Showtime | None:
        return self._showtimes.get(showtime_id)

    def remove(self, *, showtime_id: int) -> None:
        with self._guard:
            self._showtimes.pop(showtime_id, None)

    def list_all(self) -> List[Showtime]:
        with self._guard:
            return list(self._showtimes.values())

    def list_by_cinema(self, *, cinema_id: int) -> List[Showtime]:
        return [s for s in self.list_all() if s.cinema_id == cinema_id]

    def list_by_movie(self, *, movie_id: int) -> List[Showtime]:
        return [s for s in self.list_all() if s.movie_id == movie_id]
