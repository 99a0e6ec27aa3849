"""
Showtime Repository Interface

Holds the full showtime record set. Listing operations return showtimes in
insertion order.
"""

from abc import ABC, abstractmethod
from typing import List

from src.service.scheduling.domain.entity.showtime_entity import Showtime


class IShowtimeRepo(ABC):
    @abstractmethod
    def next_id(self) -> int:
        pass

    @abstractmethod
    def add(self, *, showtime: Showtime) -> Showtime:
        pass

    @abstractmethod
    def get_by_id(self, *, showtime_id: int) -> Showtime | None:
        pass

    @abstractmethod
    def remove(self, *, showtime_id: int) -> None:
        pass

    @abstractmethod
    def list_all(self) -> List[Showtime]:
        pass

    @abstractmethod
    def list_by_cinema(self, *, cinema_id: int) -> List[Showtime]:
        pass

    @abstractmethod
    def list_by_movie(self, *, movie_id: int) -> List[Showtime]:
        pass
