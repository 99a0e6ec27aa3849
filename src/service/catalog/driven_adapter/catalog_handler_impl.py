import threading
from typing import Dict, List

from src.platform.exception.exceptions import (
    ConflictError,
    HasDependentBookingsError,
    NotFoundError,
)
from src.platform.logging.loguru_io import Logger
from src.service.catalog.app.interface.i_catalog_query_handler import ICatalogQueryHandler
from src.service.catalog.domain.entity.cinema_entity import Cinema
from src.service.catalog.domain.entity.movie_entity import Movie
from src.service.shared_kernel.app.interface.i_booking_reference_query import (
    IBookingReferenceQuery,
)
from src.service.shared_kernel.domain.enum.cinema_class import CinemaClass


class CatalogHandlerImpl(ICatalogQueryHandler):
    """
    In-memory catalog of cinemas and movies

    Stands in for the catalog collaborator; also enforces the cinema removal
    guard (a cinema referenced by bookings cannot be removed).
    """

    def __init__(self, *, booking_reference_query: IBookingReferenceQuery) -> None:
        self.booking_reference_query = booking_reference_query
        self._cinemas: Dict[int, Cinema] = {}
        self._movies: Dict[int, Movie] = {}
        self._guard = threading.Lock()

    @Logger.io
    def register_cinema(self, *, cinema_id: int, code: str, class_type: CinemaClass) -> Cinema:
        cinema = Cinema(id=cinema_id, code=code, class_type=class_type)
        with self._guard:
            if cinema_id in self._cinemas:
                raise ConflictError(f'Cinema {cinema_id} already exists')
            self._cinemas[cinema_id] = cinema
        return cinema

    @Logger.io
    def register_movie(self, *, movie_id: int, title: str, is_blockbuster: bool = False) -> Movie:
        movie = Movie(id=movie_id, title=title, is_blockbuster=is_blockbuster)
        with self._guard:
            if movie_id in self._movies:
                raise ConflictError(f'Movie {movie_id} already exists')
            self._movies[movie_id] = movie
        return movie

    def get_cinema(self, *, cinema_id: int) -> Cinema:
        cinema = self._cinemas.get(cinema_id)
        if cinema is None:
            raise NotFoundError(f'Cinema {cinema_id} not found')
        return cinema

    def get_movie(self, *, movie_id: int) -> Movie:
        movie = self._movies.get(movie_id)
        if movie is None:
            raise NotFoundError(f'Movie {movie_id} not found')
        return movie

    def list_cinemas(self) -> List[Cinema]:
        return list(self._cinemas.values())

    @Logger.io
    def remove_cinema(self, *, cinema_id: int) -> None:
        self.get_cinema(cinema_id=cinema_id)
        if self.booking_reference_query.has_bookings_for_cinema(cinema_id=cinema_id):
            raise HasDependentBookingsError(
                f'Unable to remove cinema {cinema_id} with associated bookings'
            )
        with self._guard:
            self._cinemas.pop(cinema_id, None)
        Logger.base.info(f'🗑️ [CATALOG] Cinema {cinema_id} removed')
