"""
Catalog Query Handler Interface

Catalog collaborator as seen by the booking engine: cinema class and code,
movie blockbuster flag. Catalog management itself lives elsewhere.
"""

from abc import ABC, abstractmethod

from src.service.catalog.domain.entity.cinema_entity import Cinema
from src.service.catalog.domain.entity.movie_entity import Movie


class ICatalogQueryHandler(ABC):
    @abstractmethod
    def get_cinema(self, *, cinema_id: int) -> Cinema:
        """Raises NotFoundError when the cinema is unknown"""
        pass

    @abstractmethod
    def get_movie(self, *, movie_id: int) -> Movie:
        """Raises NotFoundError when the movie is unknown"""
        pass
