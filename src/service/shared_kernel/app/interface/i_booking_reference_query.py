"""
Booking Reference Query Interface

Answers "does anything still book this showtime / cinema?" for the deletion
and edit guards of the scheduling and catalog contexts.
"""

from abc import ABC, abstractmethod


class IBookingReferenceQuery(ABC):
    @abstractmethod
    def has_bookings_for_showtime(self, *, showtime_id: int) -> bool:
        pass

    @abstractmethod
    def has_bookings_for_cinema(self, *, cinema_id: int) -> bool:
        pass
