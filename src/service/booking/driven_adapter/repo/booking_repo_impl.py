import threading
from typing import Dict, List

from src.service.booking.app.interface.i_booking_repo import IBookingRepo
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.shared_kernel.app.interface.i_booking_reference_query import (
    IBookingReferenceQuery,
)


class BookingRepoImpl(IBookingRepo, IBookingReferenceQuery):
    """In-memory booking store; also answers the showtime/cinema reference guards"""

    def __init__(self) -> None:
        self._bookings: Dict[str, Booking] = {}
        self._guard = threading.Lock()

    def add(self, *, booking: Booking) -> Booking:
        with self._guard:
            self._bookings[booking.transaction_id] = booking
        return booking

    def get_by_transaction_id(self, *, transaction_id: str) -> Booking | None:
        return self._bookings.get(transaction_id)

    def remove(self, *, transaction_id: str) -> None:
        with self._guard:
            self._bookings.pop(transaction_id, None)

    def list_all(self) -> List[Booking]:
        with self._guard:
            return list(self._bookings.values())

    def list_by_customer(self, *, customer_id: str) -> List[Booking]:
        return [b for b in self.list_all() if b.customer_id == customer_id]

    def list_by_showtime(self, *, showtime_id: int) -> List[Booking]:
        return [b for b in self.list_all() if b.showtime_id == showtime_id]

    def has_bookings_for_showtime(self, *, showtime_id: int) -> bool:
        return any(b.showtime_id == showtime_id for b in self.list_all())

    def has_bookings_for_cinema(self, *, cinema_id: int) -> bool:
        return any(b.cinema_id == cinema_id for b in self.list_all())
