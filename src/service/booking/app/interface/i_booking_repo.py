"""
Booking Repository Interface

Holds the full booking record set. Listing operations return bookings in
creation order.
"""

from abc import ABC, abstractmethod
from typing import List

from src.service.booking.domain.entity.booking_entity import Booking


class IBookingRepo(ABC):
    @abstractmethod
    def add(self, *, booking: Booking) -> Booking:
        pass

    @abstractmethod
    def get_by_transaction_id(self, *, transaction_id: str) -> Booking | None:
        pass

    @abstractmethod
    def remove(self, *, transaction_id: str) -> None:
        pass

    @abstractmethod
    def list_all(self) -> List[Booking]:
        pass

    @abstractmethod
    def list_by_customer(self, *, customer_id: str) -> List[Booking]:
        pass

    @abstractmethod
    def list_by_showtime(self, *, showtime_id: int) -> List[Booking]:
        pass
