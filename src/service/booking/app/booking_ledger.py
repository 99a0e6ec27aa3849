"""
Booking Ledger

Creates booking transactions from confirmed reservations and answers booking
lookups.

[Business Invariants]
- The booking record is validated BEFORE any seat changes state, and seats are
  committed on the showtime's matrix BEFORE the record is stored: a failed
  commit leaves neither occupied seats nor a booking behind
- Transaction codes are globally unique, including codes of removed bookings
- Commits run under the showtime's cinema lock, shared with ShowtimeRegistry,
  so a booking never lands on a showtime that is being removed
- remove_booking() deletes the record only; the seats stay occupied.
  cancel_booking() deletes the record and frees its seats
"""

from collections.abc import Callable, Iterable
from datetime import datetime
from decimal import Decimal
import threading
from typing import List, Optional, Set

from src.platform.concurrency.resource_lock import KeyedLockPool
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_booking_repo import IBookingRepo
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.booking.domain.transaction_code import make_transaction_code
from src.service.catalog.app.interface.i_catalog_query_handler import ICatalogQueryHandler
from src.service.scheduling.app.interface.i_showtime_repo import IShowtimeRepo
from src.service.scheduling.domain.entity.showtime_entity import Showtime
from src.service.shared_kernel.domain.enum.ticket_type import TicketType
from src.service.shared_kernel.domain.value_object.seat_position import SeatPosition


class BookingLedger:
    def __init__(
        self,
        *,
        booking_repo: IBookingRepo,
        showtime_repo: IShowtimeRepo,
        catalog_query_handler: ICatalogQueryHandler,
        cinema_locks: Optional[KeyedLockPool] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.booking_repo = booking_repo
        self.showtime_repo = showtime_repo
        self.catalog_query_handler = catalog_query_handler
        self.cinema_locks = cinema_locks or KeyedLockPool(prefix='cinema')
        self.clock = clock
        self._mint_lock = threading.Lock()
        self._minted: Set[str] = set()

    def _get_showtime(self, showtime_id: int) -> Showtime:
        showtime = self.showtime_repo.get_by_id(showtime_id=showtime_id)
        if showtime is None:
            raise NotFoundError(f'Showtime {showtime_id} not found')
        return showtime

    def _next_transaction_id(self, *, cinema_code: str) -> str:
        """Caller holds _mint_lock; the code is only claimed once the booking is stored"""
        booked_at = self.clock()
        attempt = 1
        while True:
            transaction_id = make_transaction_code(
                cinema_code=cinema_code, booked_at=booked_at, attempt=attempt
            )
            if (
                transaction_id not in self._minted
                and self.booking_repo.get_by_transaction_id(transaction_id=transaction_id) is None
            ):
                return transaction_id
            attempt += 1

    @Logger.io
    def commit_booking(
        self,
        *,
        customer_id: str,
        cinema_id: int,
        movie_id: int,
        showtime_id: int,
        seats: Iterable[SeatPosition],
        ticket_type: TicketType,
        price: Decimal,
    ) -> Booking:
        """
        Raises:
            NotFoundError: unknown (or concurrently removed) showtime, unknown cinema
            DomainError / EmptySelectionError: the booking record itself is invalid
            InvalidStateError: some seats are no longer HELD (stale reservation)
            LockContentionError: the cinema is busy with a schedule change
        """
        seats = tuple(seats)
        cinema = self.catalog_query_handler.get_cinema(cinema_id=cinema_id)
        showtime = self._get_showtime(showtime_id)

        with self.cinema_locks.hold(showtime.cinema_id):
            # Re-read under the lock: a showtime removed meanwhile is never booked
            showtime = self._get_showtime(showtime_id)

            with self._mint_lock:
                transaction_id = self._next_transaction_id(cinema_code=cinema.code)
                booking = Booking.create(
                    transaction_id=transaction_id,
                    customer_id=customer_id,
                    cinema_id=cinema_id,
                    movie_id=movie_id,
                    showtime_id=showtime_id,
                    seats=seats,
                    ticket_type=ticket_type,
                    price=price,
                )
                showtime.seats.commit(booking.seats)
                self.booking_repo.add(booking=booking)
                self._minted.add(transaction_id)

        Logger.base.info(
            f'🎟️ [LEDGER] Booking {transaction_id}: showtime {showtime_id}, '
            f'seats {booking.seat_labels}, price {booking.price}'
        )
        return booking

    @Logger.io
    def get(self, transaction_id: str) -> Booking:
        booking = self.booking_repo.get_by_transaction_id(transaction_id=transaction_id)
        if booking is None:
            raise NotFoundError(f'Booking {transaction_id} not found')
        return booking

    @Logger.io
    def remove_booking(self, transaction_id: str) -> Booking:
        """Delete the record only - its seats stay OCCUPIED"""
        booking = self.get(transaction_id)
        self.booking_repo.remove(transaction_id=transaction_id)
        Logger.base.info(f'🗑️ [LEDGER] Booking {transaction_id} removed')
        return booking

    @Logger.io
    def cancel_booking(self, transaction_id: str) -> Booking:
        """Delete the record and free its seats (OCCUPIED -> FREE)"""
        booking = self.get(transaction_id)
        showtime = self._get_showtime(booking.showtime_id)
        self.booking_repo.remove(transaction_id=transaction_id)
        for seat in booking.seats:
            showtime.seats.release(seat.row, seat.col, cancel_occupied=True)
        Logger.base.info(
            f'❌ [LEDGER] Booking {transaction_id} cancelled, released seats {booking.seat_labels}'
        )
        return booking

    def list_by_customer(self, customer_id: str) -> List[Booking]:
        return self.booking_repo.list_by_customer(customer_id=customer_id)

    def list_by_showtime(self, showtime_id: int) -> List[Booking]:
        return self.booking_repo.list_by_showtime(showtime_id=showtime_id)

    def has_bookings_for_showtime(self, showtime_id: int) -> bool:
        return bool(self.booking_repo.list_by_showtime(showtime_id=showtime_id))

    def has_bookings_for_cinema(self, cinema_id: int) -> bool:
        return any(b.cinema_id == cinema_id for b in self.booking_repo.list_all())
