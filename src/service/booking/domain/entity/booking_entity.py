from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterable, Optional, Tuple

import attrs

from src.platform.exception.exceptions import DomainError, EmptySelectionError
from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.domain.enum.ticket_type import TicketType
from src.service.shared_kernel.domain.value_object.seat_position import SeatPosition


@attrs.define(frozen=True)
class Booking:
    """Booking transaction; immutable once created, only ever deleted"""

    transaction_id: str
    customer_id: str
    cinema_id: int
    movie_id: int
    showtime_id: int
    seats: Tuple[SeatPosition, ...]
    ticket_type: TicketType
    price: Decimal
    created_at: Optional[datetime] = None

    @property
    def seat_count(self) -> int:
        return len(self.seats)

    @property
    def seat_labels(self) -> list[str]:
        return [seat.label for seat in self.seats]

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        transaction_id: str,
        customer_id: str,
        cinema_id: int,
        movie_id: int,
        showtime_id: int,
        seats: Iterable[SeatPosition],
        ticket_type: TicketType,
        price: Decimal,
        created_at: Optional[datetime] = None,
    ) -> 'Booking':
        seats = tuple(sorted(set(seats)))
        if not seats:
            raise EmptySelectionError('No seats selected for booking')
        if not customer_id or not customer_id.strip():
            raise DomainError('customer_id is required for booking')
        if price < 0:
            raise DomainError('Booking price cannot be negative')

        return cls(
            transaction_id=transaction_id,
            customer_id=customer_id,
            cinema_id=cinema_id,
            movie_id=movie_id,
            showtime_id=showtime_id,
            seats=seats,
            ticket_type=TicketType(ticket_type),
            price=Decimal(price),
            created_at=created_at or datetime.now(timezone.utc),
        )
