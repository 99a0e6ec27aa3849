from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from src.service.booking.domain.entity.booking_entity import Booking
from src.service.pricing.domain.pricing_engine import PricingEngine
from src.service.shared_kernel.domain.enum.ticket_type import TicketType


class BookingCreateRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'customer_id': 'alice',
                'showtime_id': 1,
                'seats': ['A1', 'A2'],
                'ticket_type': 'PEAK',
            }
        }
    )

    customer_id: str
    showtime_id: int
    seats: List[str]  # Seat labels: row letter + 1-based column (A1, B12)
    ticket_type: TicketType


class BookingResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'transaction_id': 'XYZ202401011800',
                'customer_id': 'alice',
                'cinema_id': 1,
                'movie_id': 1,
                'showtime_id': 1,
                'seats': ['A1', 'A2'],
                'ticket_type': 'PEAK',
                'price': '33.00',
                'price_display': 'SGD 33.00',
                'created_at': '2024-01-01T10:30:00',
            }
        }
    )

    transaction_id: str
    customer_id: str
    cinema_id: int
    movie_id: int
    showtime_id: int
    seats: List[str]
    ticket_type: str
    price: Decimal
    price_display: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, booking: Booking) -> 'BookingResponse':
        return cls(
            transaction_id=booking.transaction_id,
            customer_id=booking.customer_id,
            cinema_id=booking.cinema_id,
            movie_id=booking.movie_id,
            showtime_id=booking.showtime_id,
            seats=booking.seat_labels,
            ticket_type=booking.ticket_type.value,
            price=booking.price,
            price_display=PricingEngine.format_price(booking.price),
            created_at=booking.created_at,
        )
