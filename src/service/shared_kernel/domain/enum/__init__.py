"""Shared Kernel Enums"""

from src.service.shared_kernel.domain.enum.cinema_class import CinemaClass
from src.service.shared_kernel.domain.enum.seat_state import SeatState
from src.service.shared_kernel.domain.enum.ticket_type import TicketType

__all__ = ['CinemaClass', 'SeatState', 'TicketType']
