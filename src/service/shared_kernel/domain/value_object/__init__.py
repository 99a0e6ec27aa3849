"""Shared Kernel Value Objects"""

from src.service.shared_kernel.domain.value_object.seat_position import SeatPosition

__all__ = ['SeatPosition']
