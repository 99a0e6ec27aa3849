"""Shared Kernel Domain Layer"""

from src.service.shared_kernel.domain.enum import SeatState
from src.service.shared_kernel.domain.seat_matrix import SeatMatrix
from src.service.shared_kernel.domain.value_object import SeatPosition

__all__ = ['SeatMatrix', 'SeatPosition', 'SeatState']
