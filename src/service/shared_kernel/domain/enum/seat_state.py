"""Seat State Enum"""

from enum import StrEnum


class SeatState(StrEnum):
    FREE = 'free'
    HELD = 'held'
    OCCUPIED = 'occupied'
