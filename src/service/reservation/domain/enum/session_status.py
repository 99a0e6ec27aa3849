"""Reservation Session Status Enum"""

from enum import StrEnum


class SessionStatus(StrEnum):
    SELECTING = 'selecting'
    CONFIRMED = 'confirmed'
    DISCARDED = 'discarded'
