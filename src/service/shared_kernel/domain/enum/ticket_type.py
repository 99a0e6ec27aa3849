"""Ticket Type Enum"""

from enum import StrEnum


class TicketType(StrEnum):
    STUDENT = 'STUDENT'
    SENIOR = 'SENIOR'
    NON_PEAK = 'NON_PEAK'
    PEAK = 'PEAK'
