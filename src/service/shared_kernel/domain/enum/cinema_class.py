"""Cinema Class Enum"""

from enum import StrEnum


class CinemaClass(StrEnum):
    STANDARD = 'STANDARD'
    PLATINUM = 'PLATINUM'
    IMAX = 'IMAX'
