"""Show Type Enum"""

from enum import StrEnum


class ShowType(StrEnum):
    DIGITAL = 'digital'
    THREE_D = '3d'
    IMAX = 'imax'
