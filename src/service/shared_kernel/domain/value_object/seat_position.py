"""
Seat Position Value Object

Shared between the scheduling, reservation and booking contexts.
Rows and columns are zero-based; the human-readable label uses a row letter
and a one-based column (``(0, 1)`` -> ``A2``).
"""

import attrs

from src.platform.exception.exceptions import DomainError


@attrs.define(frozen=True, order=True)
class SeatPosition:
    """Seat Position (Value Object)"""

    row: int
    col: int

    @property
    def label(self) -> str:
        return f'{_row_letter(self.row)}{self.col + 1}'

    @classmethod
    def from_label(cls, label: str) -> 'SeatPosition':
        """Create seat position from a label such as ``A1`` or ``AB12``"""
        letters = label.rstrip('0123456789').upper()
        digits = label[len(letters) :]
        if not letters or not letters.isalpha() or not digits or int(digits) < 1:
            raise DomainError(f'Invalid seat label: {label}. Expected: row letter + column (A1)')
        row = 0
        for char in letters:
            row = row * 26 + (ord(char) - ord('A') + 1)
        return cls(row=row - 1, col=int(digits) - 1)


def _row_letter(row: int) -> str:
    letters = ''
    n = row + 1
    while n > 0:
        n, remainder = divmod(n - 1, 26)
        letters = chr(ord('A') + remainder) + letters
    return letters
