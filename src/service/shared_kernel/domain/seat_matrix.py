"""
Seat Matrix - per-showtime seat inventory

[Business Invariants]
- Dimensions are fixed at creation and never resized
- A cell is exactly one of FREE / HELD / OCCUPIED
- A cell becomes OCCUPIED only via commit() of coordinates that were HELD
- commit() is all-or-nothing: on failure no cell changes state

Every mutation runs under the matrix's own lock, so hold/release/commit on
the same matrix never interleave.
"""

from collections.abc import Iterable
from typing import List, Optional, Tuple

import attrs

from src.platform.concurrency.resource_lock import ResourceLock
from src.platform.exception.exceptions import (
    DomainError,
    InvalidStateError,
    OutOfRangeError,
    SeatUnavailableError,
)
from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.domain.enum.seat_state import SeatState
from src.service.shared_kernel.domain.value_object.seat_position import SeatPosition


SeatGrid = Tuple[Tuple[SeatState, ...], ...]


def _validate_dimension(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value < 1:
        raise DomainError(f'Seat matrix {attribute.name} must be at least 1')


@attrs.define(eq=False)
class SeatMatrix:
    rows: int = attrs.field(validator=_validate_dimension)
    cols: int = attrs.field(validator=_validate_dimension)
    name: str = 'seat-matrix'
    lock_timeout: Optional[float] = None
    _cells: List[List[SeatState]] = attrs.field(init=False, repr=False)
    _lock: ResourceLock = attrs.field(init=False, repr=False)

    def __attrs_post_init__(self) -> None:
        self._cells = [[SeatState.FREE] * self.cols for _ in range(self.rows)]
        self._lock = ResourceLock(name=f'seats:{self.name}', timeout=self.lock_timeout)

    @property
    def capacity(self) -> int:
        return self.rows * self.cols

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise OutOfRangeError(
                f'Seat ({row}, {col}) is outside the {self.rows}x{self.cols} seat matrix'
            )

    def state_at(self, row: int, col: int) -> SeatState:
        self._check_bounds(row, col)
        return self._cells[row][col]

    def count(self, state: SeatState) -> int:
        return sum(row.count(state) for row in self._cells)

    @Logger.io
    def hold(self, row: int, col: int) -> SeatPosition:
        """FREE -> HELD"""
        with self._lock.hold():
            self._check_bounds(row, col)
            seat = SeatPosition(row=row, col=col)
            if self._cells[row][col] is not SeatState.FREE:
                raise SeatUnavailableError(f'Seat {seat.label} is already taken. Try another')
            self._cells[row][col] = SeatState.HELD
            return seat

    @Logger.io
    def release(self, row: int, col: int, *, cancel_occupied: bool = False) -> SeatPosition:
        """
        HELD -> FREE, or OCCUPIED -> FREE when cancelling a booking

        Raises:
            InvalidStateError: the seat is already FREE, or it is OCCUPIED and this
                is not a booking cancellation
        """
        with self._lock.hold():
            self._check_bounds(row, col)
            seat = SeatPosition(row=row, col=col)
            state = self._cells[row][col]
            if state is SeatState.FREE:
                raise InvalidStateError(f'Seat {seat.label} is not held')
            if state is SeatState.OCCUPIED and not cancel_occupied:
                raise InvalidStateError(
                    f'Seat {seat.label} is occupied and can only be freed by cancelling its booking'
                )
            self._cells[row][col] = SeatState.FREE
            return seat

    @Logger.io
    def commit(self, seats: Iterable[SeatPosition]) -> List[SeatPosition]:
        """HELD -> OCCUPIED for every seat, or nothing at all"""
        seats = sorted(set(seats))
        with self._lock.hold():
            for seat in seats:
                self._check_bounds(seat.row, seat.col)
            stale = [s.label for s in seats if self._cells[s.row][s.col] is not SeatState.HELD]
            if stale:
                raise InvalidStateError(f'Seats are not held: {", ".join(stale)}')
            for seat in seats:
                self._cells[seat.row][seat.col] = SeatState.OCCUPIED
        Logger.base.info(f'💺 [SEATS] {self.name}: committed {len(seats)} seats')
        return seats

    @Logger.io
    def release_held(self, seats: Iterable[SeatPosition]) -> List[SeatPosition]:
        """HELD -> FREE for those seats that are still HELD; others are left untouched"""
        released = []
        with self._lock.hold():
            for seat in seats:
                self._check_bounds(seat.row, seat.col)
                if self._cells[seat.row][seat.col] is SeatState.HELD:
                    self._cells[seat.row][seat.col] = SeatState.FREE
                    released.append(seat)
        return released

    def snapshot(self) -> SeatGrid:
        with self._lock.hold():
            return tuple(tuple(row) for row in self._cells)

    def render(self) -> str:
        """Plain text seat map ('.' free, '?' held, 'X' occupied)"""
        symbols = {SeatState.FREE: '.', SeatState.HELD: '?', SeatState.OCCUPIED: 'X'}
        header = '    ' + ' '.join(f'{c + 1:>2}' for c in range(self.cols))
        lines = [header]
        for r, row in enumerate(self.snapshot()):
            letter = SeatPosition(row=r, col=0).label[:-1]
            lines.append(f'{letter:>3} ' + ' '.join(f'{symbols[state]:>2}' for state in row))
        return '\n'.join(lines)
