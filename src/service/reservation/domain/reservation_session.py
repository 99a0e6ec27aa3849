"""
Reservation Session - interactive seat selection over one seat matrix

State machine:
    SELECTING --confirm()--> CONFIRMED
    SELECTING --discard()--> DISCARDED

A session is a scoped resource. Used as a context manager it guarantees that
every seat it still holds is released when the block exits, whatever the
exit path:

    with ReservationSession(seats=showtime.seats) as session:
        session.select_seat(0, 0)
        seats = session.confirm()
        ledger.commit_booking(..., seats=seats, ...)

- exiting while SELECTING discards the selection
- exiting CONFIRMED while seats are still HELD (the booking commit failed or
  never happened) releases the holds the booking never turned into occupancy

A session belongs to exactly one caller and must not be shared.
"""

from types import TracebackType
from typing import List, Optional, Self, Tuple

from src.platform.exception.exceptions import EmptySelectionError, InvalidStateError
from src.platform.logging.loguru_io import Logger
from src.service.reservation.domain.enum.session_status import SessionStatus
from src.service.shared_kernel.domain.enum.seat_state import SeatState
from src.service.shared_kernel.domain.seat_matrix import SeatMatrix
from src.service.shared_kernel.domain.value_object.seat_position import SeatPosition


class ReservationSession:
    def __init__(self, *, seats: SeatMatrix, showtime_id: Optional[int] = None) -> None:
        self.seats = seats
        self.showtime_id = showtime_id
        self.status = SessionStatus.SELECTING
        self._held: List[SeatPosition] = []

    def __repr__(self) -> str:
        held = ', '.join(seat.label for seat in self._held)
        return f'ReservationSession(showtime_id={self.showtime_id}, status={self.status}, held=[{held}])'

    def _has_unbooked_holds(self) -> bool:
        return any(self.seats.state_at(s.row, s.col) is SeatState.HELD for s in self._held)

    @property
    def held(self) -> Tuple[SeatPosition, ...]:
        return tuple(self._held)

    def _ensure_selecting(self, action: str) -> None:
        if self.status is not SessionStatus.SELECTING:
            raise InvalidStateError(f'Cannot {action} a {self.status} reservation session')

    @Logger.io
    def select_seat(self, row: int, col: int) -> SeatPosition:
        """
        Hold a seat for this session

        Raises:
            OutOfRangeError / SeatUnavailableError: user-correctable, prompt again
        """
        self._ensure_selecting('select seats in')
        seat = self.seats.hold(row, col)
        self._held.append(seat)
        return seat

    @Logger.io
    def undo_last(self) -> SeatPosition:
        """Release the most recently selected seat"""
        self._ensure_selecting('undo seats in')
        if not self._held:
            raise EmptySelectionError('No seat to undo')
        seat = self._held.pop()
        self.seats.release(seat.row, seat.col)
        return seat

    @Logger.io
    def confirm(self) -> Tuple[SeatPosition, ...]:
        """
        Finalize the selection; the seats stay HELD until the booking commits them

        Raises:
            InvalidStateError: session is not SELECTING
            EmptySelectionError: nothing selected
        """
        self._ensure_selecting('confirm')
        if not self._held:
            raise EmptySelectionError()
        self.status = SessionStatus.CONFIRMED
        Logger.base.info(
            f'✅ [SESSION] Confirmed {len(self._held)} seats for showtime {self.showtime_id}'
        )
        return tuple(self._held)

    @Logger.io
    def discard(self) -> List[SeatPosition]:
        """Release every held seat; a second call is a no-op"""
        if self.status is SessionStatus.DISCARDED:
            return []
        self._ensure_selecting('discard')
        released = []
        for seat in self._held:
            released.append(self.seats.release(seat.row, seat.col))
        self._held.clear()
        self.status = SessionStatus.DISCARDED
        Logger.base.info(
            f'↩️ [SESSION] Discarded selection of {len(released)} seats for showtime {self.showtime_id}'
        )
        return released

    @Logger.io
    def release_unbooked(self) -> List[SeatPosition]:
        """
        Undo a confirmation whose booking never committed

        Only seats still HELD are released; seats the booking already made
        OCCUPIED stay occupied.
        """
        if self.status is not SessionStatus.CONFIRMED:
            raise InvalidStateError(f'Cannot roll back a {self.status} reservation session')
        released = self.seats.release_held(self._held)
        self._held.clear()
        self.status = SessionStatus.DISCARDED
        if released:
            Logger.base.warning(
                f'⚠️ [SESSION] Rolled back {len(released)} unbooked seats '
                f'for showtime {self.showtime_id}'
            )
        return released

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self.status is SessionStatus.SELECTING:
            self.discard()
        elif self.status is SessionStatus.CONFIRMED and self._has_unbooked_holds():
            self.release_unbooked()
