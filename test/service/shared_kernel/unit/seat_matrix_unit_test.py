"""
Unit tests for SeatMatrix

Tests:
- hold / release / commit state transitions
- Bounds checking
- All-or-nothing commit
- Concurrent holds never double-occupy a seat
- Seat labels
"""

from concurrent.futures import ThreadPoolExecutor
import threading

import pytest

from src.platform.exception.exceptions import (
    DomainError,
    InvalidStateError,
    LockContentionError,
    OutOfRangeError,
    SeatUnavailableError,
)
from src.service.shared_kernel.domain import SeatMatrix, SeatPosition, SeatState


@pytest.fixture
def matrix() -> SeatMatrix:
    return SeatMatrix(rows=3, cols=4, name='unit', lock_timeout=1.0)


class TestSeatMatrixCreation:
    def test_new_matrix_is_all_free(self, matrix: SeatMatrix) -> None:
        assert matrix.capacity == 12
        assert matrix.count(SeatState.FREE) == 12
        assert all(state is SeatState.FREE for row in matrix.snapshot() for state in row)

    @pytest.mark.parametrize('rows,cols', [(0, 5), (5, 0), (-1, 3)])
    def test_dimensions_must_be_positive(self, rows: int, cols: int) -> None:
        with pytest.raises(DomainError, match='must be at least 1'):
            SeatMatrix(rows=rows, cols=cols)


class TestHold:
    def test_hold_marks_seat_held(self, matrix: SeatMatrix) -> None:
        seat = matrix.hold(0, 1)

        assert seat == SeatPosition(row=0, col=1)
        assert matrix.state_at(0, 1) is SeatState.HELD
        assert matrix.count(SeatState.HELD) == 1

    def test_hold_taken_seat_raises_unavailable(self, matrix: SeatMatrix) -> None:
        matrix.hold(1, 1)

        with pytest.raises(SeatUnavailableError, match='B2 is already taken'):
            matrix.hold(1, 1)

    @pytest.mark.parametrize('row,col', [(-1, 0), (0, -1), (3, 0), (0, 4)])
    def test_hold_out_of_range(self, matrix: SeatMatrix, row: int, col: int) -> None:
        with pytest.raises(OutOfRangeError):
            matrix.hold(row, col)

        assert matrix.count(SeatState.FREE) == matrix.capacity


class TestRelease:
    def test_release_held_seat_frees_it(self, matrix: SeatMatrix) -> None:
        matrix.hold(2, 3)

        matrix.release(2, 3)

        assert matrix.state_at(2, 3) is SeatState.FREE

    def test_release_free_seat_is_invalid(self, matrix: SeatMatrix) -> None:
        before = matrix.snapshot()

        with pytest.raises(InvalidStateError, match='not held'):
            matrix.release(0, 0)

        assert matrix.snapshot() == before

    def test_release_occupied_seat_requires_cancellation(self, matrix: SeatMatrix) -> None:
        matrix.hold(0, 0)
        matrix.commit([SeatPosition(row=0, col=0)])

        with pytest.raises(InvalidStateError, match='occupied'):
            matrix.release(0, 0)
        assert matrix.state_at(0, 0) is SeatState.OCCUPIED

        matrix.release(0, 0, cancel_occupied=True)
        assert matrix.state_at(0, 0) is SeatState.FREE

    def test_release_held_skips_seats_no_longer_held(self, matrix: SeatMatrix) -> None:
        matrix.hold(0, 0)
        matrix.hold(0, 1)
        matrix.commit([SeatPosition(row=0, col=0)])

        released = matrix.release_held([SeatPosition(row=0, col=0), SeatPosition(row=0, col=1)])

        assert released == [SeatPosition(row=0, col=1)]
        assert matrix.state_at(0, 0) is SeatState.OCCUPIED
        assert matrix.state_at(0, 1) is SeatState.FREE


class TestCommit:
    def test_commit_occupies_every_held_seat(self, matrix: SeatMatrix) -> None:
        matrix.hold(0, 0)
        matrix.hold(0, 1)

        committed = matrix.commit([SeatPosition(row=0, col=1), SeatPosition(row=0, col=0)])

        assert committed == [SeatPosition(row=0, col=0), SeatPosition(row=0, col=1)]
        assert matrix.count(SeatState.OCCUPIED) == 2
        assert matrix.count(SeatState.HELD) == 0

    def test_commit_is_all_or_nothing(self, matrix: SeatMatrix) -> None:
        """
        Given: seat A1 held, seat A2 free
        When: committing A1 and A2 together
        Then: the commit fails and A1 stays HELD
        """
        matrix.hold(0, 0)
        before = matrix.snapshot()

        with pytest.raises(InvalidStateError, match='A2'):
            matrix.commit([SeatPosition(row=0, col=0), SeatPosition(row=0, col=1)])

        assert matrix.snapshot() == before

    def test_commit_out_of_range_changes_nothing(self, matrix: SeatMatrix) -> None:
        matrix.hold(0, 0)

        with pytest.raises(OutOfRangeError):
            matrix.commit([SeatPosition(row=0, col=0), SeatPosition(row=9, col=9)])

        assert matrix.state_at(0, 0) is SeatState.HELD


class TestConcurrency:
    def test_concurrent_holds_on_one_seat_admit_exactly_one(self) -> None:
        matrix = SeatMatrix(rows=1, cols=1, lock_timeout=5.0)

        def try_hold() -> bool:
            try:
                matrix.hold(0, 0)
            except SeatUnavailableError:
                return False
            return True

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: try_hold(), range(32)))

        assert results.count(True) == 1
        assert matrix.state_at(0, 0) is SeatState.HELD

    def test_busy_matrix_fails_fast(self) -> None:
        """
        Given: another thread holds the matrix lock
        When: holding a seat with a zero lock timeout
        Then: LockContentionError is raised and the seat stays FREE
        """
        matrix = SeatMatrix(rows=2, cols=2, name='busy', lock_timeout=0)
        locked = threading.Event()
        done = threading.Event()

        def keep_lock() -> None:
            with matrix._lock.hold():
                locked.set()
                done.wait(timeout=5)

        worker = threading.Thread(target=keep_lock)
        worker.start()
        try:
            assert locked.wait(timeout=5)
            with pytest.raises(LockContentionError, match='seats:busy'):
                matrix.hold(0, 0)
        finally:
            done.set()
            worker.join()

        assert matrix.state_at(0, 0) is SeatState.FREE


class TestSeatPosition:
    @pytest.mark.parametrize(
        'row,col,label', [(0, 0, 'A1'), (0, 1, 'A2'), (1, 11, 'B12'), (25, 0, 'Z1'), (26, 2, 'AA3')]
    )
    def test_label_round_trip(self, row: int, col: int, label: str) -> None:
        assert SeatPosition(row=row, col=col).label == label
        assert SeatPosition.from_label(label) == SeatPosition(row=row, col=col)

    @pytest.mark.parametrize('label', ['', '12', 'A', '1A', 'A-1', 'A0'])
    def test_invalid_label(self, label: str) -> None:
        with pytest.raises(DomainError, match='Invalid seat label'):
            SeatPosition.from_label(label)

    def test_render_marks_states(self, matrix: SeatMatrix) -> None:
        matrix.hold(0, 0)
        matrix.hold(0, 1)
        matrix.commit([SeatPosition(row=0, col=1)])

        lines = matrix.render().splitlines()

        assert len(lines) == 4
        assert lines[1].split() == ['A', '?', 'X', '.', '.']
