"""
Component fixtures for unit tests

Components are wired by hand (no container) over fresh in-memory repositories.
"""

from datetime import datetime
from decimal import Decimal

import pytest

from src.platform.concurrency.resource_lock import KeyedLockPool
from src.service.booking.app.booking_ledger import BookingLedger
from src.service.booking.driven_adapter.repo.booking_repo_impl import BookingRepoImpl
from src.service.catalog.driven_adapter.catalog_handler_impl import CatalogHandlerImpl
from src.service.pricing.domain.pricing_engine import PricingEngine
from src.service.pricing.domain.pricing_table import PricingTable
from src.service.scheduling.app.showtime_registry import ShowtimeRegistry
from src.service.scheduling.driven_adapter.repo.showtime_repo_impl import ShowtimeRepoImpl
from src.service.shared_kernel.domain.enum.cinema_class import CinemaClass


BOOKED_AT = datetime(2024, 1, 1, 10, 30)


@pytest.fixture
def booking_repo() -> BookingRepoImpl:
    return BookingRepoImpl()


@pytest.fixture
def showtime_repo() -> ShowtimeRepoImpl:
    return ShowtimeRepoImpl()


@pytest.fixture
def catalog(booking_repo: BookingRepoImpl) -> CatalogHandlerImpl:
    catalog = CatalogHandlerImpl(booking_reference_query=booking_repo)
    catalog.register_cinema(cinema_id=1, code='XYZ', class_type=CinemaClass.PLATINUM)
    catalog.register_cinema(cinema_id=2, code='ABC', class_type=CinemaClass.STANDARD)
    catalog.register_movie(movie_id=1, title='Dune: Part Two', is_blockbuster=True)
    catalog.register_movie(movie_id=2, title='Past Lives', is_blockbuster=False)
    return catalog


@pytest.fixture
def cinema_locks() -> KeyedLockPool:
    return KeyedLockPool(prefix='cinema', timeout=1.0)


@pytest.fixture
def registry(
    showtime_repo: ShowtimeRepoImpl,
    booking_repo: BookingRepoImpl,
    catalog: CatalogHandlerImpl,
    cinema_locks: KeyedLockPool,
) -> ShowtimeRegistry:
    return ShowtimeRegistry(
        showtime_repo=showtime_repo,
        booking_reference_query=booking_repo,
        catalog_query_handler=catalog,
        cinema_locks=cinema_locks,
        lock_timeout=1.0,
    )


@pytest.fixture
def ledger(
    booking_repo: BookingRepoImpl,
    showtime_repo: ShowtimeRepoImpl,
    catalog: CatalogHandlerImpl,
    cinema_locks: KeyedLockPool,
) -> BookingLedger:
    return BookingLedger(
        booking_repo=booking_repo,
        showtime_repo=showtime_repo,
        catalog_query_handler=catalog,
        cinema_locks=cinema_locks,
        clock=lambda: BOOKED_AT,
    )


@pytest.fixture
def pricing_engine() -> PricingEngine:
    return PricingEngine()


@pytest.fixture
def pricing_table() -> PricingTable:
    return PricingTable(
        adult_ticket=Decimal('10.00'),
        blockbuster_surcharge=Decimal('3.00'),
        ticket_surcharges={
            'STUDENT': Decimal('-3.00'),
            'SENIOR': Decimal('-4.00'),
            'NON_PEAK': Decimal('0.00'),
            'PEAK': Decimal('2.00'),
        },
        cinema_surcharges={
            'STANDARD': Decimal('0.00'),
            'PLATINUM': Decimal('1.50'),
            'IMAX': Decimal('7.50'),
        },
    )
