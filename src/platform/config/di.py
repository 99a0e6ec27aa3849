"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi.html
"""

from dependency_injector import containers, providers

from src.platform.concurrency.resource_lock import KeyedLockPool
from src.platform.config.core_setting import Settings
from src.service.booking.app.booking_ledger import BookingLedger
from src.service.booking.driven_adapter.repo.booking_repo_impl import BookingRepoImpl
from src.service.catalog.driven_adapter.catalog_handler_impl import CatalogHandlerImpl
from src.service.pricing.domain.pricing_engine import PricingEngine
from src.service.pricing.driven_adapter.settings_pricing_table_provider_impl import (
    SettingsPricingTableProviderImpl,
)
from src.service.scheduling.app.showtime_registry import ShowtimeRegistry
from src.service.scheduling.driven_adapter.repo.showtime_repo_impl import ShowtimeRepoImpl


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Repositories (in-memory; state lives as long as the singleton)
    booking_repo = providers.Singleton(BookingRepoImpl)
    showtime_repo = providers.Singleton(ShowtimeRepoImpl)

    # Catalog collaborator (cinema removal is guarded by the booking repo)
    catalog_handler = providers.Singleton(
        CatalogHandlerImpl,
        booking_reference_query=booking_repo,
    )

    # Pricing
    pricing_table_provider = providers.Singleton(
        SettingsPricingTableProviderImpl,
        settings=config_service,
    )
    pricing_engine = providers.Singleton(PricingEngine)

    # Per-cinema locks shared by scheduling and booking commits
    cinema_locks = providers.Singleton(
        KeyedLockPool,
        prefix='cinema',
        timeout=config_service.provided.LOCK_ACQUIRE_TIMEOUT_SECONDS,
    )

    # Scheduling
    showtime_registry = providers.Singleton(
        ShowtimeRegistry,
        showtime_repo=showtime_repo,
        booking_reference_query=booking_repo,
        catalog_query_handler=catalog_handler,
        cinema_locks=cinema_locks,
        lock_timeout=config_service.provided.LOCK_ACQUIRE_TIMEOUT_SECONDS,
    )

    # Booking
    booking_ledger = providers.Singleton(
        BookingLedger,
        booking_repo=booking_repo,
        showtime_repo=showtime_repo,
        catalog_query_handler=catalog_handler,
        cinema_locks=cinema_locks,
    )


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
