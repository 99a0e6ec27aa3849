from typing import Iterable, Self, Tuple

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.booking_ledger import BookingLedger
from src.service.booking.domain.entity.booking_entity import Booking
from src.service.catalog.app.interface.i_catalog_query_handler import ICatalogQueryHandler
from src.service.pricing.app.interface.i_pricing_table_provider import IPricingTableProvider
from src.service.pricing.domain.pricing_engine import PricingEngine
from src.service.reservation.domain.reservation_session import ReservationSession
from src.service.scheduling.app.showtime_registry import ShowtimeRegistry
from src.service.shared_kernel.domain.enum.ticket_type import TicketType


class CreateBookingUseCase:
    """
    Create booking use case - seat selection, pricing and ledger commit in one call

    Flow:
    1. Look up the showtime, its cinema and its movie
    2. Open a reservation session and hold every requested seat
    3. Confirm the selection and price it (the engine is the only source of a price)
    4. Commit the booking through the ledger

    Any failure before the ledger commit releases every seat the session held;
    a failed commit releases the seats that never became OCCUPIED.
    """

    def __init__(
        self,
        *,
        showtime_registry: ShowtimeRegistry,
        catalog_query_handler: ICatalogQueryHandler,
        pricing_table_provider: IPricingTableProvider,
        pricing_engine: PricingEngine,
        booking_ledger: BookingLedger,
    ) -> None:
        self.showtime_registry = showtime_registry
        self.catalog_query_handler = catalog_query_handler
        self.pricing_table_provider = pricing_table_provider
        self.pricing_engine = pricing_engine
        self.booking_ledger = booking_ledger

    @classmethod
    @inject
    def depends(
        cls,
        showtime_registry: ShowtimeRegistry = Depends(Provide[Container.showtime_registry]),
        catalog_query_handler: ICatalogQueryHandler = Depends(
            Provide[Container.catalog_handler]
        ),
        pricing_table_provider: IPricingTableProvider = Depends(
            Provide[Container.pricing_table_provider]
        ),
        pricing_engine: PricingEngine = Depends(Provide[Container.pricing_engine]),
        booking_ledger: BookingLedger = Depends(Provide[Container.booking_ledger]),
    ) -> Self:
        return cls(
            showtime_registry=showtime_registry,
            catalog_query_handler=catalog_query_handler,
            pricing_table_provider=pricing_table_provider,
            pricing_engine=pricing_engine,
            booking_ledger=booking_ledger,
        )

    @Logger.io
    def execute(
        self,
        *,
        customer_id: str,
        showtime_id: int,
        seats: Iterable[Tuple[int, int]],
        ticket_type: TicketType,
    ) -> Booking:
        """
        Raises:
            NotFoundError: unknown showtime, cinema or movie
            OutOfRangeError / SeatUnavailableError: a requested seat cannot be held
            EmptySelectionError: no seats requested
            UnknownSurchargeKeyError: pricing table is missing an entry
        """
        showtime = self.showtime_registry.get(showtime_id)
        cinema = self.catalog_query_handler.get_cinema(cinema_id=showtime.cinema_id)
        movie = self.catalog_query_handler.get_movie(movie_id=showtime.movie_id)
        table = self.pricing_table_provider.get_table()

        with ReservationSession(seats=showtime.seats, showtime_id=showtime.id) as session:
            for row, col in seats:
                session.select_seat(row, col)

            confirmed = session.confirm()
            price = self.pricing_engine.compute_price(
                base_price=table.adult_ticket,
                ticket_type=ticket_type,
                cinema_class=cinema.class_type,
                is_blockbuster=movie.is_blockbuster,
                seat_count=len(confirmed),
                surcharge_table=table,
            )

            booking = self.booking_ledger.commit_booking(
                customer_id=customer_id,
                cinema_id=cinema.id,
                movie_id=movie.id,
                showtime_id=showtime.id,
                seats=confirmed,
                ticket_type=ticket_type,
                price=price,
            )

        Logger.base.info(
            f'🎫 [BOOKING] {booking.transaction_id}: {booking.seat_count} seats, '
            f'{self.pricing_engine.format_price(booking.price)}'
        )
        return booking
