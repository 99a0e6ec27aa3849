"""
Pricing Engine

    total = (base + ticket surcharge + cinema class surcharge
             + blockbuster surcharge if blockbuster) * seat count

Pure and deterministic: identical inputs always produce the identical amount,
rounded to cents.
"""

from decimal import ROUND_HALF_UP, Decimal

from src.platform.exception.exceptions import DomainError, UnknownSurchargeKeyError
from src.platform.logging.loguru_io import Logger
from src.service.pricing.domain.pricing_table import PricingTable
from src.service.shared_kernel.domain.enum.cinema_class import CinemaClass
from src.service.shared_kernel.domain.enum.ticket_type import TicketType


CENTS = Decimal('0.01')
CURRENCY = 'SGD'


class PricingEngine:
    @Logger.io
    def compute_price(
        self,
        *,
        base_price: Decimal,
        ticket_type: TicketType,
        cinema_class: CinemaClass,
        is_blockbuster: bool,
        seat_count: int,
        surcharge_table: PricingTable,
    ) -> Decimal:
        """
        Raises:
            UnknownSurchargeKeyError: ticket type or cinema class missing from the table
                (configuration error, not a user error)
            DomainError: seat_count below 1
        """
        if seat_count < 1:
            raise DomainError('Seat count must be positive')

        ticket_surcharge = surcharge_table.ticket_surcharge(ticket_type)
        if ticket_surcharge is None:
            raise UnknownSurchargeKeyError(f'No surcharge configured for ticket type {ticket_type}')

        cinema_surcharge = surcharge_table.cinema_surcharge(cinema_class)
        if cinema_surcharge is None:
            raise UnknownSurchargeKeyError(
                f'No surcharge configured for cinema class {cinema_class}'
            )

        blockbuster_surcharge = (
            surcharge_table.blockbuster_surcharge if is_blockbuster else Decimal('0')
        )
        unit_price = Decimal(base_price) + ticket_surcharge + cinema_surcharge + blockbuster_surcharge
        return (unit_price * seat_count).quantize(CENTS, rounding=ROUND_HALF_UP)

    @staticmethod
    def format_price(amount: Decimal) -> str:
        return f'{CURRENCY} {Decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)}'
