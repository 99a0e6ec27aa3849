"""
Pricing Table Value Object

Read-only snapshot of the staff-configured surcharge table. Public holidays
are carried for display only; they do not take part in price computation.
"""

from datetime import date
from decimal import Decimal
from typing import Mapping, Tuple

import attrs

from src.service.shared_kernel.domain.enum.cinema_class import CinemaClass
from src.service.shared_kernel.domain.enum.ticket_type import TicketType


def _to_decimal(value: object) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def _to_surcharge_map(value: Mapping) -> Mapping[str, Decimal]:
    return {str(key): _to_decimal(amount) for key, amount in value.items()}


@attrs.define(frozen=True)
class PricingTable:
    adult_ticket: Decimal = attrs.field(converter=_to_decimal)
    blockbuster_surcharge: Decimal = attrs.field(converter=_to_decimal)
    ticket_surcharges: Mapping[str, Decimal] = attrs.field(converter=_to_surcharge_map)
    cinema_surcharges: Mapping[str, Decimal] = attrs.field(converter=_to_surcharge_map)
    public_holidays: Tuple[date, ...] = attrs.field(converter=tuple, factory=tuple)

    def ticket_surcharge(self, ticket_type: TicketType | str) -> Decimal | None:
        return self.ticket_surcharges.get(str(ticket_type))

    def cinema_surcharge(self, cinema_class: CinemaClass | str) -> Decimal | None:
        return self.cinema_surcharges.get(str(cinema_class))

    def is_public_holiday(self, day: date) -> bool:
        return day in self.public_holidays
