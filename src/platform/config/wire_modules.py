"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.booking.app.command import create_booking_use_case
from src.service.booking.driving_adapter.http_controller import booking_controller
from src.service.catalog.driving_adapter.http_controller import catalog_controller
from src.service.scheduling.driving_adapter.http_controller import showtime_controller


WIRE_MODULES: list[ModuleType] = [
    create_booking_use_case,
    booking_controller,
    catalog_controller,
    showtime_controller,
]
