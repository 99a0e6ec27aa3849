"""Shared Kernel Interfaces"""

from src.service.shared_kernel.app.interface.i_booking_reference_query import (
    IBookingReferenceQuery,
)

__all__ = ['IBookingReferenceQuery']
