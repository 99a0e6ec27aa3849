from typing import List, Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Response, status

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.booking_ledger import BookingLedger
from src.service.booking.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    BookingResponse,
)
from src.service.shared_kernel.domain.value_object.seat_position import SeatPosition


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
def create_booking(
    request: BookingCreateRequest,
    booking_use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingResponse:
    positions = [SeatPosition.from_label(label) for label in request.seats]
    booking = booking_use_case.execute(
        customer_id=request.customer_id,
        showtime_id=request.showtime_id,
        seats=[(seat.row, seat.col) for seat in positions],
        ticket_type=request.ticket_type,
    )
    return BookingResponse.from_entity(booking)


@router.get('')
@Logger.io
@inject
def list_bookings(
    customer_id: Optional[str] = None,
    showtime_id: Optional[int] = None,
    ledger: BookingLedger = Depends(Provide[Container.booking_ledger]),
) -> List[BookingResponse]:
    if customer_id is not None:
        bookings = ledger.list_by_customer(customer_id)
    elif showtime_id is not None:
        bookings = ledger.list_by_showtime(showtime_id)
    else:
        raise DomainError('customer_id or showtime_id is required')
    return [BookingResponse.from_entity(booking) for booking in bookings]


@router.get('/{transaction_id}')
@Logger.io
@inject
def get_booking(
    transaction_id: str,
    ledger: BookingLedger = Depends(Provide[Container.booking_ledger]),
) -> BookingResponse:
    return BookingResponse.from_entity(ledger.get(transaction_id))


@router.delete('/{transaction_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
@inject
def remove_booking(
    transaction_id: str,
    ledger: BookingLedger = Depends(Provide[Container.booking_ledger]),
) -> Response:
    # Record only; the seats stay occupied
    ledger.remove_booking(transaction_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post('/{transaction_id}/cancel')
@Logger.io
@inject
def cancel_booking(
    transaction_id: str,
    ledger: BookingLedger = Depends(Provide[Container.booking_ledger]),
) -> BookingResponse:
    return BookingResponse.from_entity(ledger.cancel_booking(transaction_id))
