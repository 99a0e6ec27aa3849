"""
Transaction code: XXXYYYYMMDDhhmm

    XXX          cinema code (3 letters/digits)
    YYYYMMDDhhmm booking time, to the minute

Two bookings on the same cinema within one minute would share a code, so
the ledger appends ``-2``, ``-3``, ... until the code is unique.
"""

from datetime import datetime


def make_transaction_code(*, cinema_code: str, booked_at: datetime, attempt: int = 1) -> str:
    code = f'{cinema_code}{booked_at:%Y%m%d%H%M}'
    return code if attempt <= 1 else f'{code}-{attempt}'
