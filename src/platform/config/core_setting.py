from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Annotated, Dict, List

import orjson
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


def _parse_mapping(v: str | Dict[str, Decimal]) -> Dict[str, Decimal]:
    # Accepts JSON ('{"PEAK": 2.5}') or 'PEAK=2.5,STUDENT=-3' style env strings
    if isinstance(v, dict):
        return v
    if isinstance(v, str):
        if v.strip().startswith('{'):
            return orjson.loads(v)
        pairs = [item.split('=', 1) for item in v.split(',') if item.strip()]
        return {key.strip(): Decimal(value.strip()) for key, value in pairs}
    return {}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Cinema Booking Engine'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # CORS
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = []

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',')]
        elif isinstance(v, str):
            return orjson.loads(v)
        elif isinstance(v, list):
            return v
        return []

    # Lock contention policy: seconds to wait for a seat matrix / cinema lock (0 = fail fast)
    LOCK_ACQUIRE_TIMEOUT_SECONDS: float = 1.0

    # Seat matrix defaults for newly scheduled showtimes
    DEFAULT_SEAT_ROWS: int = 10
    DEFAULT_SEAT_COLS: int = 16

    # Pricing table
    ADULT_TICKET_PRICE: Decimal = Decimal('10.00')
    BLOCKBUSTER_SURCHARGE: Decimal = Decimal('3.00')
    TICKET_SURCHARGES: Annotated[Dict[str, Decimal], NoDecode] = {
        'STUDENT': Decimal('-3.00'),
        'SENIOR': Decimal('-4.00'),
        'NON_PEAK': Decimal('0.00'),
        'PEAK': Decimal('2.00'),
    }
    CINEMA_SURCHARGES: Annotated[Dict[str, Decimal], NoDecode] = {
        'STANDARD': Decimal('0.00'),
        'PLATINUM': Decimal('5.00'),
        'IMAX': Decimal('7.50'),
    }
    PUBLIC_HOLIDAYS: Annotated[List[date], NoDecode] = []

    @field_validator('TICKET_SURCHARGES', 'CINEMA_SURCHARGES', mode='before')
    @classmethod
    def assemble_surcharges(cls, v: str | Dict[str, Decimal]) -> Dict[str, Decimal]:
        return _parse_mapping(v)

    @field_validator('PUBLIC_HOLIDAYS', mode='before')
    @classmethod
    def assemble_public_holidays(cls, v: str | List[date]) -> List[date] | List[str]:
        if isinstance(v, str):
            if v.strip().startswith('['):
                return orjson.loads(v)
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, list):
            return v
        return []


settings = Settings()  # type: ignore
