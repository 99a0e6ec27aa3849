"""
Unit tests for Settings env parsing

Surcharge tables and holidays accept JSON or comma separated env strings.
"""

from datetime import date
from decimal import Decimal

import pytest

from src.platform.config.core_setting import Settings


class TestSettingsParsing:
    def test_defaults(self) -> None:
        settings = Settings()

        assert settings.ADULT_TICKET_PRICE == Decimal('10.00')
        assert settings.TICKET_SURCHARGES['PEAK'] == Decimal('2.00')
        assert settings.CINEMA_SURCHARGES['IMAX'] == Decimal('7.50')

    def test_surcharges_from_json_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('CINEMA_SURCHARGES', '{"STANDARD": "0", "PLATINUM": "6.25"}')

        settings = Settings()

        assert settings.CINEMA_SURCHARGES == {
            'STANDARD': Decimal('0'),
            'PLATINUM': Decimal('6.25'),
        }

    def test_surcharges_from_pairs_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('TICKET_SURCHARGES', 'STUDENT=-2.5, PEAK=1')

        settings = Settings()

        assert settings.TICKET_SURCHARGES == {'STUDENT': Decimal('-2.5'), 'PEAK': Decimal('1')}

    def test_public_holidays_from_comma_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('PUBLIC_HOLIDAYS', '2024-01-01, 2024-12-25')

        settings = Settings()

        assert settings.PUBLIC_HOLIDAYS == [date(2024, 1, 1), date(2024, 12, 25)]

    def test_cors_origins_from_comma_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('BACKEND_CORS_ORIGINS', 'http://a.test, http://b.test')

        assert Settings().BACKEND_CORS_ORIGINS == ['http://a.test', 'http://b.test']
