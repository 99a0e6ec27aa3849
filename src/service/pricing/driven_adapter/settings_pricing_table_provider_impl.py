from src.platform.config.core_setting import Settings
from src.service.pricing.app.interface.i_pricing_table_provider import IPricingTableProvider
from src.service.pricing.domain.pricing_table import PricingTable


class SettingsPricingTableProviderImpl(IPricingTableProvider):
    """Builds the pricing table from application settings (env / .env)"""

    def __init__(self, *, settings: Settings) -> None:
        self.settings = settings

    def get_table(self) -> PricingTable:
        return PricingTable(
            adult_ticket=self.settings.ADULT_TICKET_PRICE,
            blockbuster_surcharge=self.settings.BLOCKBUSTER_SURCHARGE,
            ticket_surcharges=self.settings.TICKET_SURCHARGES,
            cinema_surcharges=self.settings.CINEMA_SURCHARGES,
            public_holidays=self.settings.PUBLIC_HOLIDAYS,
        )
