from abc import ABC, abstractmethod

from src.service.pricing.domain.pricing_table import PricingTable


class IPricingTableProvider(ABC):
    """Settings collaborator: supplies the current surcharge table, read-only"""

    @abstractmethod
    def get_table(self) -> PricingTable:
        pass
