from abc import ABC, abstractmethod
from typing import Optional

from rental.domain.models import CatalogEntry, ToolRatePolicy


class ToolCatalog(ABC):
    @abstractmethod
    def lookup(self, tool_code: str) -> Optional[ToolRatePolicy]:
        """
        Get the rate policy for an exact tool code, if the catalog carries it.
        """
        raise NotImplementedError()

    @abstractmethod
    def list_entries(self) -> list[CatalogEntry]:
        """
        Every tool in the catalog, for display.
        """
        raise NotImplementedError()
