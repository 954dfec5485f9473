from rental.app.ports.outbound.tool_catalog import ToolCatalog
from rental.domain.models import CatalogEntry


class ListCatalogQueryHandler:
    def __init__(self, tool_catalog: ToolCatalog):
        self._catalog = tool_catalog

    def handle(self) -> list[CatalogEntry]:
        return self._catalog.list_entries()
