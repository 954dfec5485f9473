from .in_memory_catalog import DEFAULT_TOOL_RATES, InMemoryToolCatalog

__all__ = [
    "DEFAULT_TOOL_RATES",
    "InMemoryToolCatalog",
]
