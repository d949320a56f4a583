"""Core enums and type definitions."""

from enum import StrEnum


class ProviderCapability(StrEnum):
    """Capabilities a movie provider may declare."""

    # Free-text keyword search returning listing results
    SEARCH = "search"
    # Direct lookup of a full record by provider-local ID
    FETCH = "fetch"
