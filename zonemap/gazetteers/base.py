"""Base class for gazetteer data sources."""
from abc import ABC, abstractmethod
from typing import List

from zonemap.core.models import GazetteerEntry


class GazetteerSource(ABC):
    """Base class for gazetteer reference data sources."""

    @abstractmethod
    def load_entries(self) -> List[GazetteerEntry]:
        """
        Load every entry of the source.

        Returns:
            Entries in insertion order (countries and cities may be mixed)

        Raises:
            GazetteerError: if the data is missing or malformed
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """Get source name."""
        pass
