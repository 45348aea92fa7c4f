"""Immutable country/city index with a secondary alias channel."""
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from zonemap.core.errors import GazetteerError
from zonemap.core.models import GazetteerEntry, PlaceKind
from zonemap.core.normalization import normalize_alias, normalize_text
from zonemap.utils.logging import log_structured


class Gazetteer:
    """
    Read-only reference table of countries and cities.

    Entries are keyed by normalized primary name within each kind. Aliases
    are looked up through a separate index and must be unique across the
    whole table. The instance is never mutated after construction and can be
    shared between any number of resolvers and viewports.
    """

    def __init__(self, entries: Iterable[GazetteerEntry]):
        """
        Build the index.

        Args:
            entries: Gazetteer entries in insertion order

        Raises:
            GazetteerError: on duplicate primary names within a kind, or an
                alias registered under two entries
        """
        primaries: Dict[PlaceKind, Dict[str, GazetteerEntry]] = {
            PlaceKind.COUNTRY: {},
            PlaceKind.CITY: {},
        }
        aliases: Dict[PlaceKind, Dict[str, GazetteerEntry]] = {
            PlaceKind.COUNTRY: {},
            PlaceKind.CITY: {},
        }
        alias_owner: Dict[str, GazetteerEntry] = {}

        for entry in entries:
            key = normalize_text(entry.name)
            if not key:
                raise GazetteerError("Gazetteer entry with an empty primary name")
            table = primaries[entry.kind]
            if key in table:
                raise GazetteerError(f"Duplicate {entry.kind.value} name: {entry.name!r}")
            table[key] = entry

            for alias in entry.names.aliases:
                alias_key = normalize_alias(alias)
                if not alias_key:
                    continue
                owner = alias_owner.get(alias_key)
                if owner is not None and owner is not entry:
                    raise GazetteerError(
                        f"Alias {alias!r} registered under both {owner.name!r} and {entry.name!r}"
                    )
                alias_owner[alias_key] = entry
                aliases[entry.kind][alias_key] = entry

        self._primaries = MappingProxyType(
            {kind: MappingProxyType(table) for kind, table in primaries.items()}
        )
        self._aliases = MappingProxyType(
            {kind: MappingProxyType(table) for kind, table in aliases.items()}
        )
        grouped: Dict[str, List[GazetteerEntry]] = {}
        for city in primaries[PlaceKind.CITY].values():
            if city.country:
                grouped.setdefault(normalize_text(city.country), []).append(city)
        self._cities_by_country = MappingProxyType(
            {country: tuple(cities) for country, cities in grouped.items()}
        )

        log_structured(
            "debug",
            "Gazetteer index built",
            countries=len(primaries[PlaceKind.COUNTRY]),
            cities=len(primaries[PlaceKind.CITY]),
            aliases=len(alias_owner),
        )

    def __len__(self) -> int:
        return sum(len(table) for table in self._primaries.values())

    def __iter__(self) -> Iterator[GazetteerEntry]:
        for kind in (PlaceKind.COUNTRY, PlaceKind.CITY):
            yield from self._primaries[kind].values()

    def entries(self, kind: PlaceKind) -> Tuple[GazetteerEntry, ...]:
        return tuple(self._primaries[kind].values())

    def find_primary(self, normalized: str, kind: PlaceKind) -> Optional[GazetteerEntry]:
        """Exact lookup of an already-normalized primary name."""
        return self._primaries[kind].get(normalized)

    def find_alias(self, alias_key: str, kind: PlaceKind) -> Optional[GazetteerEntry]:
        """Exact lookup of an alias normalized with normalize_alias()."""
        return self._aliases[kind].get(alias_key)

    def primary_candidates(self, kind: PlaceKind) -> Iterator[Tuple[str, GazetteerEntry]]:
        """(normalized primary name, entry) pairs in insertion order."""
        return iter(self._primaries[kind].items())

    def names(self, kind: PlaceKind) -> List[str]:
        return [entry.name for entry in self._primaries[kind].values()]

    def country_of(self, city_name: str) -> Optional[str]:
        city = self.find_primary(normalize_text(city_name), PlaceKind.CITY)
        return city.country if city else None

    def cities_in(self, country_name: str) -> Tuple[GazetteerEntry, ...]:
        return self._cities_by_country.get(normalize_text(country_name), ())
