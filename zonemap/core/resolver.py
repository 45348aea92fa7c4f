"""Free-text place resolution against the gazetteer."""
from typing import List, Optional, Tuple

from zonemap.core.config import (
    ALIASES_ALWAYS_ON,
    COORDINATE_ZOOM,
    SUGGESTION_LIMIT,
    SUGGESTION_MIN_LENGTH,
)
from zonemap.core.fuzzy import closest_match, rank_suggestions
from zonemap.core.gazetteer import Gazetteer
from zonemap.core.models import (
    GazetteerEntry,
    LocationQuery,
    MatchKind,
    MatchThresholds,
    PlaceKind,
    ResolvedLocation,
)
from zonemap.core.normalization import (
    is_blank,
    normalize_alias,
    normalize_text,
    parse_coordinates,
)
from zonemap.utils.logging import log_structured


class LocationResolver:
    """Turns search text into a coordinate and zoom level."""

    def __init__(
        self,
        gazetteer: Gazetteer,
        thresholds: Optional[MatchThresholds] = None,
        aliases_always_on: bool = ALIASES_ALWAYS_ON,
        coordinate_zoom: int = COORDINATE_ZOOM,
    ):
        """
        Initialize resolver.

        Args:
            gazetteer: Reference index shared by every resolver
            thresholds: Fuzzy acceptance policy (defaults from config)
            aliases_always_on: Search alternate names even without a language
            coordinate_zoom: Zoom used for "lat, lng" input
        """
        self.gazetteer = gazetteer
        self.thresholds = thresholds or MatchThresholds()
        self.aliases_always_on = aliases_always_on
        self.coordinate_zoom = coordinate_zoom

    @property
    def kind_order(self) -> Tuple[PlaceKind, PlaceKind]:
        if self.thresholds.prefer_countries:
            return (PlaceKind.COUNTRY, PlaceKind.CITY)
        return (PlaceKind.CITY, PlaceKind.COUNTRY)

    def resolve(self, raw_text: str, language: Optional[str] = None) -> ResolvedLocation:
        """
        Resolve free text to a location.

        Resolution order:
        1. "lat, lng" coordinate input
        2. Exact primary name (countries, then cities), then exact alias
        3. Closest primary name within the length-scaled edit-distance
           threshold

        Misspelled or unknown input is an expected outcome and is reported
        as MatchKind.NOT_FOUND, never raised.

        Args:
            raw_text: Text typed by the user
            language: Alias channel to search (e.g. "ar"); None uses config

        Returns:
            ResolvedLocation
        """
        if is_blank(raw_text):
            return ResolvedLocation.not_found()

        normalized = normalize_text(raw_text)
        result = (
            self._resolve_coordinates(normalized)
            or self._exact_pass(normalized, language)
            or self._fuzzy_pass(normalized)
            or ResolvedLocation.not_found(raw_text.strip())
        )

        log_structured(
            "debug",
            "Location resolved",
            input_text=raw_text,
            language=language,
            match_kind=result.match_kind.value,
            label=result.label,
            distance=result.distance,
        )
        return result

    def resolve_query(self, query: LocationQuery) -> ResolvedLocation:
        return self.resolve(query.raw_text, query.language)

    def _alias_channel_active(self, language: Optional[str]) -> bool:
        return language is not None or self.aliases_always_on

    def _resolve_coordinates(self, normalized: str) -> Optional[ResolvedLocation]:
        coords = parse_coordinates(normalized)
        if coords is None:
            return None
        lat, lng = coords
        return ResolvedLocation(
            lat=lat,
            lng=lng,
            zoom=self.coordinate_zoom,
            label=f"{lat:.4f}, {lng:.4f}",
            match_kind=MatchKind.EXACT,
        )

    def _exact_pass(self, normalized: str, language: Optional[str]) -> Optional[ResolvedLocation]:
        for kind in self.kind_order:
            entry = self.gazetteer.find_primary(normalized, kind)
            if entry:
                return ResolvedLocation.from_entry(entry, MatchKind.EXACT)

        if self._alias_channel_active(language):
            alias_key = normalize_alias(normalized)
            for kind in self.kind_order:
                entry = self.gazetteer.find_alias(alias_key, kind)
                if entry:
                    return ResolvedLocation.from_entry(entry, MatchKind.EXACT)

        return None

    def _fuzzy_pass(self, normalized: str) -> Optional[ResolvedLocation]:
        # Aliases are matched exactly or not at all
        best: Optional[Tuple[GazetteerEntry, int]] = closest_match(
            normalized,
            (pair for kind in self.kind_order for pair in self.gazetteer.primary_candidates(kind)),
            self.thresholds.max_distance(len(normalized)),
        )
        if best is None:
            return None
        entry, distance = best
        return ResolvedLocation.from_entry(entry, MatchKind.FUZZY, distance=distance)

    def highlight_country(self, name: str) -> ResolvedLocation:
        """
        Exact country lookup for programmatic navigation (no fuzzy pass).

        Args:
            name: Country primary name or alias

        Returns:
            ResolvedLocation at the country's zoom, or NOT_FOUND
        """
        if is_blank(name):
            return ResolvedLocation.not_found()

        normalized = normalize_text(name)
        entry = (
            self.gazetteer.find_primary(normalized, PlaceKind.COUNTRY)
            or self.gazetteer.find_alias(normalize_alias(normalized), PlaceKind.COUNTRY)
        )
        if entry is None:
            return ResolvedLocation.not_found(name.strip())
        return ResolvedLocation.from_entry(entry, MatchKind.EXACT)

    def suggest(self, prefix: str, limit: int = SUGGESTION_LIMIT) -> List[str]:
        """
        Autocomplete primary names for partially typed input.

        Args:
            prefix: Text typed so far
            limit: Maximum number of names

        Returns:
            Names ranked exact, prefix, word-beginning, then substring
        """
        if len(normalize_text(prefix)) < SUGGESTION_MIN_LENGTH:
            return []
        choices = [name for kind in self.kind_order for name in self.gazetteer.names(kind)]
        return rank_suggestions(prefix, choices, limit=limit)

    def country_of(self, city_name: str) -> Optional[str]:
        return self.gazetteer.country_of(city_name)

    def cities_in(self, country_name: str) -> List[GazetteerEntry]:
        return list(self.gazetteer.cities_in(country_name))
