"""Data models for gazetteer entries, resolved locations and viewport state."""
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Dict, Any

from zonemap.core.config import (
    FUZZY_SHORT_INPUT_LENGTH,
    FUZZY_SHORT_MAX_DISTANCE,
    FUZZY_LONG_MAX_DISTANCE,
    PREFER_COUNTRIES,
)


class PlaceKind(str, Enum):
    COUNTRY = "country"
    CITY = "city"


class MatchKind(str, Enum):
    EXACT = "exact"
    FUZZY = "fuzzy"
    NOT_FOUND = "not_found"


class MoveOutcome(str, Enum):
    """What a viewport controller did with a target."""
    MOVED = "moved"
    UNCHANGED = "unchanged"
    NOT_FOUND = "not_found"
    DETACHED = "detached"


class ViewportPhase(str, Enum):
    IDLE = "idle"
    ANIMATING = "animating"
    TORN_DOWN = "torn_down"


@dataclass(frozen=True)
class PlaceNames:
    """Primary name plus ordered alternate names (other spellings, Arabic)."""
    primary: str
    aliases: Tuple[str, ...] = ()


@dataclass(frozen=True)
class GazetteerEntry:
    """A country or city in the reference table."""
    names: PlaceNames
    lat: float
    lng: float
    kind: PlaceKind
    default_zoom: int
    country: Optional[str] = None

    @property
    def name(self) -> str:
        return self.names.primary


@dataclass(frozen=True)
class LocationQuery:
    """A single user search action."""
    raw_text: str
    language: Optional[str] = None


@dataclass(frozen=True)
class ResolvedLocation:
    """Result of resolving a query against the gazetteer."""
    lat: Optional[float]
    lng: Optional[float]
    zoom: Optional[int]
    label: str
    match_kind: MatchKind
    kind: Optional[PlaceKind] = None
    distance: int = 0

    @classmethod
    def not_found(cls, label: str = "") -> "ResolvedLocation":
        return cls(lat=None, lng=None, zoom=None, label=label, match_kind=MatchKind.NOT_FOUND)

    @classmethod
    def from_entry(cls, entry: GazetteerEntry, match_kind: MatchKind, distance: int = 0) -> "ResolvedLocation":
        return cls(
            lat=entry.lat,
            lng=entry.lng,
            zoom=entry.default_zoom,
            label=entry.name,
            match_kind=match_kind,
            kind=entry.kind,
            distance=distance,
        )

    @property
    def found(self) -> bool:
        return self.match_kind != MatchKind.NOT_FOUND

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "lat": self.lat,
            "lng": self.lng,
            "zoom": self.zoom,
            "label": self.label,
            "match_kind": self.match_kind.value,
            "kind": self.kind.value if self.kind else None,
            "distance": self.distance,
        }


@dataclass(frozen=True)
class ExternalHighlight:
    """
    Programmatic viewport target, e.g. an admin highlighting a country or a
    marker click. Funnels into the same contract as a search result.
    """
    lat: float
    lng: float
    zoom: int
    label: str = ""
    source: str = "highlight"

    def to_resolved(self) -> ResolvedLocation:
        return ResolvedLocation(
            lat=self.lat,
            lng=self.lng,
            zoom=self.zoom,
            label=self.label,
            match_kind=MatchKind.EXACT,
        )


@dataclass(frozen=True)
class ViewportState:
    """Last camera position commanded by a viewport controller."""
    lat: float
    lng: float
    zoom: int

    def matches(self, other: "ViewportState", epsilon: float) -> bool:
        return (
            abs(self.lat - other.lat) <= epsilon
            and abs(self.lng - other.lng) <= epsilon
            and self.zoom == other.zoom
        )

    def is_valid(self) -> bool:
        if not all(isinstance(v, (int, float)) for v in (self.lat, self.lng, self.zoom)):
            return False
        if not all(math.isfinite(v) for v in (self.lat, self.lng, self.zoom)):
            return False
        if self.zoom != int(self.zoom):
            return False
        return -90.0 <= self.lat <= 90.0 and -180.0 <= self.lng <= 180.0


@dataclass(frozen=True)
class MatchThresholds:
    """Edit-distance acceptance policy for the fuzzy pass."""
    short_input_length: int = FUZZY_SHORT_INPUT_LENGTH
    short_max_distance: int = FUZZY_SHORT_MAX_DISTANCE
    long_max_distance: int = FUZZY_LONG_MAX_DISTANCE
    prefer_countries: bool = PREFER_COUNTRIES

    def max_distance(self, length: int) -> int:
        if length <= self.short_input_length:
            return self.short_max_distance
        return self.long_max_distance


@dataclass
class CameraCommand:
    """A camera move as issued to a map widget."""
    lat: float
    lng: float
    zoom: int
    animated: bool = True
    duration_seconds: float = 0.0

    @property
    def state(self) -> ViewportState:
        return ViewportState(self.lat, self.lng, self.zoom)
