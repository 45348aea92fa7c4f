"""Pytest configuration and fixtures."""
from typing import List

import pytest

from zonemap.core.gazetteer import Gazetteer
from zonemap.core.models import (
    CameraCommand,
    GazetteerEntry,
    PlaceKind,
    PlaceNames,
    ViewportState,
)
from zonemap.core.resolver import LocationResolver
from zonemap.core.viewport import ViewportController
from zonemap.gazetteers.builtin import BuiltinSource
from zonemap.widgets.base import MapWidget


class RecordingMapWidget(MapWidget):
    """Map widget double that records camera commands."""

    def __init__(self):
        super().__init__()
        self.commands: List[CameraCommand] = []

    def set_camera(self, lat, lng, zoom, *, animated=True, duration_seconds=0.0):
        self.commands.append(CameraCommand(lat, lng, zoom, animated, duration_seconds))

    @property
    def last(self) -> CameraCommand:
        return self.commands[-1]

    def settle(self, command: CameraCommand = None):
        """Report a command (default: the latest) as finished animating."""
        command = command or self.last
        self._notify_settled(ViewportState(command.lat, command.lng, command.zoom))

    @property
    def listener_count(self) -> int:
        return len(self._listeners)


def country(name, lat, lng, zoom, aliases=()):
    return GazetteerEntry(PlaceNames(name, tuple(aliases)), lat, lng, PlaceKind.COUNTRY, zoom)


def city(name, lat, lng, country_name, aliases=(), zoom=12):
    return GazetteerEntry(PlaceNames(name, tuple(aliases)), lat, lng, PlaceKind.CITY, zoom, country_name)


@pytest.fixture
def sample_entries():
    """Small reference table with a name shared by a country and a city."""
    return [
        country("France", 46.2276, 2.2137, 6),
        country("Germany", 51.1657, 10.4515, 6, ["Deutschland", "ألمانيا"]),
        country("Egypt", 26.8206, 30.8025, 6, ["مصر"]),
        country("Luxembourg", 49.8153, 6.1296, 9),
        city("Paris", 48.8566, 2.3522, "France", ["باريس"]),
        city("Berlin", 52.5200, 13.4050, "Germany"),
        city("Cairo", 30.0444, 31.2357, "Egypt", ["القاهرة"]),
        city("Luxembourg", 49.6116, 6.1319, "Luxembourg"),
    ]


@pytest.fixture
def gazetteer(sample_entries):
    return Gazetteer(sample_entries)


@pytest.fixture
def resolver(gazetteer):
    return LocationResolver(gazetteer)


@pytest.fixture(scope="session")
def builtin_gazetteer():
    return Gazetteer(BuiltinSource().load_entries())


@pytest.fixture
def builtin_resolver(builtin_gazetteer):
    return LocationResolver(builtin_gazetteer)


@pytest.fixture
def widget():
    return RecordingMapWidget()


@pytest.fixture
def controller(widget):
    return ViewportController(widget, epsilon=1e-4, duration_seconds=1.5)
