"""Tests for the viewport controller."""
import math

import pytest

from zonemap.core.config import WORLD_LAT, WORLD_LNG, WORLD_ZOOM
from zonemap.core.errors import InvalidTargetError
from zonemap.core.models import (
    ExternalHighlight,
    MatchKind,
    MoveOutcome,
    ResolvedLocation,
    ViewportPhase,
    ViewportState,
)
from zonemap.core.viewport import ViewportController


def located(lat, lng, zoom, label="target"):
    return ResolvedLocation(lat=lat, lng=lng, zoom=zoom, label=label, match_kind=MatchKind.EXACT)


def test_first_target_issues_animated_command(controller, widget):
    outcome = controller.set_target(located(48.8566, 2.3522, 12))

    assert outcome == MoveOutcome.MOVED
    assert len(widget.commands) == 1
    command = widget.last
    assert (command.lat, command.lng, command.zoom) == (48.8566, 2.3522, 12)
    assert command.animated is True
    assert command.duration_seconds == 1.5


def test_state_is_updated_when_command_is_issued(controller):
    controller.set_target(located(10.0, 20.0, 5))

    assert controller.state == ViewportState(10.0, 20.0, 5)
    assert controller.phase == ViewportPhase.ANIMATING


def test_same_target_twice_issues_one_command(controller, widget):
    target = located(33.8547, 35.8623, 8)

    assert controller.set_target(target) == MoveOutcome.MOVED
    assert controller.set_target(target) == MoveOutcome.UNCHANGED
    assert len(widget.commands) == 1
    assert controller.commands_issued == 1


def test_dedup_uses_epsilon_and_exact_zoom(controller, widget):
    controller.set_target(located(33.8547, 35.8623, 8))

    assert controller.set_target(located(33.85475, 35.86225, 8)) == MoveOutcome.UNCHANGED
    assert controller.set_target(located(33.8547, 35.8623, 9)) == MoveOutcome.MOVED
    assert controller.set_target(located(33.8600, 35.8623, 9)) == MoveOutcome.MOVED
    assert len(widget.commands) == 3


def test_settled_animation_returns_to_idle(controller, widget):
    controller.set_target(located(10.0, 20.0, 5))
    widget.settle()
    assert controller.phase == ViewportPhase.IDLE

    # Re-targeting the settled position is still a no-op
    assert controller.set_target(located(10.0, 20.0, 5)) == MoveOutcome.UNCHANGED


def test_newer_target_preempts_in_flight_animation(controller, widget):
    controller.set_target(located(46.2276, 2.2137, 6, "France"))
    first = widget.last
    controller.set_target(located(51.1657, 10.4515, 6, "Germany"))

    # The abandoned animation reporting in does not settle the controller
    widget.settle(first)
    assert controller.phase == ViewportPhase.ANIMATING
    assert controller.state == ViewportState(51.1657, 10.4515, 6)

    widget.settle()
    assert controller.phase == ViewportPhase.IDLE
    assert (widget.last.lat, widget.last.lng) == (51.1657, 10.4515)


def test_rapid_search_sequence_rests_on_latest(builtin_resolver, controller, widget):
    france = builtin_resolver.resolve("France")
    germany = builtin_resolver.resolve("Germany")

    controller.set_target(france)
    controller.set_target(germany)
    widget.settle()

    assert len(widget.commands) == 2
    assert (widget.last.lat, widget.last.lng, widget.last.zoom) == (germany.lat, germany.lng, germany.zoom)
    assert controller.state == ViewportState(germany.lat, germany.lng, germany.zoom)
    assert controller.phase == ViewportPhase.IDLE


def test_returning_to_previous_target_mid_flight_moves(controller, widget):
    a = located(1.0, 1.0, 5)
    b = located(2.0, 2.0, 5)
    controller.set_target(a)
    controller.set_target(b)
    assert controller.set_target(a) == MoveOutcome.MOVED
    assert len(widget.commands) == 3


def test_not_found_moves_nothing(controller, widget):
    controller.set_target(located(10.0, 20.0, 5))

    outcome = controller.set_target(ResolvedLocation.not_found("Atlantis"))

    assert outcome == MoveOutcome.NOT_FOUND
    assert len(widget.commands) == 1
    assert controller.state == ViewportState(10.0, 20.0, 5)


@pytest.mark.parametrize("target", [
    ResolvedLocation(lat=None, lng=10.0, zoom=5, label="x", match_kind=MatchKind.EXACT),
    ResolvedLocation(lat=10.0, lng=10.0, zoom=None, label="x", match_kind=MatchKind.FUZZY),
    ResolvedLocation(lat=95.0, lng=10.0, zoom=5, label="x", match_kind=MatchKind.EXACT),
    ResolvedLocation(lat=10.0, lng=-181.0, zoom=5, label="x", match_kind=MatchKind.EXACT),
    ResolvedLocation(lat=math.nan, lng=10.0, zoom=5, label="x", match_kind=MatchKind.EXACT),
    ResolvedLocation(lat=10.0, lng=10.0, zoom=math.nan, label="x", match_kind=MatchKind.EXACT),
    ResolvedLocation(lat=10.0, lng=10.0, zoom=math.inf, label="x", match_kind=MatchKind.EXACT),
    ResolvedLocation(lat=10.0, lng=10.0, zoom=6.5, label="x", match_kind=MatchKind.EXACT),
    {"lat": 1.0, "lng": 2.0, "zoom": 3},
])
def test_malformed_target_fails_fast(controller, widget, target):
    with pytest.raises(InvalidTargetError):
        controller.set_target(target)
    assert widget.commands == []


def test_invalid_target_is_value_error(controller):
    with pytest.raises(ValueError):
        controller.set_target(located(None, None, None))


def test_external_highlight_shares_dedup_path(controller, widget):
    controller.set_target(located(46.2276, 2.2137, 6, "France"))

    outcome = controller.set_target(ExternalHighlight(46.2276, 2.2137, 6, label="France", source="admin"))

    assert outcome == MoveOutcome.UNCHANGED
    assert len(widget.commands) == 1
    assert controller.set_target(ExternalHighlight(48.8566, 2.3522, 14, source="marker")) == MoveOutcome.MOVED


def test_reset_to_world(controller, widget):
    assert controller.reset_to_world() == MoveOutcome.MOVED
    assert (widget.last.lat, widget.last.lng, widget.last.zoom) == (WORLD_LAT, WORLD_LNG, WORLD_ZOOM)
    assert controller.reset_to_world() == MoveOutcome.UNCHANGED


def test_initial_state_suppresses_redundant_first_move(widget):
    controller = ViewportController(widget, initial_state=ViewportState(20.0, 0.0, 2))
    assert controller.set_target(located(20.0, 0.0, 2)) == MoveOutcome.UNCHANGED
    assert widget.commands == []


def test_teardown_makes_set_target_a_noop(controller, widget):
    controller.set_target(located(10.0, 20.0, 5))
    controller.teardown()

    assert controller.phase == ViewportPhase.TORN_DOWN
    assert not controller.is_attached
    assert controller.state is None
    assert widget.listener_count == 0
    assert controller.set_target(located(30.0, 40.0, 6)) == MoveOutcome.DETACHED
    assert controller.set_target(located(None, None, None)) == MoveOutcome.DETACHED
    assert controller.reset_to_world() == MoveOutcome.DETACHED
    assert len(widget.commands) == 1

    # Idempotent, and late widget callbacks are harmless
    controller.teardown()
    widget.settle()


def test_whole_float_zoom_is_accepted(controller, widget):
    assert controller.set_target(located(10.0, 20.0, 6.0)) == MoveOutcome.MOVED
    assert controller.set_target(located(10.0, 20.0, 6)) == MoveOutcome.UNCHANGED
    assert len(widget.commands) == 1
