"""Tests for the session context."""
from zonemap.core.context import MapSessionContext
from zonemap.core.models import ExternalHighlight, MatchKind, MoveOutcome, ViewportPhase

from conftest import RecordingMapWidget


def test_session_lifecycle(gazetteer):
    session = MapSessionContext(gazetteer)
    assert not session.is_authenticated

    session.start("user-1")
    assert session.is_authenticated

    session.close()
    assert not session.is_authenticated


def test_search_drives_every_viewport(gazetteer):
    session = MapSessionContext(gazetteer)
    main, preview = RecordingMapWidget(), RecordingMapWidget()
    session.attach_viewport(main)
    session.attach_viewport(preview)

    location, outcomes = session.search("Pariss")

    assert location.match_kind == MatchKind.FUZZY
    assert outcomes == [MoveOutcome.MOVED, MoveOutcome.MOVED]
    assert (main.last.lat, main.last.lng) == (preview.last.lat, preview.last.lng) == (48.8566, 2.3522)


def test_search_not_found(gazetteer):
    session = MapSessionContext(gazetteer)
    widget = RecordingMapWidget()
    session.attach_viewport(widget)

    location, outcomes = session.search("Atlantis")

    assert not location.found
    assert outcomes == [MoveOutcome.NOT_FOUND]
    assert widget.commands == []


def test_highlight_triggers(gazetteer):
    session = MapSessionContext(gazetteer)
    widget = RecordingMapWidget()
    session.attach_viewport(widget)

    location, outcomes = session.highlight_country("Egypt")
    assert outcomes == [MoveOutcome.MOVED]
    assert session.highlight(ExternalHighlight(location.lat, location.lng, location.zoom)) == [MoveOutcome.UNCHANGED]
    assert len(widget.commands) == 1


def test_detach_viewport(gazetteer):
    session = MapSessionContext(gazetteer)
    widget = RecordingMapWidget()
    controller = session.attach_viewport(widget)

    session.detach_viewport(controller)

    assert session.viewports == []
    assert controller.phase == ViewportPhase.TORN_DOWN


def test_close_tears_down_viewports(gazetteer):
    session = MapSessionContext(gazetteer)
    session.start("user-1")
    widget = RecordingMapWidget()
    controller = session.attach_viewport(widget)

    session.close()

    assert controller.phase == ViewportPhase.TORN_DOWN
    assert controller.set_target(session.resolver.resolve("France")) == MoveOutcome.DETACHED
    location, outcomes = session.search("France")
    assert location.found
    assert outcomes == []
    assert widget.commands == []
