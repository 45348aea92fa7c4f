"""Viewport controller keeping an animated map camera in sync with location updates."""
from typing import Optional, Union

from zonemap.core.config import (
    ANIMATION_DURATION_SECONDS,
    VIEWPORT_EPSILON,
    WORLD_LAT,
    WORLD_LNG,
    WORLD_ZOOM,
)
from zonemap.core.errors import InvalidTargetError
from zonemap.core.models import (
    ExternalHighlight,
    MoveOutcome,
    ResolvedLocation,
    ViewportPhase,
    ViewportState,
)
from zonemap.utils.logging import log_structured
from zonemap.widgets.base import MapWidget

Target = Union[ResolvedLocation, ExternalHighlight]


class ViewportController:
    """
    Sole owner of a map widget's camera.

    Search results and programmatic highlights both go through set_target(),
    which drops moves to where the camera is already headed and otherwise
    issues an animated camera command. The commanded state is recorded as
    soon as the command is issued, so a newer target always preempts an
    animation still in flight (last writer wins, nothing is queued).

    Phases: IDLE -> ANIMATING on a new command; ANIMATING -> IDLE when the
    widget reports the latest command settled; any -> TORN_DOWN on
    teardown(), after which set_target() is a no-op.
    """

    def __init__(
        self,
        widget: MapWidget,
        epsilon: float = VIEWPORT_EPSILON,
        duration_seconds: float = ANIMATION_DURATION_SECONDS,
        initial_state: Optional[ViewportState] = None
    ):
        """
        Initialize controller and subscribe to the widget's animation events.

        Args:
            widget: Camera handle
            epsilon: Degrees within which two positions are the same
            duration_seconds: Camera transition length
            initial_state: Camera position already shown by the widget, if known
        """
        self._widget: Optional[MapWidget] = widget
        self.epsilon = epsilon
        self.duration_seconds = duration_seconds
        self._state = initial_state
        self._phase = ViewportPhase.IDLE
        self.commands_issued = 0
        widget.add_animation_listener(self._on_animation_complete)

    @property
    def state(self) -> Optional[ViewportState]:
        return self._state

    @property
    def phase(self) -> ViewportPhase:
        return self._phase

    @property
    def is_attached(self) -> bool:
        return self._phase != ViewportPhase.TORN_DOWN

    def set_target(self, target: Target) -> MoveOutcome:
        """
        Move the camera to a resolved location or external highlight.

        Args:
            target: ResolvedLocation or ExternalHighlight

        Returns:
            MOVED when a camera command was issued, UNCHANGED when the camera
            is already there, NOT_FOUND for an unresolved location (for the
            caller to report), DETACHED after teardown

        Raises:
            InvalidTargetError: if a found target lacks valid coordinates
        """
        if self._phase == ViewportPhase.TORN_DOWN:
            log_structured("debug", "Viewport target ignored after teardown")
            return MoveOutcome.DETACHED

        location = target.to_resolved() if isinstance(target, ExternalHighlight) else target
        if not isinstance(location, ResolvedLocation):
            raise InvalidTargetError(f"Unsupported viewport target: {target!r}")

        if not location.found:
            log_structured("info", "Viewport target not found", label=location.label)
            return MoveOutcome.NOT_FOUND

        new_state = self._validated_state(location)
        if self._state is not None and self._state.matches(new_state, self.epsilon):
            log_structured("debug", "Viewport already at target", label=location.label)
            return MoveOutcome.UNCHANGED

        self._state = new_state
        self._phase = ViewportPhase.ANIMATING
        self.commands_issued += 1
        log_structured(
            "info",
            "Camera command issued",
            label=location.label,
            lat=new_state.lat,
            lng=new_state.lng,
            zoom=new_state.zoom,
            duration_seconds=self.duration_seconds,
        )
        self._widget.set_camera(
            new_state.lat,
            new_state.lng,
            new_state.zoom,
            animated=True,
            duration_seconds=self.duration_seconds,
        )
        return MoveOutcome.MOVED

    def reset_to_world(self) -> MoveOutcome:
        return self.set_target(
            ExternalHighlight(WORLD_LAT, WORLD_LNG, WORLD_ZOOM, label="World", source="world")
        )

    def teardown(self) -> None:
        """Release the camera handle; later calls to set_target() do nothing."""
        if self._phase == ViewportPhase.TORN_DOWN:
            return
        if self._widget is not None:
            self._widget.remove_animation_listener(self._on_animation_complete)
        self._widget = None
        self._state = None
        self._phase = ViewportPhase.TORN_DOWN
        log_structured("info", "Viewport torn down", commands_issued=self.commands_issued)

    def _on_animation_complete(self, settled: ViewportState) -> None:
        if self._phase != ViewportPhase.ANIMATING or self._state is None:
            return
        # Completion of a superseded command: the newer one is still running
        if not settled.matches(self._state, self.epsilon):
            return
        self._phase = ViewportPhase.IDLE

    @staticmethod
    def _validated_state(location: ResolvedLocation) -> ViewportState:
        if location.lat is None or location.lng is None or location.zoom is None:
            raise InvalidTargetError(f"Viewport target {location.label!r} has no coordinates")
        state = ViewportState(location.lat, location.lng, location.zoom)
        if not state.is_valid():
            raise InvalidTargetError(
                f"Viewport target {location.label!r} is out of range: {state.lat}, {state.lng}"
            )
        return state
