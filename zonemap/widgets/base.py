"""Camera handle required from a tile-map widget."""
from abc import ABC, abstractmethod
from typing import Callable, List

from zonemap.core.models import ViewportState

AnimationListener = Callable[[ViewportState], None]


class MapWidget(ABC):
    """
    Base class for map widgets driven by a viewport controller.

    Implementations interrupt any running transition when set_camera is
    called again, and report where the camera settled through
    _notify_settled().
    """

    def __init__(self):
        self._listeners: List[AnimationListener] = []

    @abstractmethod
    def set_camera(
        self,
        lat: float,
        lng: float,
        zoom: int,
        *,
        animated: bool = True,
        duration_seconds: float = 0.0
    ) -> None:
        """
        Move the camera.

        Args:
            lat: Target latitude
            lng: Target longitude
            zoom: Target zoom level
            animated: Transition instead of jumping
            duration_seconds: Transition length when animated
        """
        pass

    def add_animation_listener(self, listener: AnimationListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_animation_listener(self, listener: AnimationListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify_settled(self, state: ViewportState) -> None:
        for listener in list(self._listeners):
            listener(state)
