"""pydeck-backed map widget."""
from typing import List, Optional

import pydeck as pdk

from zonemap.core.config import WORLD_LAT, WORLD_LNG, WORLD_ZOOM
from zonemap.core.models import CameraCommand, ViewportState
from zonemap.widgets.base import MapWidget


class DeckMapWidget(MapWidget):
    """
    Map widget rendering through pydeck.

    deck.gl runs the transition in the browser, so the host (a Streamlit
    rerun) calls complete_animation() once the previous render is done.
    """

    def __init__(
        self,
        lat: float = WORLD_LAT,
        lng: float = WORLD_LNG,
        zoom: int = WORLD_ZOOM,
        map_style: Optional[str] = None
    ):
        super().__init__()
        self.map_style = map_style
        self.view_state = pdk.ViewState(latitude=lat, longitude=lng, zoom=zoom, pitch=0)
        self.pending: Optional[CameraCommand] = None

    def set_camera(
        self,
        lat: float,
        lng: float,
        zoom: int,
        *,
        animated: bool = True,
        duration_seconds: float = 0.0
    ) -> None:
        transition = {}
        if animated and duration_seconds > 0:
            transition = {
                "transition_duration": int(duration_seconds * 1000),
                "transition_interpolator": "FlyToInterpolator",
            }
        # A new view state replaces any transition still running client-side
        self.view_state = pdk.ViewState(latitude=lat, longitude=lng, zoom=zoom, pitch=0, **transition)
        self.pending = CameraCommand(lat, lng, zoom, animated, duration_seconds)
        if not transition:
            self.complete_animation()

    def complete_animation(self) -> Optional[ViewportState]:
        """Report the last commanded camera as settled."""
        if self.pending is None:
            return None
        settled = self.pending.state
        self.pending = None
        self._notify_settled(settled)
        return settled

    @property
    def camera(self) -> ViewportState:
        return ViewportState(self.view_state.latitude, self.view_state.longitude, self.view_state.zoom)

    def build_deck(self, layers: Optional[List[pdk.Layer]] = None, tooltip=True) -> pdk.Deck:
        return pdk.Deck(
            map_style=self.map_style,
            initial_view_state=self.view_state,
            layers=layers or [],
            tooltip=tooltip,
        )
