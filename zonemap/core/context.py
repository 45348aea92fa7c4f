"""Application-level session state for the map client."""
from typing import List, Optional, Tuple

from zonemap.core.gazetteer import Gazetteer
from zonemap.core.models import ExternalHighlight, MoveOutcome, ResolvedLocation
from zonemap.core.resolver import LocationResolver
from zonemap.core.viewport import ViewportController
from zonemap.utils.logging import log_structured
from zonemap.widgets.base import MapWidget


class MapSessionContext:
    """
    Explicit holder for per-session state: the signed-in user and the
    viewports open in this session. Created on session start and closed on
    logout; nothing lives in module globals.
    """

    def __init__(self, gazetteer: Gazetteer, resolver: Optional[LocationResolver] = None):
        self.gazetteer = gazetteer
        self.resolver = resolver or LocationResolver(gazetteer)
        self.user_id: Optional[str] = None
        self.viewports: List[ViewportController] = []

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    def start(self, user_id: str) -> None:
        self.user_id = user_id
        log_structured("info", "Map session started", user_id=user_id)

    def attach_viewport(self, widget: MapWidget, **kwargs) -> ViewportController:
        """Create a controller for a newly shown map and track it for teardown."""
        controller = ViewportController(widget, **kwargs)
        self.viewports.append(controller)
        return controller

    def detach_viewport(self, controller: ViewportController) -> None:
        controller.teardown()
        if controller in self.viewports:
            self.viewports.remove(controller)

    def search(self, text: str, language: Optional[str] = None) -> Tuple[ResolvedLocation, List[MoveOutcome]]:
        """
        Resolve text and drive every open viewport to the result.

        Returns:
            Tuple (resolved location, outcome per viewport)
        """
        location = self.resolver.resolve(text, language)
        return location, [viewport.set_target(location) for viewport in self.viewports]

    def highlight(self, target: ExternalHighlight) -> List[MoveOutcome]:
        return [viewport.set_target(target) for viewport in self.viewports]

    def highlight_country(self, name: str) -> Tuple[ResolvedLocation, List[MoveOutcome]]:
        location = self.resolver.highlight_country(name)
        return location, [viewport.set_target(location) for viewport in self.viewports]

    def close(self) -> None:
        """Logout: tear down every viewport and forget the user."""
        for viewport in self.viewports:
            viewport.teardown()
        self.viewports = []
        log_structured("info", "Map session closed", user_id=self.user_id)
        self.user_id = None
