"""Map search page: resolve a place and fly the map there."""
import pydeck as pdk
import streamlit as st

from zonemap.core.config import LANGUAGES, LOG_LEVEL
from zonemap.core.context import MapSessionContext
from zonemap.core.models import MoveOutcome, PlaceKind
from zonemap.gazetteers.loader import load_gazetteer
from zonemap.utils.error_handler import handle_streamlit_errors
from zonemap.utils.logging import setup_logging
from zonemap.utils.timing import Timer
from zonemap.widgets.deck import DeckMapWidget


@st.cache_resource
def get_gazetteer():
    return load_gazetteer()


def get_session() -> MapSessionContext:
    """One context per browser session, with one map viewport."""
    if "map_session" not in st.session_state:
        session = MapSessionContext(get_gazetteer())
        widget = DeckMapWidget()
        session.attach_viewport(widget)
        st.session_state.map_session = session
        st.session_state.map_widget = widget
    return st.session_state.map_session


def city_layer(session: MapSessionContext, country: str) -> pdk.Layer:
    cities = session.resolver.cities_in(country)
    return pdk.Layer(
        "ScatterplotLayer",
        data=[{"name": c.name, "lon": c.lng, "lat": c.lat} for c in cities],
        get_position=["lon", "lat"],
        get_color=[255, 0, 0, 200],
        get_radius=500,
        radius_min_pixels=5,
        radius_max_pixels=20,
        pickable=True,
    )


@handle_streamlit_errors()
def main():
    setup_logging(LOG_LEVEL)
    st.set_page_config(page_title="Map Search", page_icon="🗺️", layout="wide")
    st.title("🗺️ Location Search")
    st.markdown("Search for countries, cities or coordinates")

    session = get_session()
    widget: DeckMapWidget = st.session_state.map_widget
    viewport = session.viewports[0]

    # The previous rerun rendered the last transition
    widget.complete_animation()

    col1, col2 = st.columns([3, 1])
    with col1:
        text = st.text_input("Place", placeholder="Type a country or city name...")
    with col2:
        language = st.selectbox("Language", list(LANGUAGES), format_func=LANGUAGES.get)

    suggestions = session.resolver.suggest(text)
    if suggestions:
        st.caption("Suggestions: " + ", ".join(suggestions))

    c1, c2 = st.columns(2)
    if c1.button("Search", type="primary"):
        with Timer("resolve location"):
            location, outcomes = session.search(text, language)
        if MoveOutcome.NOT_FOUND in outcomes or not location.found:
            st.error("Location not found. Please check spelling.")
        else:
            st.session_state.last_location = location
    if c2.button("World view"):
        viewport.reset_to_world()
        st.session_state.pop("last_location", None)

    layers = []
    location = st.session_state.get("last_location")
    if location is not None:
        st.success(f"{location.label} ({location.match_kind.value})")
        country = location.label if location.kind == PlaceKind.COUNTRY else session.resolver.country_of(location.label)
        if country:
            layers.append(city_layer(session, country))

    st.pydeck_chart(widget.build_deck(layers, tooltip={"text": "{name}"}))


main()
