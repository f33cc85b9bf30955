from __future__ import annotations
import logging

import plotly.express as px
import plotly.graph_objects as go
import streamlit as st

from fishtox.core.config import configure_logging, get_settings
from fishtox.core.exceptions import DataLoadError
from fishtox.core.models import GeoBounds
from fishtox.core.units import mm_to_inches
from fishtox.io.csv_loader import load_fish_data
from fishtox.io.exporters import samples_to_frame
from fishtox.services.advisory import (
    FDA_ACTION_LEVEL_PPM,
    advisory_bands,
    species_color,
)
from fishtox.services.explorer import ExplorerView, build_view
from fishtox.services.geo import CALIFORNIA_MAP_BOUNDS, CALIFORNIA_CENTER
from fishtox.services.species import unique_species

configure_logging()
logger = logging.getLogger(__name__)
settings = get_settings()

# Band shading, fewest servings darkest.
_BAND_OPACITY = {7: 0.03, 6: 0.05, 5: 0.07, 4: 0.09, 3: 0.11, 2: 0.14, 1: 0.18, 0: 0.24}

@st.cache_data(show_spinner=False)
def _load(source: str, timeout: float):
    return load_fish_data(source, timeout=timeout)

def scatter_figure(view: ExplorerView, population: str) -> go.Figure:
    fig = go.Figure()
    if not view.plot_samples:
        return fig
    max_x = max(mm_to_inches(s.length_mm) for s in view.plot_samples)
    max_y = max(s.mercury_ppm for s in view.plot_samples) * 1.1

    for servings, lower, upper in advisory_bands(population):
        if lower >= max_y:
            break
        fig.add_hrect(
            y0=lower, y1=min(upper, max_y),
            fillcolor="#d32f2f", opacity=_BAND_OPACITY.get(servings, 0.1), line_width=0,
            annotation_text=f"{servings}/wk", annotation_position="right",
        )
    if FDA_ACTION_LEVEL_PPM <= max_y:
        fig.add_hline(y=FDA_ACTION_LEVEL_PPM, line_dash="dash", annotation_text="FDA 1.0 ppm")

    df = samples_to_frame(view.plot_samples)
    for sp in view.selected:
        part = df[df["species"] == sp]
        if part.empty:
            continue
        color = species_color(sp, view.selected)
        fig.add_trace(go.Scatter(
            x=part["length_in"], y=part["mercury_ppm"], mode="markers", name=sp,
            marker=dict(color=color, opacity=0.6),
        ))
    for trend in view.trends:
        if not trend.has_trend_line:
            continue
        fig.add_trace(go.Scatter(
            x=[p.x for p in trend.points], y=[p.y for p in trend.points], mode="lines",
            name=f"{trend.species} trend (R²={trend.regression.r_squared:.2f})",
            line=dict(color=species_color(trend.species, view.selected)),
        ))
    fig.update_layout(
        xaxis_title="Fish Length (inches)", yaxis_title="Mercury (ppm)",
        xaxis_range=[0, max_x * 1.05], yaxis_range=[0, max_y],
    )
    return fig

def map_figure(view: ExplorerView) -> go.Figure:
    df = samples_to_frame(view.map_samples)
    fig = px.scatter_map(
        df, lat="latitude", lon="longitude", color="species",
        color_discrete_map={sp: species_color(sp, view.selected) for sp in view.selected},
        hover_data={"mercury_ppm": ":.3f", "length_in": ":.1f"},
        center={"lat": CALIFORNIA_CENTER[0], "lon": CALIFORNIA_CENTER[1]}, zoom=4.5,
    )
    fig.update_layout(margin=dict(l=0, r=0, t=0, b=0))
    return fig

st.set_page_config(page_title="FishTox", layout="wide")
st.title("FishTox: Mercury in California Fish")

try:
    samples = _load(settings.data_path, settings.http_timeout)
except DataLoadError as e:
    st.error(f"Failed to load fish data: {e}")
    st.stop()

with st.sidebar:
    st.header("Filters")
    all_species = unique_species(samples)
    selected = st.multiselect("Species", options=all_species)
    population = st.radio("Advisory population", ["sensitive", "general"], horizontal=True)
    use_bounds = st.checkbox("Limit plot to map window")
    bounds = None
    if use_bounds:
        b = CALIFORNIA_MAP_BOUNDS
        north = st.number_input("North", value=b.north)
        south = st.number_input("South", value=b.south)
        east = st.number_input("East", value=b.east)
        west = st.number_input("West", value=b.west)
        bounds = GeoBounds(north=north, south=south, east=east, west=west)

view = build_view(samples, selected, bounds, settings=settings)

if not view.selected:
    st.info("Select one or more fish species to view mercury data and visualizations")
    st.stop()

if view.filtered_by_bounds:
    st.caption(f"Showing {len(view.plot_samples)} {', '.join(view.selected)} samples (filtered by map bounds)")
else:
    st.caption(f"Showing {len(view.map_samples)} {', '.join(view.selected)} samples")

col1, col2 = st.columns(2)
col1.plotly_chart(map_figure(view), use_container_width=True)
col2.plotly_chart(scatter_figure(view, population), use_container_width=True)
col2.caption("Servings are 8 oz for a 160 lb adult; scale portions to body weight.")

st.download_button(
    "Download CSV",
    samples_to_frame(view.plot_samples).to_csv(index=False),
    file_name="fishtox_samples.csv",
    mime="text/csv",
)
