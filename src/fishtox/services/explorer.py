from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from fishtox.core.config import Settings
from fishtox.core.models import FishSample, GeoBounds, SpeciesTrend
from fishtox.services.geo import filter_by_bounds
from fishtox.services.species import filter_by_species, unique_species
from fishtox.services.trends import species_trends

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class ExplorerView:
    """Everything the page needs for one (selection, bounds) pair.

    Attributes
    ----------
    species:
        Sorted species index of the whole dataset.
    selected:
        Selected labels, in the order the user picked them.
    map_samples:
        Samples of the selected species, ignoring the viewport.
    plot_samples:
        ``map_samples`` restricted to ``bounds`` (all of them when no bounds).
    trends:
        Per-species regression and trend line over ``plot_samples``.
    """

    species: list[str]
    selected: list[str]
    bounds: Optional[GeoBounds]
    map_samples: list[FishSample] = field(default_factory=list)
    plot_samples: list[FishSample] = field(default_factory=list)
    trends: list[SpeciesTrend] = field(default_factory=list)

    @property
    def filtered_by_bounds(self) -> bool:
        return self.bounds is not None and len(self.plot_samples) != len(self.map_samples)

def build_view(
    samples: Sequence[FishSample],
    selected: Optional[Iterable[str]],
    bounds: Optional[GeoBounds] = None,
    settings: Optional[Settings] = None,
) -> ExplorerView:
    """Recompute the full filter/regression/sampling chain from scratch."""
    cfg = settings or Settings()
    picked = list(dict.fromkeys(selected or []))
    map_samples = filter_by_species(samples, picked)
    plot_samples = list(filter_by_bounds(map_samples, bounds))
    trends = species_trends(
        plot_samples,
        min_samples=cfg.min_trend_samples,
        min_r_squared=cfg.min_trend_r_squared,
        num_points=cfg.trend_points,
    )
    logger.debug(
        "View for %s: %d on map, %d in plot, %d trend lines",
        picked, len(map_samples), len(plot_samples),
        sum(1 for t in trends if t.has_trend_line),
    )
    return ExplorerView(
        species=unique_species(samples),
        selected=picked,
        bounds=bounds,
        map_samples=map_samples,
        plot_samples=plot_samples,
        trends=trends,
    )
