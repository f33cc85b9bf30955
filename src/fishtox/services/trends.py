from __future__ import annotations
import logging
from typing import Iterable

from fishtox.core.models import FishSample, SpeciesTrend
from fishtox.core.units import mm_to_inches
from fishtox.services.species import group_by_species
from fishtox.services.regression import power_law_regression, generate_trend_line_points

logger = logging.getLogger(__name__)

MIN_TREND_SAMPLES = 5
MIN_TREND_R_SQUARED = 0.1
TREND_POINTS = 50

def species_trend(
    species: str,
    samples: list[FishSample],
    *,
    min_samples: int = MIN_TREND_SAMPLES,
    min_r_squared: float = MIN_TREND_R_SQUARED,
    num_points: int = TREND_POINTS,
) -> SpeciesTrend:
    """Mercury-vs-length (inches) trend for one species group."""
    lengths_in = [mm_to_inches(s.length_mm) for s in samples]
    mercury = [s.mercury_ppm for s in samples]
    regression = power_law_regression(lengths_in, mercury)

    points = ()
    if regression is not None and len(samples) >= min_samples and regression.r_squared > min_r_squared:
        points = tuple(generate_trend_line_points(regression, min(lengths_in), max(lengths_in), num_points))
    elif regression is not None:
        logger.debug(
            "No trend line for %s: n=%d, r2=%.3f", species, len(samples), regression.r_squared
        )

    return SpeciesTrend(
        species=species,
        sample_count=len(samples),
        regression=regression,
        points=points,
    )

def species_trends(
    samples: Iterable[FishSample],
    *,
    min_samples: int = MIN_TREND_SAMPLES,
    min_r_squared: float = MIN_TREND_R_SQUARED,
    num_points: int = TREND_POINTS,
) -> list[SpeciesTrend]:
    return [
        species_trend(
            sp, group,
            min_samples=min_samples,
            min_r_squared=min_r_squared,
            num_points=num_points,
        )
        for sp, group in group_by_species(samples).items()
    ]
