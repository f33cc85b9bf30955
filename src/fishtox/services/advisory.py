"""Consumption guidance tables handed to the presentation layer.

Advisory Tissue Levels (ATLs) follow the OEHHA methylmercury guidance:
servings per week of an 8 ounce (uncooked) portion for a 160 lb adult.
"""
from __future__ import annotations
from typing import Sequence

from fishtox.core.units import mercury_intake_ug

FDA_ACTION_LEVEL_PPM = 1.0
REFERENCE_SERVING_OZ = 8.0
REFERENCE_BODY_WEIGHT_LB = 160.0

# (servings per week, upper mercury bound in ppm), most servings first.
ADVISORY_TISSUE_LEVELS: dict[str, list[tuple[int, float]]] = {
    # women 18-49 and children 1-17
    "sensitive": [
        (7, 0.031), (6, 0.036), (5, 0.044), (4, 0.055),
        (3, 0.070), (2, 0.150), (1, 0.440),
    ],
    # women over 49 and men 18+
    "general": [
        (7, 0.094), (6, 0.109), (5, 0.130), (4, 0.160),
        (3, 0.220), (2, 0.440), (1, 1.310),
    ],
}

SPECIES_COLORS: Sequence[str] = (
    "#1976d2",  # Blue
    "#d32f2f",  # Red
    "#388e3c",  # Green
    "#f57c00",  # Orange
    "#7b1fa2",  # Purple
    "#0288d1",  # Light Blue
    "#c2185b",  # Pink
    "#5d4037",  # Brown
    "#455a64",  # Blue Grey
    "#e64a19",  # Deep Orange
)

def _levels(population: str) -> list[tuple[int, float]]:
    if population not in ADVISORY_TISSUE_LEVELS:
        raise ValueError(
            f"Unknown population '{population}'. Choose from {list(ADVISORY_TISSUE_LEVELS)}"
        )
    return ADVISORY_TISSUE_LEVELS[population]

def servings_per_week(mercury_ppm: float, population: str = "sensitive") -> int:
    for servings, upper in _levels(population):
        if mercury_ppm <= upper:
            return servings
    return 0

def advisory_bands(population: str = "sensitive") -> list[tuple[int, float, float]]:
    """Contiguous (servings, lower_ppm, upper_ppm) bands; the last is open-ended."""
    bands: list[tuple[int, float, float]] = []
    lower = 0.0
    for servings, upper in _levels(population):
        bands.append((servings, lower, upper))
        lower = upper
    bands.append((0, lower, float("inf")))
    return bands

def serving_size_oz(body_weight_lb: float) -> float:
    """Scale the 8 oz / 160 lb reference portion to another body weight."""
    if body_weight_lb <= 0:
        raise ValueError("body weight must be positive")
    return REFERENCE_SERVING_OZ * body_weight_lb / REFERENCE_BODY_WEIGHT_LB

def weekly_intake_ug(mercury_ppm: float, population: str = "sensitive") -> float:
    """Mercury eaten per week when following the advised number of servings."""
    return servings_per_week(mercury_ppm, population) * mercury_intake_ug(mercury_ppm, REFERENCE_SERVING_OZ)

def species_color(species: str, selected: Sequence[str]) -> str:
    try:
        idx = list(selected).index(species)
    except ValueError:
        idx = 0
    return SPECIES_COLORS[idx % len(SPECIES_COLORS)]
