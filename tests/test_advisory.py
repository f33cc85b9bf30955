import math
import pytest

from fishtox.services.advisory import (
    ADVISORY_TISSUE_LEVELS,
    FDA_ACTION_LEVEL_PPM,
    SPECIES_COLORS,
    advisory_bands,
    serving_size_oz,
    servings_per_week,
    species_color,
    weekly_intake_ug,
)

@pytest.mark.parametrize(
    "ppm,population,servings",
    [
        (0.01, "sensitive", 7),
        (0.031, "sensitive", 7),
        (0.05, "sensitive", 4),
        (0.44, "sensitive", 1),
        (0.5, "sensitive", 0),
        (0.5, "general", 1),
        (0.1, "general", 6),
        (2.0, "general", 0),
        (-1.0, "general", 7),
    ],
)
def test_servings_per_week(ppm, population, servings):
    assert servings_per_week(ppm, population) == servings

def test_unknown_population():
    with pytest.raises(ValueError):
        servings_per_week(0.1, "toddlers")
    with pytest.raises(ValueError):
        advisory_bands("toddlers")

@pytest.mark.parametrize("population", list(ADVISORY_TISSUE_LEVELS))
def test_bands_are_contiguous(population):
    bands = advisory_bands(population)
    assert bands[0][1] == 0.0
    assert [b[0] for b in bands] == [7, 6, 5, 4, 3, 2, 1, 0]
    for (_, _, upper), (_, lower, _) in zip(bands, bands[1:]):
        assert upper == lower
    assert math.isinf(bands[-1][2])

def test_serving_size_scales_with_body_weight():
    assert serving_size_oz(160) == 8.0
    assert serving_size_oz(40) == 2.0
    with pytest.raises(ValueError):
        serving_size_oz(0)

def test_weekly_intake():
    assert weekly_intake_ug(2.0, "sensitive") == 0
    assert math.isclose(weekly_intake_ug(0.1, "general"), 6 * 0.1 * 226.796185, rel_tol=1e-9)

def test_fda_level():
    assert FDA_ACTION_LEVEL_PPM == 1.0

def test_species_colors_cycle_by_selection_order():
    selected = [f"s{i}" for i in range(12)]
    assert species_color("s0", selected) == SPECIES_COLORS[0]
    assert species_color("s3", selected) == SPECIES_COLORS[3]
    assert species_color("s10", selected) == SPECIES_COLORS[0]
    assert species_color("missing", selected) == SPECIES_COLORS[0]
