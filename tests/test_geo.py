import pytest

from fishtox.core.models import GeoBounds
from fishtox.services.geo import CALIFORNIA_MAP_BOUNDS, data_bounds, filter_by_bounds

BOUNDS = GeoBounds(north=38.0, south=37.0, east=-121.0, west=-123.0)

def test_no_bounds_returns_input(make_sample):
    data = [make_sample(), make_sample(latitude=80.0)]
    assert filter_by_bounds(data, None) is data

def test_inside_and_outside(make_sample):
    inside = make_sample(latitude=37.5, longitude=-122.0)
    north_of = make_sample(latitude=38.5, longitude=-122.0)
    east_of = make_sample(latitude=37.5, longitude=-120.0)
    assert filter_by_bounds([north_of, inside, east_of], BOUNDS) == [inside]

@pytest.mark.parametrize(
    "lat,lon",
    [(38.0, -122.0), (37.0, -122.0), (37.5, -121.0), (37.5, -123.0), (38.0, -123.0)],
)
def test_edges_are_inclusive(make_sample, lat, lon):
    s = make_sample(latitude=lat, longitude=lon)
    assert filter_by_bounds([s], BOUNDS) == [s]

def test_inverted_bounds_match_nothing(make_sample):
    inverted = GeoBounds(north=37.0, south=38.0, east=-121.0, west=-123.0)
    assert filter_by_bounds([make_sample(latitude=37.5)], inverted) == []

def test_degenerate_point_bounds(make_sample):
    point = GeoBounds(north=37.5, south=37.5, east=-122.0, west=-122.0)
    s = make_sample(latitude=37.5, longitude=-122.0)
    assert filter_by_bounds([s, make_sample(latitude=37.6)], point) == [s]

def test_out_of_range_coordinates_are_not_special(make_sample):
    wide = GeoBounds(north=100.0, south=-100.0, east=200.0, west=-200.0)
    s = make_sample(latitude=91.0, longitude=-181.0)
    assert filter_by_bounds([s], wide) == [s]

def test_data_bounds(make_sample):
    data = [make_sample(latitude=36.0, longitude=-120.0), make_sample(latitude=39.0, longitude=-123.5)]
    assert data_bounds(data) == GeoBounds(north=39.0, south=36.0, east=-120.0, west=-123.5)
    assert data_bounds([]) is None

def test_california_bounds_contain_center():
    assert CALIFORNIA_MAP_BOUNDS.contains(37.25, -119.3)
