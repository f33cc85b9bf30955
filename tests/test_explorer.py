from fishtox.core.config import Settings
from fishtox.core.models import GeoBounds
from fishtox.services.explorer import build_view

def _data(make_sample):
    lats = [37.1, 37.2, 37.3, 37.4, 37.5]
    bass = [
        make_sample(species="Bass", length_mm=254.0 * k, mercury_ppm=0.001 * (10.0 * k) ** 2,
                    latitude=lat, longitude=-122.0)
        for k, lat in enumerate(lats, start=1)
    ]
    trout = [make_sample(species="Trout", latitude=40.0, longitude=-120.0)]
    return bass + trout

def test_no_selection(make_sample):
    view = build_view(_data(make_sample), [])
    assert view.species == ["Bass", "Trout"]
    assert view.map_samples == []
    assert view.plot_samples == []
    assert view.trends == []

def test_selection_without_bounds(make_sample):
    view = build_view(_data(make_sample), ["Trout", "Bass"])
    assert len(view.map_samples) == 6
    assert view.plot_samples == view.map_samples
    assert not view.filtered_by_bounds
    assert {t.species: t.has_trend_line for t in view.trends} == {"Bass": True, "Trout": False}

def test_bounds_restrict_plot_but_not_map(make_sample):
    bounds = GeoBounds(north=37.35, south=37.0, east=-121.0, west=-123.0)
    view = build_view(_data(make_sample), ["Bass", "Trout"], bounds)
    assert len(view.map_samples) == 6
    assert [s.latitude for s in view.plot_samples] == [37.1, 37.2, 37.3]
    assert view.filtered_by_bounds
    # three Bass samples are below the five-sample trend threshold
    assert not view.trends[0].has_trend_line

def test_duplicate_selection_is_collapsed(make_sample):
    view = build_view(_data(make_sample), ["Bass", "Bass"])
    assert view.selected == ["Bass"]
    assert len(view.map_samples) == 5

def test_settings_drive_trend_policy(make_sample):
    view = build_view(_data(make_sample), ["Bass"], settings=Settings(trend_points=7))
    assert len(view.trends[0].points) == 7
