import pytest

from fishtox.core.models import FishSample

@pytest.fixture
def make_sample():
    def _make(**overrides) -> FishSample:
        fields = dict(
            species="Bass: Largemouth",
            mercury_ppm=0.5,
            length_mm=300.0,
            latitude=37.5,
            longitude=-122.0,
        )
        fields.update(overrides)
        return FishSample(**fields)
    return _make
