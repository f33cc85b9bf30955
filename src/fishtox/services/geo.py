from __future__ import annotations
from typing import Iterable, Optional, Sequence

from fishtox.core.models import FishSample, GeoBounds

# Initial map view used before the user pans or zooms.
CALIFORNIA_MAP_BOUNDS = GeoBounds(north=42.0, south=32.5, east=-114.1, west=-124.5)
CALIFORNIA_CENTER = (37.25, -119.3)

def filter_by_bounds(
    samples: Sequence[FishSample],
    bounds: Optional[GeoBounds],
) -> Sequence[FishSample]:
    """Keep samples inside ``bounds`` (edges inclusive); no bounds keeps everything."""
    if bounds is None:
        return samples
    return [s for s in samples if bounds.contains(s.latitude, s.longitude)]

def data_bounds(samples: Iterable[FishSample]) -> Optional[GeoBounds]:
    """Smallest rectangle holding every sample, or None for no samples."""
    lats: list[float] = []
    lons: list[float] = []
    for s in samples:
        lats.append(s.latitude)
        lons.append(s.longitude)
    if not lats:
        return None
    return GeoBounds(north=max(lats), south=min(lats), east=max(lons), west=min(lons))
