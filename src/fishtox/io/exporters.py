from __future__ import annotations
import pandas as pd
from pathlib import Path
from typing import Iterable

from fishtox.core.models import FishSample
from fishtox.core.units import mm_to_inches

SAMPLE_COLUMNS = ["species", "mercury_ppm", "length_mm", "length_in", "latitude", "longitude"]

def samples_to_frame(samples: Iterable[FishSample]) -> pd.DataFrame:
    rows = [
        {**s.model_dump(), "length_in": mm_to_inches(s.length_mm)}
        for s in samples
    ]
    return pd.DataFrame(rows, columns=SAMPLE_COLUMNS)

def export_csv(df: pd.DataFrame, path: str | Path) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(p, index=False)
