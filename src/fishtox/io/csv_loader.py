from __future__ import annotations
import io
import math
import re
import logging
from pathlib import Path
from typing import Optional

import httpx
import pandas as pd

from fishtox.core.models import FishSample, RawFishRow
from fishtox.core.exceptions import DataLoadError

logger = logging.getLogger(__name__)

# First alias found in the header wins.
SAMPLE_COL_ALIASES = {
    "species": ["compositecommonname", "species", "common_name", "commonname"],
    "mercury": ["result", "mercury_ppm", "mercury", "hg_ppm"],
    "length": ["tlavglength(mm)", "length_mm", "length", "tl_mm"],
    "latitude": ["latitude", "lat"],
    "longitude": ["longitude", "lon", "lng", "long"],
}

# Leading numeric text, in the manner of a lenient float parse: "12.5 ppm" -> 12.5
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

def parse_number(text: Optional[str]) -> Optional[float]:
    """Return the finite number at the start of ``text``, or None."""
    if not text:
        return None
    m = _LEADING_NUMBER.match(text)
    if not m:
        return None
    value = float(m.group(1))
    if not math.isfinite(value):
        return None
    return value

def _resolve_columns(columns) -> Optional[dict[str, str]]:
    lower = {}
    for c in columns:
        lower.setdefault(str(c).strip().lower(), c)
    colmap: dict[str, str] = {}
    for std, aliases in SAMPLE_COL_ALIASES.items():
        for a in aliases:
            if a in lower:
                colmap[std] = lower[a]
                break
    missing = [std for std in SAMPLE_COL_ALIASES if std not in colmap]
    if missing:
        logger.warning("CSV header is missing column(s) %s; no samples loaded", missing)
        return None
    return colmap

def _text(value) -> Optional[str]:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    return str(value)

def _skip_bad_line(fields: list[str]) -> None:
    logger.warning("Skipping malformed CSV row with %d fields: %r", len(fields), fields[:5])
    return None

def _read_table(csv_text: str) -> Optional[pd.DataFrame]:
    try:
        return pd.read_csv(
            io.StringIO(csv_text),
            dtype=str,
            index_col=False,
            keep_default_na=False,
            skip_blank_lines=True,
            engine="python",
            on_bad_lines=_skip_bad_line,
        )
    except pd.errors.EmptyDataError:
        return None
    except pd.errors.ParserError as exc:
        logger.warning("CSV parsing errors: %s", exc)
        return None

def is_valid_row(row: RawFishRow) -> bool:
    if not (row.species or "").strip():
        return False
    return all(
        parse_number(v) is not None
        for v in (row.mercury, row.length, row.latitude, row.longitude)
    )

def to_sample(row: RawFishRow) -> FishSample:
    return FishSample(
        species=row.species,
        mercury_ppm=parse_number(row.mercury),
        length_mm=parse_number(row.length),
        latitude=parse_number(row.latitude),
        longitude=parse_number(row.longitude),
    )

def parse_fish_data(csv_text: str) -> list[FishSample]:
    """
    Parse raw CSV text into validated samples, in input row order.
    - Never raises on malformed input; bad structure yields [] or fewer rows.
    - A row is kept only if species is non-blank and mercury, length,
      latitude and longitude all start with a finite number.
    - Zero/negative values and out-of-range coordinates are kept as-is.
    """
    df = _read_table(csv_text or "")
    if df is None or df.empty:
        return []
    colmap = _resolve_columns(df.columns)
    if colmap is None:
        return []

    raw_rows = [
        RawFishRow(**{std: _text(rec.get(orig)) for std, orig in colmap.items()})
        for rec in df.to_dict("records")
    ]
    samples = [to_sample(r) for r in raw_rows if is_valid_row(r)]

    dropped = len(raw_rows) - len(samples)
    if dropped:
        logger.debug("Dropped %d of %d rows with missing or non-numeric fields", dropped, len(raw_rows))
    logger.info("Parsed %d fish samples", len(samples))
    return samples

def _is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))

def read_source_text(source, timeout: float = 10.0) -> str:
    """Fetch raw CSV text from a path, an http(s) URL or a binary/text buffer."""
    try:
        if hasattr(source, "read"):
            data = source.read()
            return data.decode("utf-8-sig") if isinstance(data, bytes) else str(data)
        src = str(source)
        if _is_url(src):
            response = httpx.get(src, timeout=timeout, follow_redirects=True)
            response.raise_for_status()
            return response.text
        return Path(src).read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError, httpx.HTTPError) as exc:
        logger.error("Error loading fish data from %s: %s", source, exc)
        raise DataLoadError(f"Could not load fish data from {source}") from exc

def load_fish_data(source, timeout: float = 10.0) -> list[FishSample]:
    return parse_fish_data(read_source_text(source, timeout=timeout))
