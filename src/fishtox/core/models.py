from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional

class RawFishRow(BaseModel):
    """One row of the source table, every field still text (or absent)."""
    species: Optional[str] = None
    mercury: Optional[str] = None
    length: Optional[str] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None

class FishSample(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    species: str
    mercury_ppm: float
    length_mm: float
    latitude: float
    longitude: float

    @field_validator("species")
    @classmethod
    def strip_species(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("species must not be empty")
        return v

class GeoBounds(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    north: float
    south: float
    east: float
    west: float

    def contains(self, latitude: float, longitude: float) -> bool:
        # Inclusive on all four edges; inverted bounds simply match nothing.
        return self.south <= latitude <= self.north and self.west <= longitude <= self.east

class RegressionResult(BaseModel):
    """Power-law fit ``y = a * x**b``; ``r_squared`` is measured in log space."""
    model_config = ConfigDict(frozen=True)

    a: float = Field(gt=0)
    b: float
    r_squared: float = Field(ge=0.0, le=1.0)
    n_points: int = Field(ge=0)

    def predict(self, x: float) -> float:
        try:
            return self.a * math.pow(x, self.b)
        except ValueError:
            # negative base with a fractional exponent, or 0 ** negative
            return math.nan
        except OverflowError:
            return math.inf

class TrendLinePoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float
    y: float

class SpeciesTrend(BaseModel):
    model_config = ConfigDict(frozen=True)

    species: str
    sample_count: int
    regression: Optional[RegressionResult] = None
    points: tuple[TrendLinePoint, ...] = ()

    @property
    def has_trend_line(self) -> bool:
        return len(self.points) > 0
