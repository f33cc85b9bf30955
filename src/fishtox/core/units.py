from __future__ import annotations
from pint import UnitRegistry

# -------------------------------
# Registry & quantity factory
# -------------------------------
ureg = UnitRegistry()
Q_ = ureg.Quantity

# -------------------------------
# Safe unit definitions (idempotent)
# -------------------------------
def _safe_define(defn: str) -> None:
    try:
        ureg.define(defn)
    except Exception:
        # Ignore if already defined or alias collision
        pass

# Tissue concentration, wet weight. pint's own "ppm" is a bare ratio.
_safe_define("ppm_ww = milligram / kilogram")

# -------------------------------
# Public helpers
# -------------------------------
def mm_to_inches(mm: float) -> float:
    """Convert a length in millimetres to inches (linear, sign-preserving)."""
    return float(Q_(mm, "millimeter").to("inch").magnitude)

def inches_to_mm(inches: float) -> float:
    return float(Q_(inches, "inch").to("millimeter").magnitude)

def ounces_to_grams(oz: float) -> float:
    return float(Q_(oz, "ounce").to("gram").magnitude)

def pounds_to_kg(lb: float) -> float:
    return float(Q_(lb, "pound").to("kilogram").magnitude)

def mercury_intake_ug(mercury_ppm: float, serving_oz: float) -> float:
    """Micrograms of mercury in one serving of tissue at ``mercury_ppm`` (mg/kg)."""
    dose = Q_(mercury_ppm, "ppm_ww") * Q_(serving_oz, "ounce")
    return float(dose.to("microgram").magnitude)
