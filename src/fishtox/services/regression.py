"""Power-law trend fitting and trend-line sampling."""
from __future__ import annotations

import logging
import math
from typing import Optional, Protocol, Sequence

import numpy as np

from fishtox.core.models import RegressionResult, TrendLinePoint

logger = logging.getLogger(__name__)

# |Σlx² − n·mean(lx)²| below this means x has no spread in log space.
DENOMINATOR_EPS = 1e-10


class Predictor(Protocol):
    def predict(self, x: float) -> float: ...


def power_law_regression(
    x_values: Sequence[float],
    y_values: Sequence[float],
    min_points: int = 3,
) -> Optional[RegressionResult]:
    """Fit ``y = a * x**b`` by least squares on ``(ln x, ln y)``.

    Only pairs with ``x > 0`` and ``y > 0`` take part in the fit. Returns
    ``None`` when the input lengths differ, fewer than ``min_points`` pairs
    are given or survive the positivity filter, or the x values are constant.
    ``r_squared`` is computed in log space and clamped to ``[0, 1]``.
    """

    if len(x_values) != len(y_values) or len(x_values) < min_points:
        return None

    x = np.asarray(x_values, dtype=float)
    y = np.asarray(y_values, dtype=float)
    positive_mask = (x > 0) & (y > 0)
    n = int(np.count_nonzero(positive_mask))
    if n < min_points:
        return None

    log_x = np.log(x[positive_mask])
    log_y = np.log(y[positive_mask])
    mean_log_x = float(np.mean(log_x))
    mean_log_y = float(np.mean(log_y))

    numerator = float(np.sum(log_x * log_y)) - n * mean_log_x * mean_log_y
    denominator = float(np.sum(log_x * log_x)) - n * mean_log_x * mean_log_x
    if abs(denominator) < DENOMINATOR_EPS:
        return None

    b = numerator / denominator
    log_a = mean_log_y - b * mean_log_x
    a = math.exp(log_a) if log_a < 709.0 else math.inf
    if not (math.isfinite(a) and a > 0):
        logger.debug("Power-law intercept exp(%g) is not representable", log_a)
        return None

    ss_tot = float(np.sum((log_y - mean_log_y) ** 2))
    ss_res = float(np.sum((log_y - (log_a + b * log_x)) ** 2))
    r2 = 1 - ss_res / ss_tot if ss_tot > 0 else 0.0

    return RegressionResult(
        a=a,
        b=float(b),
        r_squared=max(0.0, min(1.0, r2)),
        n_points=n,
    )


def generate_trend_line_points(
    regression: Predictor,
    min_x: float,
    max_x: float,
    num_points: int = 50,
) -> list[TrendLinePoint]:
    """Evaluate ``regression.predict`` at ``num_points`` evenly spaced x values.

    Points whose prediction is not finite or not strictly positive are
    dropped. Fewer than two points leave the spacing undefined, so nothing
    is produced.
    """

    if num_points < 2:
        return []
    points: list[TrendLinePoint] = []
    for x in np.linspace(min_x, max_x, int(num_points)):
        y = regression.predict(float(x))
        if math.isfinite(y) and y > 0:
            points.append(TrendLinePoint(x=float(x), y=float(y)))
    return points
