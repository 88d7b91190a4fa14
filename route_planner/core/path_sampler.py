"""Path sampling - reduce a directions path to a bounded set of points.

The elevation provider is called once per route with the sampled points, so
the sample count bounds the cost of every route request.

Sampling is index-uniform, not distance-uniform: sample i is taken at index
round(i * (L - 1) / (N - 1)) of the input path. Long straight segments
(few polyline vertices) are under-sampled and dense polyline sections
(curves, junctions) are over-sampled. Downstream statistics are calibrated
against this density profile, so it is kept as-is.
"""

import logging
from math import floor
from typing import Sequence, TypeVar

from route_planner.constants import SamplingConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _round_half_up(value: float) -> int:
    """Round non-negative values with halves going up (not banker's rounding)."""
    return int(floor(value + 0.5))


def sample_path(path: Sequence[T], sample_count: int = SamplingConfig.ELEVATION_SAMPLE_POINTS) -> tuple[T, ...]:
    """Select up to sample_count points of path, keeping first and last.

    Args:
        path: Ordered coordinates as returned by the directions provider
        sample_count: Target number of samples (N), at least 2

    Returns:
        Tuple of length min(len(path), sample_count). The path itself (as a
        tuple) when it is already short enough; () for an empty path.

    Raises:
        ValueError: If sample_count < 2 (a single sample has no interval).
    """
    if sample_count < SamplingConfig.MIN_SAMPLE_POINTS:
        raise ValueError(f"sample_count must be >= {SamplingConfig.MIN_SAMPLE_POINTS}, got {sample_count}")

    length = len(path)
    if length <= sample_count:
        return tuple(path)

    interval = (length - 1) / (sample_count - 1)
    last = length - 1
    samples = tuple(path[min(_round_half_up(i * interval), last)] for i in range(sample_count))

    logger.debug(f"Sampled {sample_count} of {length} path points (interval {interval:.2f})")
    return samples
