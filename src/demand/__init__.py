# src/demand/__init__.py
from .arrivals import PoissonArrivals, sample_announcements
from .allocation import split_counts, randomized_rounding, expand, allocate_orders
from .errors import InvalidConfigError
from .generator import ArrivalTrace, PoissonArrivalTimes, make_arrival_times
from .rng import RNG, ExponentialGaps

__all__ = [
    "PoissonArrivals",
    "sample_announcements",
    "split_counts",
    "randomized_rounding",
    "expand",
    "allocate_orders",
    "InvalidConfigError",
    "ArrivalTrace",
    "PoissonArrivalTimes",
    "make_arrival_times",
    "RNG",
    "ExponentialGaps",
]
