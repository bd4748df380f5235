import logging
import numpy as np
import pytest
from src.demand.errors import InvalidConfigError
from src.demand.rng import RNG
from src.demand.arrivals import PoissonArrivals, sample_announcements
import src.demand.arrivals as arrivals_mod

class _FixedGaps:
    """Sustituye a ExponentialGaps con brechas prefijadas."""
    def __init__(self, values):
        self._it = iter(values)

    def sample(self):
        return next(self._it)

def _patch_gaps(monkeypatch, values):
    monkeypatch.setattr(arrivals_mod, "ExponentialGaps", lambda rng, rate_per_min: _FixedGaps(values))

def test_announcements_reproducible():
    pa = PoissonArrivals(scenario_length=480, announcement_rate=10.0)
    t1 = pa.sample_times(RNG(seed=123))
    t2 = pa.sample_times(RNG(seed=123))
    assert t1 == t2 and len(t1) > 0

def test_strictly_increasing_and_in_range():
    for seed in range(20):
        times = sample_announcements(RNG(seed=seed), 120, 30.0)
        assert times
        assert all(0 <= x < 120 for x in times)
        assert all(a < b for a, b in zip(times, times[1:]))
        assert all(isinstance(x, int) for x in times)

def test_gaps_round_half_down_and_zero_gaps_skipped(monkeypatch):
    _patch_gaps(monkeypatch, [2.5, 0.5, 1.5, 0.49, 10.0, 200.0])
    # 2.5->2, 0.5->0 (ignorado), 1.5->1, 0.49->0 (ignorado), 10->10, 200 -> fuera
    assert sample_announcements(RNG(seed=0), 100, 10.0) == [2, 3, 13]

def test_first_timestamp_may_be_zero(monkeypatch):
    _patch_gaps(monkeypatch, [0.3, 0.2, 4.0, 99.0])
    assert sample_announcements(RNG(seed=0), 50, 10.0) == [0, 4]

def test_retry_when_first_gap_exceeds_horizon(monkeypatch, caplog):
    _patch_gaps(monkeypatch, [5.0, 7.2, 0.2, 0.4, 3.0])
    with caplog.at_level(logging.DEBUG, logger="src.demand.arrivals"):
        times = sample_announcements(RNG(seed=0), 1, 60.0)
    assert times == [0]
    assert "2 reintentos" in caplog.text

def test_out_of_range_timestamp_is_discarded(monkeypatch):
    _patch_gaps(monkeypatch, [3.0, 4.0, 3.0])
    assert sample_announcements(RNG(seed=0), 10, 10.0) == [3, 7]

def test_unit_horizon_high_rate_terminates_with_zero_only():
    for seed in range(10):
        assert sample_announcements(RNG(seed=seed), 1, 600.0) == [0]

def test_unit_horizon_low_rate_still_non_empty():
    # media de 10 min: casi siempre la primera brecha se pasa del horizonte
    for seed in range(5):
        assert sample_announcements(RNG(seed=seed), 1, 6.0) == [0]

def test_consumes_single_draw_from_shared_rng():
    a, b = RNG(seed=5), RNG(seed=5)
    sample_announcements(a, 600, 30.0)
    b.next_seed()
    assert a.random() == b.random()

def test_sampler_rejects_non_positive_config_at_construction():
    for kwargs in (dict(scenario_length=0, announcement_rate=10.0),
                   dict(scenario_length=-3, announcement_rate=10.0),
                   dict(scenario_length=60, announcement_rate=0.0),
                   dict(scenario_length=60.5, announcement_rate=10.0)):
        with pytest.raises(InvalidConfigError):
            PoissonArrivals(**kwargs)

def test_sample_announcements_rejects_empty_horizon():
    with pytest.raises(InvalidConfigError):
        sample_announcements(RNG(seed=1), 0, 10.0)
    with pytest.raises(InvalidConfigError):
        sample_announcements(RNG(seed=1), 60, -2.0)

def test_sampler_accepts_numpy_scalars():
    pa = PoissonArrivals(scenario_length=np.int64(120), announcement_rate=np.float64(30.0))
    assert type(pa.scenario_length) is int
    assert pa.sample_times(RNG(seed=3)) == PoissonArrivals(120, 30.0).sample_times(RNG(seed=3))
