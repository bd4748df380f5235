# src/demand/generator.py
from dataclasses import dataclass
from typing import List, TYPE_CHECKING
import logging

from .rng import RNG
from .errors import check_positive, check_minutes
from .arrivals import sample_announcements
from .allocation import randomized_rounding, expand

if TYPE_CHECKING:
    from src.scenario.scenario_config import GeneratorConfig

logger = logging.getLogger(__name__)

@dataclass
class ArrivalTrace:
    """Resultado detallado de una generación."""
    announcements: List[int]   # tiempos de anuncio, estrictamente crecientes
    counts: List[int]          # pedidos por anuncio (paralelo a announcements)
    times: List[int]           # un tiempo por pedido, no decreciente

    @property
    def n_announcements(self) -> int:
        return len(self.announcements)

    @property
    def n_orders(self) -> int:
        return len(self.times)

@dataclass(frozen=True)
class PoissonArrivalTimes:
    """
    Tiempos de llegada de pedidos (minutos enteros) a partir de un proceso Poisson
    de anuncios, cada uno con 1..N pedidos.

    Por la discretización y el control del horizonte, la media efectiva de anuncios
    queda algo por debajo de la de un Poisson continuo.
    """
    scenario_length: int            # minutos
    announcement_rate: float        # anuncios por hora
    orders_per_announcement: float  # media de pedidos por anuncio

    def __post_init__(self):
        object.__setattr__(self, "scenario_length", check_minutes("scenario_length", self.scenario_length))
        object.__setattr__(self, "announcement_rate", check_positive("announcement_rate", self.announcement_rate))
        object.__setattr__(self, "orders_per_announcement",
                           check_positive("orders_per_announcement", self.orders_per_announcement))

    @classmethod
    def from_config(cls, cfg: "GeneratorConfig") -> "PoissonArrivalTimes":
        return cls(cfg.scenario_length, cfg.announcement_rate, cfg.orders_per_announcement)

    @property
    def rate_per_min(self) -> float:
        return self.announcement_rate / 60.0

    def generate_trace(self, rng: RNG) -> ArrivalTrace:
        announcements = sample_announcements(rng, self.scenario_length, self.announcement_rate)
        counts = randomized_rounding(rng, len(announcements), self.orders_per_announcement)
        times = expand(announcements, counts)
        logger.debug("generados %d anuncios -> %d pedidos en %d min",
                     len(announcements), len(times), self.scenario_length)
        return ArrivalTrace(announcements=announcements, counts=counts, times=times)

    def generate(self, rng: RNG) -> List[int]:
        return self.generate_trace(rng).times

def make_arrival_times(
    seed: int,
    scenario_length: int,
    announcement_rate: float,
    orders_per_announcement: float = 1.0,
) -> List[int]:
    """Atajo: genera con un RNG nuevo sembrado con `seed`."""
    gen = PoissonArrivalTimes(scenario_length, announcement_rate, orders_per_announcement)
    return gen.generate(RNG(seed=seed))
