from dataclasses import dataclass
from typing import List
import logging

from .rng import RNG, ExponentialGaps
from .errors import InvalidConfigError, check_positive, check_minutes
from .rounding import round_half_down

logger = logging.getLogger(__name__)

def sample_announcements(rng: RNG, scenario_length: int, announcement_rate: float) -> List[int]:
    """
    Tiempos de anuncio (minutos enteros) de un proceso Poisson en [0, scenario_length).

    - brechas ~ Exponencial con media 60 / announcement_rate (ritmo por hora -> minutos)
    - cada brecha se discretiza con redondeo half-down
    - una brecha de 0 se ignora salvo que sea la primera (permite t=0 sin duplicados)
    - si la primera brecha ya supera el horizonte se reinicia la suma y se vuelve a intentar
    """
    if scenario_length < 1:
        raise InvalidConfigError(f"scenario_length debe ser >= 1 (recibido {scenario_length!r})")
    if not announcement_rate > 0:
        raise InvalidConfigError(f"announcement_rate debe ser > 0 (recibido {announcement_rate!r})")
    gaps = ExponentialGaps(rng, rate_per_min=announcement_rate / 60.0)
    times: List[int] = []
    total = 0
    retries = 0
    while True:
        gap = round_half_down(gaps.sample())
        if gap == 0 and times:
            continue
        total += gap
        if total < scenario_length:
            times.append(total)
        elif not times:
            # sin cota de reintentos: ver DESIGN.md
            retries += 1
            total = 0
        else:
            break
    if retries:
        logger.debug("secuencia vacía: %d reintentos (length=%d, rate=%.3f/h)",
                     retries, scenario_length, announcement_rate)
    return times

@dataclass(frozen=True)
class PoissonArrivals:
    """Muestreador de anuncios con horizonte y ritmo fijos."""
    scenario_length: int      # minutos
    announcement_rate: float  # anuncios por hora

    def __post_init__(self):
        object.__setattr__(self, "scenario_length", check_minutes("scenario_length", self.scenario_length))
        object.__setattr__(self, "announcement_rate", check_positive("announcement_rate", self.announcement_rate))

    def sample_times(self, rng: RNG) -> List[int]:
        return sample_announcements(rng, self.scenario_length, self.announcement_rate)
