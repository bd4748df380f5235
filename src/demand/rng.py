from dataclasses import dataclass
from typing import Optional
import numpy as np

_SEED_BOUND = np.iinfo(np.int64).max

@dataclass
class RNG:
    """RNG centralizado para reproducibilidad entre módulos.

    Lo crea y lo posee quien llama; se pasa por referencia a cada llamada de
    generación, que avanza su estado pero nunca lo reinicia.
    """
    seed: Optional[int] = None

    def __post_init__(self):
        self._rs = np.random.default_rng(self.seed)

    def integers(self, *args, **kwargs):
        return self._rs.integers(*args, **kwargs)

    def random(self, *args, **kwargs):
        return self._rs.random(*args, **kwargs)

    def exponential(self, scale, size=None):
        return self._rs.exponential(scale=scale, size=size)

    def shuffle(self, x):
        return self._rs.shuffle(x)

    def next_seed(self) -> int:
        """Un único sorteo de 63 bits para sembrar un flujo derivado."""
        return int(self.integers(0, _SEED_BOUND))

    def spawn(self) -> "RNG":
        return RNG(seed=self.next_seed())


class ExponentialGaps:
    """Muestreador exponencial dado un ritmo (eventos por minuto).

    Se siembra con un solo sorteo del RNG compartido, de modo que el número
    de sorteos exponenciales no desplaza el estado del RNG de quien llama.
    """

    def __init__(self, rng: RNG, rate_per_min: float):
        if rate_per_min <= 0:
            raise ValueError("rate_per_min debe ser > 0")
        self.rate_per_min = rate_per_min
        self._stream = rng.spawn()

    @property
    def mean(self) -> float:
        return 1.0 / self.rate_per_min

    def sample(self) -> float:
        return float(self._stream.exponential(self.mean))
