from fractions import Fraction
from typing import List, Sequence, Tuple
import math

from .rng import RNG
from .rounding import round_half_down, round_half_up, is_integral

def split_counts(n: int, ratio: float) -> Tuple[int, int]:
    """
    Reparte n casillas entre dos cubetas según ratio (fracción de la cubeta alta).
    Los desempates opuestos hacen que las dos cantidades sumen exactamente n.
    Se calcula en aritmética racional exacta para que un empate sea un empate real.
    """
    assert n >= 0, "n debe ser >= 0"
    r = Fraction(ratio)
    assert 0 <= r <= 1, "ratio debe estar en [0, 1]"
    floor_count = round_half_down((1 - r) * n)
    ceil_count = round_half_up(r * n)
    assert floor_count + ceil_count == n, \
        f"reparto inconsistente: {floor_count} + {ceil_count} != {n} (ratio={ratio})"
    return floor_count, ceil_count

def randomized_rounding(rng: RNG, n: int, mean: float) -> List[int]:
    """
    n enteros en {floor(mean), ceil(mean)} cuya media aproxima `mean` lo mejor posible.
    El reparto se baraja con el RNG compartido para no favorecer ninguna posición.
    Con `mean` entera no se consume aleatoriedad.
    """
    if is_integral(mean):
        return [int(mean)] * n
    lo = int(math.floor(mean))
    hi = int(math.ceil(mean))
    floor_count, ceil_count = split_counts(n, Fraction(mean) - lo)
    counts = [lo] * floor_count + [hi] * ceil_count
    rng.shuffle(counts)
    return counts

def expand(times: Sequence[int], counts: Sequence[int]) -> List[int]:
    assert len(times) == len(counts), "times y counts deben tener el mismo largo"
    out: List[int] = []
    for t, c in zip(times, counts):
        out.extend([t] * c)
    return out

def allocate_orders(rng: RNG, announcements: Sequence[int], orders_per_announcement: float) -> List[int]:
    counts = randomized_rounding(rng, len(announcements), orders_per_announcement)
    return expand(announcements, counts)
