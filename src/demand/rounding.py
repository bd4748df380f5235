from fractions import Fraction
import math

_HALF = Fraction(1, 2)

def round_half_down(x) -> int:
    """Entero más cercano; los empates (x.5) van hacia -inf."""
    return int(math.ceil(x - _HALF))

def round_half_up(x) -> int:
    """Entero más cercano; los empates (x.5) van hacia +inf."""
    return int(math.floor(x + _HALF))

def is_integral(x: float) -> bool:
    return math.isfinite(x) and float(x).is_integer()
