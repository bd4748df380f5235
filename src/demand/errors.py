from numbers import Real
import math

class InvalidConfigError(ValueError):
    """Parámetros del generador fuera de dominio (se detecta al construir)."""

def check_positive(name: str, value) -> float:
    """Valida un real > 0 y finito (acepta escalares numpy); devuelve float."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidConfigError(f"{name} debe ser numérico, no {type(value).__name__}")
    if not math.isfinite(value) or value <= 0:
        raise InvalidConfigError(f"{name} debe ser > 0 y finito (recibido {value!r})")
    return float(value)

def check_minutes(name: str, value) -> int:
    """Como check_positive, pero exige un número entero de minutos; devuelve int."""
    v = check_positive(name, value)
    if not v.is_integer():
        raise InvalidConfigError(f"{name} debe ser entero (recibido {value!r})")
    return int(v)
