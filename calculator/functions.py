"""
The fixed library of functions callable from expressions.

Functions follow IEEE semantics: a domain error such as sqrt(-1) yields NaN
and an overflow yields an infinity, rather than raising like the `math`
module does. That is why most entries are NumPy ufuncs or SciPy special
functions; callers should evaluate them under `numpy.errstate(all="ignore")`.
"""
import math
from fractions import Fraction
from types import MappingProxyType
from typing import Callable, NamedTuple

import numpy as np
from scipy import special

from .errors import ArityError


class Function(NamedTuple):
    name: str
    arity: int
    fn: Callable[..., float]

    def __call__(self, *args: float) -> float:
        if len(args) != self.arity:
            raise ArityError(self.name, self.arity, len(args))
        return float(self.fn(*args))


def _round(x: float) -> float:
    """Round half away from zero."""
    t = np.trunc(x)
    if abs(x - t) >= 0.5:
        t += math.copysign(1.0, x)
    return t


def _dim(x: float, y: float) -> float:
    """Positive difference, max(x - y, 0)."""
    v = x - y
    if v <= 0:
        return 0.0
    return v


def _logb(x: float) -> float:
    """Binary exponent of x."""
    if x == 0:
        return -math.inf
    if math.isinf(x):
        return math.inf
    if math.isnan(x):
        return x
    _, exp = math.frexp(x)
    return float(exp - 1)


def _max(x: float, y: float) -> float:
    if math.isinf(x) and x > 0 or math.isinf(y) and y > 0:
        return math.inf
    if math.isnan(x) or math.isnan(y):
        return math.nan
    if x == 0 and x == y:
        return y if math.copysign(1.0, x) < 0 else x
    return x if x > y else y


def _min(x: float, y: float) -> float:
    if math.isinf(x) and x < 0 or math.isinf(y) and y < 0:
        return -math.inf
    if math.isnan(x) or math.isnan(y):
        return math.nan
    if x == 0 and x == y:
        return x if math.copysign(1.0, x) < 0 else y
    return x if x < y else y


def _remainder(x: float, y: float) -> float:
    """IEEE 754 remainder."""
    if math.isnan(x) or math.isnan(y) or math.isinf(x) or y == 0:
        return math.nan
    return math.remainder(x, y)


def _fma(x: float, y: float, z: float) -> float:
    """x * y + z with a single rounding."""
    if math.isfinite(x) and math.isfinite(y) and math.isinf(z):
        # exact x * y is finite, so the infinite addend wins
        return z
    if not all(map(math.isfinite, (x, y, z))):
        return x * y + z
    exact = Fraction(x) * Fraction(y) + Fraction(z)
    if exact == 0:
        # x * y == -z exactly here, so float arithmetic gets the zero's sign right
        return x * y + z
    try:
        return float(exact)
    except OverflowError:
        return math.inf if exact > 0 else -math.inf


_NULLARY = {
    "nan": lambda: math.nan,
}

_UNARY = {
    "abs": np.fabs,
    "acos": np.arccos,
    "acosh": np.arccosh,
    "asin": np.arcsin,
    "asinh": np.arcsinh,
    "atan": np.arctan,
    "atanh": np.arctanh,
    "cbrt": np.cbrt,
    "ceil": np.ceil,
    "cos": np.cos,
    "cosh": np.cosh,
    "erf": special.erf,
    "erfc": special.erfc,
    "erfcinv": special.erfcinv,
    "erfinv": special.erfinv,
    "exp": np.exp,
    "exp2": np.exp2,
    "expm1": np.expm1,
    "floor": np.floor,
    "gamma": special.gamma,
    "j0": special.j0,
    "j1": special.j1,
    "log": np.log,
    "log10": np.log10,
    "log1p": np.log1p,
    "log2": np.log2,
    "logb": _logb,
    "round": _round,
    "roundtoeven": np.rint,
    "sin": np.sin,
    "sinh": np.sinh,
    "sqrt": np.sqrt,
    "tan": np.tan,
    "tanh": np.tanh,
    "trunc": np.trunc,
    "y0": special.y0,
    "y1": special.y1,
}

_BINARY = {
    "atan2": np.arctan2,
    "copysign": np.copysign,
    "dim": _dim,
    "hypot": np.hypot,
    "max": _max,
    "min": _min,
    "mod": np.fmod,
    "nextafter": np.nextafter,
    "pow": np.power,
    "remainder": _remainder,
}

_TERNARY = {
    "fma": _fma,
}

FUNCTIONS = MappingProxyType({
    name: Function(name, arity, fn)
    for arity, table in enumerate((_NULLARY, _UNARY, _BINARY, _TERNARY))
    for name, fn in table.items()
})
