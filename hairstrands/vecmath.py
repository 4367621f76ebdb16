"""Geometric and component-wise helpers for the vector types.

Float operations follow IEEE rules: division by zero and other invalid
operations give inf or nan instead of raising. Integer results wrap to the
width of the vector's element type.
"""

from __future__ import annotations

import math
import numbers
import operator
from functools import reduce
from typing import Any, Callable

from .vectors import Float2, Float3, Float4, Int2, Int3, Int4, UInt2, UInt3, UInt4

_FLOAT_VECTORS = (Float2, Float3, Float4)
_INT_VECTORS = (Int2, Int3, Int4)
_UINT_VECTORS = (UInt2, UInt3, UInt4)
_ALL_VECTORS = _FLOAT_VECTORS + _INT_VECTORS + _UINT_VECTORS

_UINT_MOD = 1 << 32
_INT_HALF = 1 << 31


def _is_vector(value: Any) -> bool:
    return isinstance(value, _ALL_VECTORS)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not _is_vector(value)


def _type_name(value: Any) -> str:
    return type(value).__name__


def _require(value: Any, kinds: tuple[type, ...], func: str) -> None:
    if not isinstance(value, kinds):
        allowed = ", ".join(k.__name__ for k in kinds)
        raise TypeError(f"{func}() expects one of {allowed}, got {_type_name(value)}")


def _require_same(func: str, first: Any, *others: Any) -> None:
    for other in others:
        if type(other) is not type(first):
            raise TypeError(
                f"{func}() needs arguments of the same vector type, "
                f"got {_type_name(first)} and {_type_name(other)}"
            )


def _map(func: Callable[..., Any], *vectors: Any) -> Any:
    return type(vectors[0])(*map(func, *vectors))


def _fmin(a: Any, b: Any) -> Any:
    return a if a < b else b


def _fmax(a: Any, b: Any) -> Any:
    return a if a > b else b


def _div(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _floor(x: float) -> float:
    if math.isfinite(x):
        return float(math.floor(x))
    return float(x)


def _fmod(a: float, b: float) -> float:
    try:
        return math.fmod(a, b)
    except ValueError:
        return math.nan


def _clamp_scalar(f: Any, a: Any, b: Any) -> Any:
    return _fmax(a, _fmin(f, b))


def _pairwise(func: str, op: Callable[[Any, Any], Any], a: Any, b: Any) -> Any:
    if _is_scalar(a) and _is_scalar(b):
        return op(a, b)
    _require(a, _ALL_VECTORS, func)
    _require_same(func, a, b)
    return _map(op, a, b)


def lerp(a, b, t):
    """Linear interpolation between ``a`` and ``b`` at ``t`` in [0, 1]."""
    if not _is_scalar(t):
        raise TypeError(f"lerp() expects a scalar t, got {_type_name(t)}")
    if _is_scalar(a) and _is_scalar(b):
        return a + t * (b - a)
    _require(a, _FLOAT_VECTORS, "lerp")
    _require_same("lerp", a, b)
    return a + t * (b - a)


def clamp(v, a, b):
    """Clamp ``v`` into the range [a, b], component-wise for vectors."""
    if _is_scalar(v):
        if not (_is_scalar(a) and _is_scalar(b)):
            raise TypeError("clamp() of a scalar needs scalar bounds")
        return _clamp_scalar(v, a, b)
    _require(v, _ALL_VECTORS, "clamp")
    cls = type(v)
    low = cls.splat(a) if _is_scalar(a) else a
    high = cls.splat(b) if _is_scalar(b) else b
    _require_same("clamp", v, low, high)
    return _map(_clamp_scalar, v, low, high)


def vmin(a, b):
    """Component-wise minimum."""
    return _pairwise("vmin", _fmin, a, b)


def vmax(a, b):
    """Component-wise maximum."""
    return _pairwise("vmax", _fmax, a, b)


def dot(a, b):
    """Dot product of two vectors of the same type."""
    _require(a, _ALL_VECTORS, "dot")
    _require_same("dot", a, b)
    total = reduce(operator.add, map(operator.mul, a, b))
    if isinstance(a, _INT_VECTORS):
        return ((total + _INT_HALF) % _UINT_MOD) - _INT_HALF
    if isinstance(a, _UINT_VECTORS):
        return total % _UINT_MOD
    return float(total)


def length(v):
    """Euclidean length of a float vector."""
    _require(v, _FLOAT_VECTORS, "length")
    return math.sqrt(dot(v, v))


def normalize(v):
    """Scale a float vector to unit length; a zero vector gives nan components."""
    _require(v, _FLOAT_VECTORS, "normalize")
    squared = dot(v, v)
    inv_len = math.inf if squared == 0 else 1.0 / math.sqrt(squared)
    return v * inv_len


def floor(v):
    """Round each component down to a whole number."""
    if _is_scalar(v):
        return _floor(v)
    _require(v, _FLOAT_VECTORS, "floor")
    return _map(_floor, v)


def frac(v):
    """Fractional part of a scalar or of each vector component."""
    if _is_scalar(v):
        return v - _floor(v)
    _require(v, _FLOAT_VECTORS, "frac")
    return v - floor(v)


def fmod(a, b):
    """Floating-point remainder with the sign of the dividend."""
    if _is_scalar(a) and _is_scalar(b):
        return _fmod(a, b)
    _require(a, _FLOAT_VECTORS, "fmod")
    _require_same("fmod", a, b)
    return _map(_fmod, a, b)


def vabs(v):
    """Absolute value of a scalar or of each component of a signed vector."""
    if _is_scalar(v):
        return abs(v)
    _require(v, _FLOAT_VECTORS + _INT_VECTORS, "vabs")
    return _map(abs, v)


def reflect(i, n):
    """Reflect incident vector ``i`` about the unit normal ``n``."""
    _require(i, (Float3,), "reflect")
    _require_same("reflect", i, n)
    return i - 2.0 * n * dot(n, i)


def cross(a, b):
    """Cross product of two Float3 vectors."""
    _require(a, (Float3,), "cross")
    _require_same("cross", a, b)
    return Float3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def smoothstep(a, b, x):
    """Hermite interpolation: 0 below ``a``, 1 above ``b``, smooth in between."""
    if _is_scalar(a) and _is_scalar(b) and _is_scalar(x):
        y = clamp(_div(x - a, b - a), 0.0, 1.0)
        return y * y * (3.0 - 2.0 * y)
    _require(a, _FLOAT_VECTORS, "smoothstep")
    _require_same("smoothstep", a, b, x)
    cls = type(a)
    y = clamp((x - a) / (b - a), 0.0, 1.0)
    return y * y * (cls.splat(3.0) - cls.splat(2.0) * y)