"""Small fixed-size vector types with component-wise arithmetic.

Float vectors hold Python floats. Int vectors wrap like 32-bit signed
integers and UInt vectors wrap modulo 2**32, the way the equivalent
fixed-width types behave.
"""

from __future__ import annotations

import math
import numbers
import operator
from dataclasses import dataclass
from typing import Any, Callable, Iterator

_UINT_MOD = 1 << 32
_INT_HALF = 1 << 31


def _wrap_int32(value: int) -> int:
    return ((value + _INT_HALF) % _UINT_MOD) - _INT_HALF


def _ieee_div(a: float, b: float) -> float:
    """Divide like IEEE floats: zero divisors give inf or nan instead of raising."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


class _Vector:
    """Shared behaviour of all vector types."""

    __slots__ = ()
    __match_args__: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for name in self.__match_args__:
            object.__setattr__(self, name, self._coerce(getattr(self, name)))

    @staticmethod
    def _coerce(value: Any) -> Any:
        raise NotImplementedError

    @staticmethod
    def _cast(value: Any) -> Any:
        raise NotImplementedError

    @staticmethod
    def _is_scalar(value: Any) -> bool:
        raise NotImplementedError

    def __iter__(self) -> Iterator[Any]:
        return (getattr(self, name) for name in self.__match_args__)

    def __len__(self) -> int:
        return len(self.__match_args__)

    def __getitem__(self, index: int) -> Any:
        return tuple(self)[index]

    def _binary(self, other: Any, op: Callable[[Any, Any], Any]):
        if type(other) is type(self):
            return type(self)(*map(op, self, other))
        if isinstance(other, _Vector) or not self._is_scalar(other):
            return NotImplemented
        return type(self)(*(op(c, other) for c in self))

    def _reflected(self, other: Any, op: Callable[[Any, Any], Any]):
        if isinstance(other, _Vector) or not self._is_scalar(other):
            return NotImplemented
        return type(self)(*(op(other, c) for c in self))

    def __add__(self, other):
        return self._binary(other, operator.add)

    def __radd__(self, other):
        return self._reflected(other, operator.add)

    def __sub__(self, other):
        return self._binary(other, operator.sub)

    def __rsub__(self, other):
        return self._reflected(other, operator.sub)

    def __mul__(self, other):
        return self._binary(other, operator.mul)

    def __rmul__(self, other):
        return self._reflected(other, operator.mul)


class _FloatVector(_Vector):
    __slots__ = ()

    @staticmethod
    def _coerce(value: Any) -> float:
        if isinstance(value, _Vector) or not isinstance(value, numbers.Real):
            raise TypeError(f"float component expected, got {value!r}")
        return float(value)

    @staticmethod
    def _cast(value: Any) -> float:
        return float(value)

    @staticmethod
    def _is_scalar(value: Any) -> bool:
        return isinstance(value, numbers.Real)

    def __truediv__(self, other):
        return self._binary(other, _ieee_div)

    def __rtruediv__(self, other):
        return self._reflected(other, _ieee_div)

    def __neg__(self):
        return type(self)(*(-c for c in self))


class _IntVector(_Vector):
    __slots__ = ()

    @staticmethod
    def _coerce(value: Any) -> int:
        return _wrap_int32(operator.index(value))

    @staticmethod
    def _cast(value: Any) -> int:
        return _wrap_int32(int(value))

    @staticmethod
    def _is_scalar(value: Any) -> bool:
        return isinstance(value, numbers.Integral)

    def __neg__(self):
        return type(self)(*(-c for c in self))


class _UIntVector(_Vector):
    __slots__ = ()

    @staticmethod
    def _coerce(value: Any) -> int:
        return operator.index(value) % _UINT_MOD

    @staticmethod
    def _cast(value: Any) -> int:
        return int(value) % _UINT_MOD

    @staticmethod
    def _is_scalar(value: Any) -> bool:
        return isinstance(value, numbers.Integral)


@dataclass(frozen=True, slots=True)
class Float2(_FloatVector):
    x: float
    y: float

    @classmethod
    def splat(cls, s):
        """Build a vector whose components all equal ``s``."""
        return cls(s, s)


@dataclass(frozen=True, slots=True)
class Float3(_FloatVector):
    x: float
    y: float
    z: float

    @classmethod
    def splat(cls, s):
        """Build a vector whose components all equal ``s``."""
        return cls(s, s, s)


@dataclass(frozen=True, slots=True)
class Float4(_FloatVector):
    x: float
    y: float
    z: float
    w: float

    @classmethod
    def splat(cls, s):
        """Build a vector whose components all equal ``s``."""
        return cls(s, s, s, s)


@dataclass(frozen=True, slots=True)
class Int2(_IntVector):
    x: int
    y: int

    @classmethod
    def splat(cls, s):
        """Build a vector whose components all equal ``s``."""
        return cls(s, s)


@dataclass(frozen=True, slots=True)
class Int3(_IntVector):
    x: int
    y: int
    z: int

    @classmethod
    def splat(cls, s):
        """Build a vector whose components all equal ``s``."""
        return cls(s, s, s)


@dataclass(frozen=True, slots=True)
class Int4(_IntVector):
    x: int
    y: int
    z: int
    w: int

    @classmethod
    def splat(cls, s):
        """Build a vector whose components all equal ``s``."""
        return cls(s, s, s, s)


@dataclass(frozen=True, slots=True)
class UInt2(_UIntVector):
    x: int
    y: int

    @classmethod
    def splat(cls, s):
        """Build a vector whose components all equal ``s``."""
        return cls(s, s)


@dataclass(frozen=True, slots=True)
class UInt3(_UIntVector):
    x: int
    y: int
    z: int

    @classmethod
    def splat(cls, s):
        """Build a vector whose components all equal ``s``."""
        return cls(s, s, s)


@dataclass(frozen=True, slots=True)
class UInt4(_UIntVector):
    x: int
    y: int
    z: int
    w: int

    @classmethod
    def splat(cls, s):
        """Build a vector whose components all equal ``s``."""
        return cls(s, s, s, s)


def convert(v, cls, *args):
    """Convert vector ``v`` to vector type ``cls``.

    Extra components are dropped when ``cls`` is shorter. When it is longer,
    the missing components are taken from ``args`` and then filled with zero.
    Components are cast to the target element type (floats truncate toward
    zero when cast to integers).
    """
    if not isinstance(v, _Vector):
        raise TypeError(f"vector expected, got {v!r}")
    if not (isinstance(cls, type) and issubclass(cls, _Vector) and cls.__match_args__):
        raise TypeError(f"vector type expected, got {cls!r}")
    size = len(cls.__match_args__)
    components = list(v)
    if len(components) >= size:
        if args:
            raise TypeError(
                f"no room for extra components converting {type(v).__name__} to {cls.__name__}"
            )
        components = components[:size]
    else:
        missing = size - len(components)
        if len(args) > missing:
            raise TypeError(
                f"{cls.__name__} takes at most {missing} extra component(s), got {len(args)}"
            )
        components += list(args) + [0] * (missing - len(args))
    return cls(*(cls._cast(c) for c in components))