"""256-bit unsigned integers with wrap-around arithmetic and compact target encoding."""

from __future__ import annotations

from typing import Tuple, Union

from .uint256 import Uint256, uint256_from_hex

_BITS = 256
_WIDTH_WORDS = _BITS // 32
_MASK = (1 << _BITS) - 1
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF

_Operand = Union["ArithUint256", int]


class UintError(ArithmeticError):
    """Raised on invalid big-integer arithmetic such as division by zero."""


def _operand(value: _Operand) -> int:
    if isinstance(value, ArithUint256):
        return value._value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"unsupported operand type {type(value).__name__}")
    return value & _MASK


class ArithUint256:
    """An unsigned 256-bit integer; every operation wraps modulo 2**256."""

    __slots__ = ("_value",)

    def __init__(self, value: Union["ArithUint256", int, str] = 0) -> None:
        if isinstance(value, str):
            self._value = 0
            self.set_hex(value)
        else:
            self._value = _operand(value)

    # -- text forms -------------------------------------------------------

    def get_hex(self) -> str:
        """Hex text of 64 digits, most significant first."""
        return arith_to_uint256(self).get_hex()

    def set_hex(self, text: str) -> None:
        """Load the value from hex text (leading spaces and 0x allowed)."""
        self._value = uint_to_arith256(uint256_from_hex(text))._value

    def __str__(self) -> str:
        return self.get_hex()

    def __repr__(self) -> str:
        return f"ArithUint256('{self.get_hex()}')"

    # -- inspection -------------------------------------------------------

    def bits(self) -> int:
        """Position of the highest set bit plus one, or zero for zero."""
        return self._value.bit_length()

    def low64(self) -> int:
        """The least significant 64 bits."""
        return self._value & _MASK64

    def get_double(self) -> float:
        """Approximate the value as a float, summing 32-bit words low to high."""
        result = 0.0
        factor = 1.0
        value = self._value
        for _ in range(_WIDTH_WORDS):
            result += factor * (value & _MASK32)
            factor *= 4294967296.0
            value >>= 32
        return result

    @property
    def size(self) -> int:
        return _BITS // 8

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    # -- compact form -----------------------------------------------------

    def get_compact(self, negative: bool = False) -> int:
        """Encode as a 32-bit compact number (exponent byte plus 23-bit mantissa)."""
        size = (self.bits() + 7) // 8
        if size <= 3:
            compact = (self.low64() << 8 * (3 - size)) & _MASK32
        else:
            compact = (self._value >> 8 * (size - 3)) & _MASK32
        if compact & 0x00800000:
            compact >>= 8
            size += 1
        if compact & ~0x007FFFFF:
            raise UintError("compact mantissa out of range")
        if size >= 256:
            raise UintError("compact exponent out of range")
        compact |= size << 24
        if negative and compact & 0x007FFFFF:
            compact |= 0x00800000
        return compact

    @classmethod
    def from_compact(cls, compact: int) -> "ArithUint256":
        """Decode a compact number, ignoring its sign and overflow flags."""
        return decode_compact(compact)[0]

    # -- arithmetic -------------------------------------------------------

    def __add__(self, other: _Operand) -> "ArithUint256":
        return ArithUint256(self._value + _operand(other))

    __radd__ = __add__

    def __sub__(self, other: _Operand) -> "ArithUint256":
        return ArithUint256(self._value - _operand(other))

    def __rsub__(self, other: _Operand) -> "ArithUint256":
        return ArithUint256(_operand(other) - self._value)

    def __mul__(self, other: _Operand) -> "ArithUint256":
        return ArithUint256(self._value * _operand(other))

    __rmul__ = __mul__

    def __truediv__(self, other: _Operand) -> "ArithUint256":
        divisor = _operand(other)
        if divisor == 0:
            raise UintError("Division by zero")
        return ArithUint256(self._value // divisor)

    __floordiv__ = __truediv__

    def __lshift__(self, shift: int) -> "ArithUint256":
        if shift < 0:
            raise ValueError("negative shift count")
        return ArithUint256(self._value << shift if shift < _BITS else 0)

    def __rshift__(self, shift: int) -> "ArithUint256":
        if shift < 0:
            raise ValueError("negative shift count")
        return ArithUint256(self._value >> shift)

    def __or__(self, other: _Operand) -> "ArithUint256":
        return ArithUint256(self._value | _operand(other))

    __ror__ = __or__

    def __and__(self, other: _Operand) -> "ArithUint256":
        return ArithUint256(self._value & _operand(other))

    __rand__ = __and__

    def __xor__(self, other: _Operand) -> "ArithUint256":
        return ArithUint256(self._value ^ _operand(other))

    __rxor__ = __xor__

    def __invert__(self) -> "ArithUint256":
        return ArithUint256(~self._value & _MASK)

    def __neg__(self) -> "ArithUint256":
        return ArithUint256(-self._value)

    # -- comparison -------------------------------------------------------

    def _other(self, other: object):
        if isinstance(other, ArithUint256):
            return other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        return None

    def __eq__(self, other: object) -> bool:
        value = self._other(other)
        if value is None:
            return NotImplemented
        return self._value == value

    def __lt__(self, other: _Operand) -> bool:
        value = self._other(other)
        if value is None:
            return NotImplemented
        return self._value < value

    def __le__(self, other: _Operand) -> bool:
        value = self._other(other)
        if value is None:
            return NotImplemented
        return self._value <= value

    def __gt__(self, other: _Operand) -> bool:
        value = self._other(other)
        if value is None:
            return NotImplemented
        return self._value > value

    def __ge__(self, other: _Operand) -> bool:
        value = self._other(other)
        if value is None:
            return NotImplemented
        return self._value >= value

    __hash__ = None  # mutable through set_hex


def decode_compact(compact: int) -> Tuple[ArithUint256, bool, bool]:
    """Decode a compact number into (value, negative, overflow)."""
    compact &= _MASK32
    size = compact >> 24
    word = compact & 0x007FFFFF
    if size <= 3:
        word >>= 8 * (3 - size)
        value = ArithUint256(word)
    else:
        value = ArithUint256(word) << 8 * (size - 3)
    negative = word != 0 and (compact & 0x00800000) != 0
    overflow = word != 0 and (
        size > 34 or (word > 0xFF and size > 33) or (word > 0xFFFF and size > 32)
    )
    return value, negative, overflow


def arith_to_uint256(value: ArithUint256) -> Uint256:
    """Store the integer as a little-endian 32-byte blob."""
    return Uint256(int(value).to_bytes(32, "little"))


def uint_to_arith256(blob: Uint256) -> ArithUint256:
    """Read a 32-byte blob as a little-endian integer."""
    return ArithUint256(int.from_bytes(bytes(blob), "little"))