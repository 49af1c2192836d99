"""Fixed-width opaque byte blobs with little-endian hexadecimal text forms."""

from __future__ import annotations

from typing import ClassVar, Iterable, Optional, Sequence, Union

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_C_SPACE = frozenset(" \t\n\v\f\r")
_HEXMAP = "0123456789abcdef"


def hex_str(data: Iterable[int], spaces: bool = False) -> str:
    """Render a sequence of byte values as lower-case hex, optionally space separated."""
    parts = [_HEXMAP[value >> 4] + _HEXMAP[value & 15] for value in (v & 0xFF for v in data)]
    return (" " if spaces else "").join(parts)


def _as_ints(value: Union[str, bytes, bytearray, Sequence[int]]) -> Sequence[int]:
    if isinstance(value, str):
        return value.encode("utf-8")
    return value


def timing_resistant_equal(a, b) -> bool:
    """Compare two sequences in time proportional to the length of the first."""
    left = _as_ints(a)
    right = _as_ints(b)
    if len(right) == 0:
        return len(left) == 0
    accumulator = len(left) ^ len(right)
    size = len(right)
    for position, item in enumerate(left):
        accumulator |= item ^ right[position % size]
    return accumulator == 0


class BaseBlob:
    """An opaque blob of WIDTH bytes, stored least significant byte first."""

    WIDTH: ClassVar[int] = 0

    def __init__(self, data: Optional[Union[bytes, bytearray, Sequence[int]]] = None) -> None:
        if self.WIDTH <= 0:
            raise TypeError(f"{type(self).__name__} has no fixed width")
        if data is None:
            self._data = bytearray(self.WIDTH)
            return
        raw = bytearray(data)
        if len(raw) != self.WIDTH:
            raise ValueError(
                f"{type(self).__name__} needs {self.WIDTH} bytes, got {len(raw)}"
            )
        self._data = raw

    def is_null(self) -> bool:
        """True when every byte is zero."""
        return not any(self._data)

    def set_null(self) -> None:
        """Reset every byte to zero."""
        self._data = bytearray(self.WIDTH)

    def compare(self, other: "BaseBlob") -> int:
        """Byte-wise comparison of the stored bytes: -1, 0 or 1."""
        if type(other) is not type(self):
            raise TypeError(
                f"cannot compare {type(self).__name__} with {type(other).__name__}"
            )
        if self._data < other._data:
            return -1
        if self._data > other._data:
            return 1
        return 0

    def get_hex(self) -> str:
        """Hex text, most significant byte first."""
        return hex_str(reversed(self._data))

    def set_hex(self, text: str) -> None:
        """Load from hex text, ignoring leading whitespace and an optional 0x prefix.

        Parsing stops at the first non-hex character; only the trailing
        2 * WIDTH digits are kept.
        """
        position = 0
        while position < len(text) and text[position] in _C_SPACE:
            position += 1
        if text[position:position + 1] == "0" and text[position + 1:position + 2].lower() == "x":
            position += 2
        end = position
        while end < len(text) and text[end] in _HEX_DIGITS:
            end += 1
        digits = text[position:end]
        if len(digits) % 2:
            digits = "0" + digits
        value = bytearray(reversed(bytes.fromhex(digits)))[: self.WIDTH]
        value.extend(bytes(self.WIDTH - len(value)))
        self._data = value

    def get_uint64(self, pos: int) -> int:
        """The pos-th little-endian 64-bit word."""
        if pos < 0 or (pos + 1) * 8 > self.WIDTH:
            raise IndexError(f"word {pos} is outside a {self.WIDTH}-byte blob")
        return int.from_bytes(self._data[pos * 8:pos * 8 + 8], "little")

    @property
    def size(self) -> int:
        return self.WIDTH

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __len__(self) -> int:
        return self.WIDTH

    def __iter__(self):
        return iter(bytes(self._data))

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._data == other._data

    def __lt__(self, other: "BaseBlob") -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        return hash((type(self).__name__, bytes(self._data)))

    def __str__(self) -> str:
        return self.get_hex()

    def __repr__(self) -> str:
        return f"{type(self).__name__}('{self.get_hex()}')"


class Uint160(BaseBlob):
    """160-bit opaque blob."""

    WIDTH = 20


class Uint256(BaseBlob):
    """256-bit opaque blob."""

    WIDTH = 32

    def get_nibble(self, index: int) -> int:
        """The index-th hex digit, counted from the most significant end."""
        if not 0 <= index < 64:
            raise IndexError(f"nibble index {index} out of range")
        index = 63 - index
        if index % 2 == 1:
            return self._data[index // 2] >> 4
        return self._data[index // 2] & 0x0F


class Uint512(BaseBlob):
    """512-bit opaque blob."""

    WIDTH = 64

    def trim256(self) -> Uint256:
        """The low 256 bits as a Uint256."""
        return Uint256(bytes(self._data[:32]))


def uint256_from_hex(text: str) -> Uint256:
    """Build a Uint256 from hex text."""
    blob = Uint256()
    blob.set_hex(text)
    return blob