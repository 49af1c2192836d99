"""Stratum data model: protocol flavours, pool connections, work packages and helpers."""

from __future__ import annotations

import enum
import re
import time
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Mapping, Tuple

from .uint256 import Uint256, uint256_from_hex

AUTODETECT = 999
"""Stratum version or mode value meaning "not chosen yet, detect it"."""

_MAX_TARGET = (1 << 256) - 1
_DIFFICULTY_ONE_TARGET = 0x00000000FFFF0000000000000000000000000000000000000000000000000000
_EXTRANONCE_PATTERN = re.compile(r"(0x)?([A-Fa-f0-9]{2,})")


class StratumProtocol(enum.IntEnum):
    """The stratum flavours spoken by pools, tried from the highest down."""

    STRATUM = 0
    ETHPROXY = 1
    ETHEREUMSTRATUM = 2
    ETHEREUMSTRATUM2 = 3


class SecureLevel(enum.Enum):
    """Transport security requested for a pool connection."""

    NONE = "none"
    TLS = "tls"
    TLS12 = "tls12"


class ExtranonceError(ValueError):
    """Raised when a pool sends an unusable extranonce."""


@dataclass
class PoolConnection:
    """Parameters and negotiated state of one pool endpoint."""

    host: str
    port: int
    user: str = ""
    path: str = ""
    password: str = ""
    workername: str = ""
    sec_level: SecureLevel = SecureLevel.NONE
    version: int = AUTODETECT
    stratum_mode: int = AUTODETECT
    stratum_mode_confirmed: bool = False
    responds: bool = False
    unrecoverable: bool = False
    duration: float = 0.0

    def user_dot_worker(self) -> str:
        """The login name: user, followed by ".worker" when a worker name is set."""
        if self.workername:
            return f"{self.user}.{self.workername}"
        return self.user


@dataclass
class WorkPackage:
    """A job handed out by the pool."""

    job: str = ""
    seed: Uint256 = field(default_factory=Uint256)
    header: Uint256 = field(default_factory=Uint256)
    boundary: Uint256 = field(default_factory=Uint256)
    block_boundary: Uint256 = field(default_factory=Uint256)
    epoch: int = -1
    block: int = -1
    start_nonce: int = 0
    ex_size_bytes: int = 0
    algo: str = "ethash"

    def __bool__(self) -> bool:
        return not self.header.is_null()


@dataclass
class Solution:
    """A nonce found for a work package by the miner with index midx."""

    nonce: int
    mix_hash: Uint256
    work: WorkPackage
    midx: int = 0


@dataclass
class Session:
    """State that lives as long as one authenticated pool session."""

    subscribed: bool = False
    authorized: bool = False
    extra_nonce: int = 0
    extra_nonce_size_bytes: int = 0
    next_work_boundary: Uint256 = field(
        default_factory=lambda: uint256_from_hex(f"{_DIFFICULTY_ONE_TARGET:064x}")
    )
    first_mining_set: bool = False
    timeout: int = 30
    session_id: str = ""
    worker_id: str = ""
    algo: str = "ethash"
    epoch: int = 0
    started: float = field(default_factory=time.monotonic)
    last_tx_stamp: float = field(default_factory=time.monotonic)

    @property
    def duration(self) -> float:
        """Minutes elapsed since the session started."""
        return (time.monotonic() - self.started) / 60.0


def parse_extranonce(enonce: str) -> Tuple[int, int]:
    """Parse an extranonce into (start nonce, length of its hex digits).

    The hex digits must come in pairs and be at most eight; they fill the
    most significant end of a 64-bit nonce.
    """
    if not enonce:
        raise ExtranonceError("Empty hex value")
    match = _EXTRANONCE_PATTERN.fullmatch(enonce)
    if match is None:
        raise ExtranonceError(f"Invalid hex value {enonce}")
    hex_part = match.group(2)
    if len(hex_part) % 2:
        raise ExtranonceError(f"Odd number of hex chars {enonce}")
    if len(hex_part) > 8:
        raise ExtranonceError(f"Too wide hex value {enonce}")
    return int(hex_part.ljust(16, "0"), 16), len(hex_part)


def _json_as_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, str)):
        return str(value)
    raise ValueError(f"JSON value of type {type(value).__name__} is not convertible to string")


def process_error(response: Mapping[str, Any]) -> str:
    """Render the "error" member of a pool response as readable text."""
    error = response.get("error")
    if error is None:
        return "Unknown error"
    if isinstance(error, list):
        return "".join(_json_as_string(item) + " " for item in error)
    if isinstance(error, dict):
        return "".join(f"{key}:{_json_as_string(error[key])} " for key in sorted(error))
    return _json_as_string(error)


def target_from_difficulty(difficulty: float) -> Uint256:
    """The share boundary for a pool difficulty; zero difficulty gives the widest target."""
    if difficulty < 0:
        raise ValueError("difficulty must not be negative")
    if difficulty == 0:
        target = _MAX_TARGET
    else:
        target = min(int(_DIFFICULTY_ONE_TARGET / Fraction(difficulty)), _MAX_TARGET)
    return uint256_from_hex(f"{target:064x}")


def to_hex(value: int, prefix: bool = False, width: int = 16) -> str:
    """Lower-case hex of a non-negative integer, zero padded to width digits."""
    if value < 0:
        raise ValueError("value must not be negative")
    text = f"{value:0{width}x}"
    return "0x" + text if prefix else text


def to_compact_hex(value: int, prefix: bool = False) -> str:
    """Lower-case hex of the minimal big-endian bytes of a non-negative integer."""
    if value < 0:
        raise ValueError("value must not be negative")
    size = max(1, (value.bit_length() + 7) // 8)
    text = value.to_bytes(size, "big").hex()
    return "0x" + text if prefix else text