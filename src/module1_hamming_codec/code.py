# file: src/module1_hamming_codec/code.py

"""
Extended Hamming code descriptors.

A Code describes one member of the extended Hamming (SECDED) family laid out
over positions 0..total_bits-1:

    position 0          overall parity (double-error detection)
    positions 1,2,4,8.. Hamming parity bits
    other positions     data bits, in ascending order

Parity bit 2**k covers every position whose index has bit k set.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Tuple

import numpy as np

from .errors import CodeConfigurationError


def _minimal_parity_bits(data_bits: int) -> int:
    r = 1
    while 2 ** r < data_bits + r + 1:
        r += 1
    return r


@dataclass(frozen=True)
class Code:
    """
    Immutable descriptor of an extended Hamming code.

    Parameters:
        data_bits (int): Information bits per codeword
        total_bits (int): Codeword length including all parity bits

    Invariants:
        - total_bits = data_bits + r + 1, r minimal with 2**r >= data_bits + r + 1
        - total_bits is a power of two and a multiple of 8
    """

    data_bits: int
    total_bits: int

    def __post_init__(self):
        if self.data_bits < 1:
            raise CodeConfigurationError(f"data_bits={self.data_bits} must be >= 1")

        r = _minimal_parity_bits(self.data_bits)
        expected = self.data_bits + r + 1
        if self.total_bits != expected:
            raise CodeConfigurationError(
                f"Inconsistent code parameters: data_bits={self.data_bits} "
                f"requires total_bits={expected}, got {self.total_bits}"
            )
        if self.total_bits != 2 ** r or self.total_bits % 8 != 0:
            raise CodeConfigurationError(
                f"total_bits={self.total_bits} must be a power of two and a multiple of 8"
            )

    @property
    def parity_bits(self) -> int:
        """Number of Hamming parity bits, excluding the overall parity bit."""
        return self.total_bits - self.data_bits - 1

    @property
    def codeword_bytes(self) -> int:
        return self.total_bits // 8

    @property
    def parity_positions(self) -> Tuple[int, ...]:
        return tuple(1 << k for k in range(self.parity_bits))

    @property
    def data_positions(self) -> Tuple[int, ...]:
        return tuple(
            p for p in range(1, self.total_bits) if p & (p - 1) != 0
        )

    def get_code_rate(self) -> float:
        return self.data_bits / self.total_bits

    def __str__(self) -> str:
        return f"EH({self.total_bits},{self.data_bits})"


EH8_4 = Code(data_bits=4, total_bits=8)
EH16_11 = Code(data_bits=11, total_bits=16)
EH32_26 = Code(data_bits=26, total_bits=32)
EH64_57 = Code(data_bits=57, total_bits=64)

CODES: Dict[str, Code] = {
    'eh8_4': EH8_4,
    'eh16_11': EH16_11,
    'eh32_26': EH32_26,
    'eh64_57': EH64_57,
}


def get_code(name: str) -> Code:
    """
    Look up a code by name (case-insensitive), e.g. 'eh16_11'.

    Raises:
        CodeConfigurationError: If the name is unknown
    """
    try:
        return CODES[name.lower()]
    except (KeyError, AttributeError) as e:
        raise CodeConfigurationError(
            f"Unknown code: {name!r} (available: {', '.join(sorted(CODES))})"
        ) from e


@lru_cache(maxsize=None)
def position_weights(code: Code) -> np.ndarray:
    """
    Matrix of shape (total_bits, parity_bits) whose row p holds the binary
    digits of p, least-significant first.

    Multiplying a codeword (as a 0/1 row vector) by this matrix modulo 2
    yields the syndrome bits: syndrome bit k is the parity of all positions
    covered by parity bit 2**k.
    """
    positions = np.arange(code.total_bits)
    weights = (positions[:, None] >> np.arange(code.parity_bits)[None, :]) & 1
    weights = weights.astype(np.uint8)
    weights.setflags(write=False)
    return weights
