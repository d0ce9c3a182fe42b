# file: src/module1_hamming_codec/bits.py

"""
Byte <-> bit conversion.

Bit order is least-significant-bit first throughout the codec: bit i of a
stream is bit (i % 8) of byte (i // 8). Encoder, decoder and the error mask
all use this convention.
"""

import numpy as np


def bytes_to_bits(data: bytes) -> np.ndarray:
    """
    Unpack bytes into a bit array.

    Args:
        data: Bytes

    Returns:
        bits: Bit array (N*8,) of uint8 0/1 values, LSB of each byte first
    """
    if len(data) == 0:
        return np.zeros(0, dtype=np.uint8)

    return np.unpackbits(np.frombuffer(data, dtype=np.uint8), bitorder='little')


def bits_to_bytes(bits: np.ndarray) -> bytes:
    """
    Pack a bit array into bytes, LSB of each byte first.

    Trailing bits that do not fill a whole byte are dropped.

    Args:
        bits: Bit array (N,) with 0/1 integers

    Returns:
        data: floor(N / 8) bytes
    """
    bits = np.asarray(bits, dtype=np.uint8).reshape(-1) & 1
    usable = (len(bits) // 8) * 8
    if usable == 0:
        return b''

    return np.packbits(bits[:usable], bitorder='little').tobytes()
