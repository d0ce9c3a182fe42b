# file: src/module1_hamming_codec/metrics.py

"""
Codec performance metrics.

Bit Error Rate (BER) and redundancy overhead for evaluating a channel run.
"""

import numpy as np


def count_bit_errors(original: bytes, received: bytes) -> int:
    """
    Count differing bits between two equal-length byte sequences.

    Raises:
        ValueError: If inputs have different lengths
    """
    if len(original) != len(received):
        raise ValueError(
            f"Length mismatch: original={len(original)}, received={len(received)}"
        )

    if len(original) == 0:
        return 0

    xor = np.bitwise_xor(
        np.frombuffer(bytes(original), dtype=np.uint8),
        np.frombuffer(bytes(received), dtype=np.uint8),
    )
    return int(np.unpackbits(xor).sum())


def compute_ber(original: bytes, received: bytes) -> float:
    """
    Compute Bit Error Rate (BER) between two byte sequences.

    BER = (number of bit errors) / (total number of bits)

    Args:
        original: Original transmitted data
        received: Received (possibly corrupted) data

    Returns:
        BER as a float in [0.0, 1.0]

    Raises:
        ValueError: If inputs have different lengths

    Example:
        >>> compute_ber(b'\x00\x00', b'\x01\x00')
        0.0625
    """
    if len(original) == 0 and len(received) == 0:
        return 0.0

    return count_bit_errors(original, received) / (len(original) * 8)


def compute_redundancy_overhead(original_length: int, encoded_length: int) -> float:
    """
    Compute redundancy overhead as a percentage.

    Overhead = ((encoded_length - original_length) / original_length) * 100

    Example:
        >>> compute_redundancy_overhead(11, 16)  # 8 EH(16,11) codewords
        45.45454545454545
    """
    if original_length <= 0:
        raise ValueError(f"original_length must be > 0, got {original_length}")

    if encoded_length < original_length:
        raise ValueError(
            f"encoded_length {encoded_length} < original_length {original_length}"
        )

    return ((encoded_length - original_length) / original_length) * 100.0
