# file: src/module1_hamming_codec/encoder.py

"""
Extended Hamming encoding.

Provides encode() which turns an arbitrary byte sequence into a stream of
SECDED-protected codewords.
"""

import numpy as np

from .bits import bytes_to_bits
from .code import Code, EH16_11, position_weights
from .errors import EncodingError


def encode_codewords(data: bytes, code: Code = EH16_11) -> np.ndarray:
    """
    Encode data into a matrix of codeword bits.

    The message is read as an LSB-first bitstream and split into groups of
    code.data_bits bits; the last group is zero-padded on the right.

    Args:
        data: Message bytes (may be empty)
        code: Code descriptor (default: EH16_11)

    Returns:
        Array of shape (num_codewords, code.total_bits), dtype uint8.
        Column p holds codeword position p.

    Raises:
        EncodingError: If data is not bytes-like
    """
    if not isinstance(data, (bytes, bytearray)):
        raise EncodingError(f"Input must be bytes, got {type(data)}")

    bits = bytes_to_bits(bytes(data))
    num_codewords = -(-len(bits) // code.data_bits)

    padding = num_codewords * code.data_bits - len(bits)
    if padding:
        bits = np.concatenate([bits, np.zeros(padding, dtype=np.uint8)])

    codewords = np.zeros((num_codewords, code.total_bits), dtype=np.uint8)
    if num_codewords == 0:
        return codewords

    codewords[:, list(code.data_positions)] = bits.reshape(num_codewords, code.data_bits)

    # Parity bit 2**k makes the check over its covered positions even
    checks = (codewords.astype(np.int64) @ position_weights(code)) % 2
    codewords[:, list(code.parity_positions)] = checks.astype(np.uint8)

    # Overall parity over positions 1..n-1
    codewords[:, 0] = codewords[:, 1:].sum(axis=1) % 2

    return codewords


def encode(data: bytes, code: Code = EH16_11) -> bytes:
    """
    Encode data with extended Hamming forward error correction.

    Args:
        data: Message bytes (may be empty)
        code: Code descriptor (default: EH16_11)

    Returns:
        Concatenated codewords, code.codeword_bytes bytes each, packed
        LSB-first (codeword position p is bit p of the codeword's bytes)

    Raises:
        EncodingError: If data is not bytes-like

    Example:
        >>> encoded = encode(b"A")
        >>> len(encoded)
        2
    """
    codewords = encode_codewords(data, code)
    if codewords.size == 0:
        return b''

    return np.packbits(codewords.reshape(-1), bitorder='little').tobytes()
