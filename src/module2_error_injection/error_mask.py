# file: src/module2_error_injection/error_mask.py

"""
Random bit-error masks.

A mask is a byte sequence the same length as the encoded stream; each set
bit flips the corresponding stream bit when XOR-combined. Bits are packed
least-significant first, matching the codec.

Draws are independent per bit (binary symmetric channel). There is no
burst-error model.
"""

import math
from typing import Union

import numpy as np

from .errors import InvalidProbabilityError

RandomSource = Union[None, int, np.random.Generator]


def validate_probability(probability: float) -> float:
    """
    Check that probability lies in [0, 1].

    Raises:
        InvalidProbabilityError: If probability is not a number in [0, 1]
    """
    try:
        value = float(probability)
    except (TypeError, ValueError) as e:
        raise InvalidProbabilityError(
            f"error probability must be a number, got {probability!r}"
        ) from e

    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise InvalidProbabilityError(
            f"error probability must be in [0, 1], got {probability}"
        )
    return value


def parse_probability(text: str) -> float:
    """
    Parse a user-entered error probability.

    Parsing follows Python float(): surrounding whitespace is ignored and
    underscore-grouped literals such as "0.2_5" are accepted (then range
    checked), which is looser than a strict decimal parser.

    Example:
        >>> parse_probability(" 0.05 ")
        0.05
    """
    try:
        value = float(str(text).strip())
    except ValueError as e:
        raise InvalidProbabilityError(f"not a number: {text!r}") from e

    return validate_probability(value)


def is_valid_probability(text: str) -> bool:
    """True if text parses to a probability in [0, 1]."""
    try:
        parse_probability(text)
    except InvalidProbabilityError:
        return False
    return True


def generate_mask(
    length_bits: int,
    probability: float,
    rng: RandomSource = None,
) -> bytes:
    """
    Generate a random bit-error mask.

    Each bit is set independently when a uniform draw in [0, 1) is below
    probability, so probability 0.0 gives an all-zero mask and 1.0 an
    all-one mask.

    WARNING: Non-deterministic unless rng is a seed or a seeded Generator.

    Args:
        length_bits: Mask length in bits (non-negative multiple of 8)
        probability: Per-bit flip probability in [0, 1]
        rng: None (fresh entropy), an integer seed, or a numpy Generator

    Returns:
        length_bits // 8 mask bytes

    Raises:
        InvalidProbabilityError: If probability is outside [0, 1]
        ValueError: If length_bits is negative or not a multiple of 8

    Example:
        >>> mask = generate_mask(16, 0.0)
        >>> mask
        b'\x00\x00'
    """
    probability = validate_probability(probability)

    if length_bits < 0 or length_bits % 8 != 0:
        raise ValueError(
            f"length_bits must be a non-negative multiple of 8 (masks are byte-granular), "
            f"got {length_bits}"
        )

    if length_bits == 0:
        return b''

    generator = np.random.default_rng(rng)
    flips = generator.random(length_bits) < probability

    return np.packbits(flips.astype(np.uint8), bitorder='little').tobytes()


def resize_mask(mask: bytes, length: int) -> bytes:
    """
    Truncate or zero-extend a mask to length bytes.

    New bytes mean "no error", so errors already injected into the kept
    prefix survive a change of stream length.
    """
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")

    mask = bytes(mask)
    if len(mask) >= length:
        return mask[:length]
    return mask + b'\x00' * (length - len(mask))


def apply_mask(data: bytes, mask: bytes) -> bytes:
    """
    XOR a mask into data.

    Raises:
        ValueError: If data and mask lengths differ
    """
    if len(data) != len(mask):
        raise ValueError(
            f"Length mismatch: data={len(data)}, mask={len(mask)}"
        )

    if len(data) == 0:
        return b''

    combined = np.bitwise_xor(
        np.frombuffer(bytes(data), dtype=np.uint8),
        np.frombuffer(bytes(mask), dtype=np.uint8),
    )
    return combined.tobytes()


def count_errors(mask: bytes) -> int:
    """Number of set bits in a mask."""
    if len(mask) == 0:
        return 0
    return int(np.unpackbits(np.frombuffer(bytes(mask), dtype=np.uint8)).sum())


def inject_bit_errors(
    data: bytes,
    probability: float,
    rng: RandomSource = None,
) -> bytes:
    """
    Flip each bit of data independently with the given probability.

    Example:
        >>> corrupted = inject_bit_errors(encode(b"hello"), 0.01, rng=42)
    """
    mask = generate_mask(len(data) * 8, probability, rng)
    return apply_mask(data, mask)
