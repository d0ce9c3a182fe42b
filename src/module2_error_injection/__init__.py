# file: src/module2_error_injection/__init__.py

"""
Module 2: Error Injection

Simulates a noisy channel by XOR-ing random bit-error masks into an encoded
byte stream. Independent of the codec: masks never look at codeword
structure.

Public API:
    - generate_mask(length_bits: int, probability: float, rng=None) -> bytes
    - resize_mask(mask: bytes, length: int) -> bytes
    - apply_mask(data: bytes, mask: bytes) -> bytes
    - parse_probability(text: str) -> float
"""

from .error_mask import (
    validate_probability,
    parse_probability,
    is_valid_probability,
    generate_mask,
    resize_mask,
    apply_mask,
    count_errors,
    inject_bit_errors,
)
from .errors import InvalidProbabilityError

__version__ = "1.0.0"

__all__ = [
    "validate_probability",
    "parse_probability",
    "is_valid_probability",
    "generate_mask",
    "resize_mask",
    "apply_mask",
    "count_errors",
    "inject_bit_errors",
    "InvalidProbabilityError",
]
