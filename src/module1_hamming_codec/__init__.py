# file: src/module1_hamming_codec/__init__.py

"""
Module 1: Extended Hamming Codec

SECDED forward error correction over byte messages. The default code is
EH(16,11): 11 data bits, 4 Hamming parity bits and 1 overall parity bit per
16-bit codeword. Bits are packed least-significant first.

Public API:
    - encode(data: bytes, code) -> bytes
    - decode(data: bytes, code, length=None) -> bytes
    - decode_with_report(data: bytes, code, length=None) -> DecodeReport
    - compute_ber(original: bytes, received: bytes) -> float
"""

from .code import Code, EH8_4, EH16_11, EH32_26, EH64_57, CODES, get_code
from .bits import bytes_to_bits, bits_to_bytes
from .encoder import encode, encode_codewords
from .decoder import decode, decode_with_report, DecodeReport
from .metrics import count_bit_errors, compute_ber, compute_redundancy_overhead
from .errors import (
    HammingError,
    CodeConfigurationError,
    EncodingError,
    DecodingError,
    CodewordAlignmentError,
    UncorrectableCodewordError,
    TextDecodingError,
)

__version__ = "1.0.0"

__all__ = [
    "Code",
    "EH8_4",
    "EH16_11",
    "EH32_26",
    "EH64_57",
    "CODES",
    "get_code",
    "bytes_to_bits",
    "bits_to_bytes",
    "encode",
    "encode_codewords",
    "decode",
    "decode_with_report",
    "DecodeReport",
    "count_bit_errors",
    "compute_ber",
    "compute_redundancy_overhead",
    "HammingError",
    "CodeConfigurationError",
    "EncodingError",
    "DecodingError",
    "CodewordAlignmentError",
    "UncorrectableCodewordError",
    "TextDecodingError",
]
