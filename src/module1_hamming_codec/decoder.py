# file: src/module1_hamming_codec/decoder.py

"""
Extended Hamming decoding.

Provides decode() with single-error correction and double-error detection
(SECDED). Per codeword:

    syndrome | overall parity | outcome
    ---------+----------------+------------------------------------------
       0     |    matches     | no error
       0     |   mismatches   | error in the overall parity bit only
     != 0    |   mismatches   | single error at syndrome position, flipped
     != 0    |    matches     | double error, uncorrectable

A single uncorrectable codeword fails the whole decode; no partial result
is returned.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from .bits import bits_to_bytes, bytes_to_bits
from .code import Code, EH16_11, position_weights
from .errors import CodewordAlignmentError, DecodingError, UncorrectableCodewordError

logger = logging.getLogger(__name__)


@dataclass
class DecodeReport:
    """
    Outcome of decoding a codeword stream.

    Attributes:
        data: Recovered bytes, or None if any codeword was uncorrectable
        codewords: Number of codewords processed
        corrected: Codewords with a corrected single-bit error
        parity_only: Codewords whose only error was the overall parity bit
        uncorrectable: Indices of codewords with a detected double error
    """

    data: Optional[bytes]
    codewords: int
    corrected: int = 0
    parity_only: int = 0
    uncorrectable: List[int] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.uncorrectable


def _as_codeword_matrix(data: bytes, code: Code) -> np.ndarray:
    if not isinstance(data, (bytes, bytearray)):
        raise DecodingError(f"Input must be bytes, got {type(data)}")

    if len(data) % code.codeword_bytes != 0:
        raise CodewordAlignmentError(
            f"Data length {len(data)} is not a multiple of codeword length "
            f"{code.codeword_bytes} bytes ({code})"
        )

    bits = bytes_to_bits(bytes(data))
    return bits.reshape(-1, code.total_bits).copy()


def decode_with_report(
    data: bytes,
    code: Code = EH16_11,
    length: Optional[int] = None,
) -> DecodeReport:
    """
    Decode a codeword stream and report per-codeword outcomes.

    Unlike decode(), a detected double error does not raise; the report
    carries data=None and the failing codeword indices instead.

    Args:
        data: Concatenated codewords as produced by encode()
        code: Code descriptor (default: EH16_11)
        length: True message length in bytes. If None, the length is
                floor(num_codewords * data_bits / 8) and trailing
                partial-byte bits are dropped.

    Returns:
        DecodeReport

    Raises:
        DecodingError: If data is not bytes or length exceeds the payload
        CodewordAlignmentError: If data is not a whole number of codewords
    """
    codewords = _as_codeword_matrix(data, code)
    num_codewords = codewords.shape[0]

    capacity = (num_codewords * code.data_bits) // 8
    if length is not None and not 0 <= length <= capacity:
        raise DecodingError(
            f"Requested length {length} outside payload capacity {capacity} "
            f"of {num_codewords} codewords"
        )

    if num_codewords == 0:
        return DecodeReport(data=b'', codewords=0)

    checks = (codewords.astype(np.int64) @ position_weights(code)) % 2
    syndrome = checks @ (1 << np.arange(code.parity_bits))
    overall = codewords.sum(axis=1) % 2

    single = (syndrome != 0) & (overall == 1)
    double = (syndrome != 0) & (overall == 0)
    parity_only = (syndrome == 0) & (overall == 1)

    rows = np.nonzero(single)[0]
    codewords[rows, syndrome[rows]] ^= 1

    report = DecodeReport(
        data=None,
        codewords=num_codewords,
        corrected=int(single.sum()),
        parity_only=int(parity_only.sum()),
        uncorrectable=[int(i) for i in np.nonzero(double)[0]],
    )

    if report.corrected or report.parity_only:
        logger.debug(
            "Corrected %d single-bit and %d parity-bit errors in %d codewords",
            report.corrected, report.parity_only, num_codewords,
        )

    if not report.ok:
        return report

    payload = codewords[:, list(code.data_positions)].reshape(-1)
    decoded = bits_to_bytes(payload)
    if length is not None:
        decoded = decoded[:length]

    report.data = decoded
    return report


def decode(
    data: bytes,
    code: Code = EH16_11,
    length: Optional[int] = None,
) -> bytes:
    """
    Decode extended-Hamming-protected data with error correction.

    Args:
        data: Concatenated codewords as produced by encode()
        code: Code descriptor (default: EH16_11)
        length: True message length in bytes (optional, see decode_with_report)

    Returns:
        Recovered message bytes

    Raises:
        DecodingError: If data is not bytes or length exceeds the payload
        CodewordAlignmentError: If data is not a whole number of codewords
        UncorrectableCodewordError: If any codeword has a double-bit error

    Example:
        >>> try:
        ...     message = decode(received)
        ... except UncorrectableCodewordError as e:
        ...     print(f"Codeword {e.codeword_index} could not be corrected")
    """
    report = decode_with_report(data, code, length)

    if not report.ok:
        first = report.uncorrectable[0]
        raise UncorrectableCodewordError(
            f"Double-bit error detected in codeword {first}/{report.codewords} "
            f"({len(report.uncorrectable)} uncorrectable)",
            codeword_index=first,
            num_uncorrectable=len(report.uncorrectable),
        )

    return report.data
