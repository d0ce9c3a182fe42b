# file: src/module1_hamming_codec/errors.py

"""
Hamming codec exception hierarchy.

All exceptions inherit from HammingError for unified handling.
"""

from typing import Optional


class HammingError(Exception):
    """Base exception for all Hamming codec errors."""
    pass


class CodeConfigurationError(HammingError):
    """Raised when a Code descriptor is invalid or unknown."""
    pass


class EncodingError(HammingError):
    """Raised when encoding input is invalid."""
    pass


class DecodingError(HammingError):
    """Raised when decoding fails."""
    pass


class CodewordAlignmentError(DecodingError, ValueError):
    """Raised when a stream is not a whole number of codewords."""
    pass


class UncorrectableCodewordError(DecodingError):
    """Raised when a codeword carries a detected double-bit error."""

    def __init__(
        self,
        message: str,
        codeword_index: Optional[int] = None,
        num_uncorrectable: Optional[int] = None,
    ):
        super().__init__(message)
        self.codeword_index = codeword_index
        self.num_uncorrectable = num_uncorrectable


class TextDecodingError(DecodingError):
    """Raised when recovered bytes are not valid text."""
    pass
