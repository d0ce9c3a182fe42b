# file: tests/test_module1_hamming_codec.py

"""
Unit tests for Module 1: Extended Hamming Codec.

Test coverage:
    - Code descriptor validation and lookup
    - Encode/decode round trip (including empty input)
    - Single-bit correction over every position
    - Double-bit detection over every position pair
    - Length handling and usage errors
    - Metrics computation
"""

from itertools import combinations

import numpy as np
import pytest

from module1_hamming_codec import (
    Code,
    EH8_4,
    EH16_11,
    EH32_26,
    EH64_57,
    CODES,
    get_code,
    bytes_to_bits,
    bits_to_bytes,
    encode,
    encode_codewords,
    decode,
    decode_with_report,
    count_bit_errors,
    compute_ber,
    compute_redundancy_overhead,
    CodeConfigurationError,
    EncodingError,
    DecodingError,
    CodewordAlignmentError,
    UncorrectableCodewordError,
)


def flip(data: bytes, *positions: int) -> bytes:
    """Flip stream bits (LSB-first) at the given positions."""
    value = int.from_bytes(data, 'little')
    for pos in positions:
        value ^= 1 << pos
    return value.to_bytes(len(data), 'little')


class TestCode:
    """Test Code descriptor."""

    def test_eh16_11_layout(self):
        """Test the default code parameters."""
        assert EH16_11.data_bits == 11
        assert EH16_11.total_bits == 16
        assert EH16_11.parity_bits == 4
        assert EH16_11.codeword_bytes == 2
        assert EH16_11.parity_positions == (1, 2, 4, 8)
        assert EH16_11.data_positions == (3, 5, 6, 7, 9, 10, 11, 12, 13, 14, 15)

    def test_family_sizes(self):
        """Test that every predefined code places data_bits data positions."""
        for code in (EH8_4, EH16_11, EH32_26, EH64_57):
            assert len(code.data_positions) == code.data_bits
            assert code.total_bits == code.data_bits + code.parity_bits + 1

    def test_code_is_immutable(self):
        """Test that a Code cannot be mutated."""
        with pytest.raises(AttributeError):
            EH16_11.data_bits = 12

    def test_inconsistent_params(self):
        """Test that total_bits must match the minimal parity count."""
        with pytest.raises(CodeConfigurationError, match="Inconsistent"):
            Code(data_bits=11, total_bits=17)

    def test_non_power_of_two_length(self):
        """Test that a shortened layout is rejected."""
        with pytest.raises(CodeConfigurationError, match="power of two"):
            Code(data_bits=5, total_bits=10)

    def test_zero_data_bits(self):
        with pytest.raises(CodeConfigurationError, match="must be >= 1"):
            Code(data_bits=0, total_bits=2)

    def test_get_code(self):
        """Test lookup by name."""
        assert get_code('eh16_11') is EH16_11
        assert get_code('EH8_4') is EH8_4
        assert set(CODES) == {'eh8_4', 'eh16_11', 'eh32_26', 'eh64_57'}

    def test_get_code_unknown(self):
        with pytest.raises(CodeConfigurationError, match="Unknown code"):
            get_code('golay24_12')

    def test_code_rate(self):
        assert abs(EH16_11.get_code_rate() - 11 / 16) < 1e-9


class TestBits:
    """Test LSB-first bit packing."""

    def test_bytes_to_bits_lsb_first(self):
        bits = bytes_to_bits(b'\x41')
        assert list(bits) == [1, 0, 0, 0, 0, 0, 1, 0]

    def test_bits_to_bytes_drops_partial_byte(self):
        bits = np.array([1, 0, 0, 0, 0, 0, 1, 0, 1, 1, 1], dtype=np.uint8)
        assert bits_to_bytes(bits) == b'\x41'

    def test_empty(self):
        assert len(bytes_to_bits(b'')) == 0
        assert bits_to_bytes(np.zeros(0, dtype=np.uint8)) == b''


class TestEncode:
    """Test extended Hamming encoding."""

    def test_known_codeword(self):
        """Test 'A' against a hand-computed codeword.

        0x41 gives data bits at positions 3 and 11; syndrome 3 ^ 11 = 8 sets
        parity bit 8; three set bits make overall parity 1. Set positions
        {0, 3, 8, 11} pack LSB-first to 0x09 0x09.
        """
        assert encode(b"A") == b'\x09\x09'

    def test_empty_message(self):
        """Test that empty input encodes to zero codewords."""
        assert encode(b"") == b''
        assert encode_codewords(b"").shape == (0, 16)

    def test_codeword_count(self):
        """Test padding of the last data group."""
        # 3 bytes = 24 bits -> 3 codewords of 11 data bits
        assert len(encode(b"abc")) == 3 * 2
        # 11 bytes = 88 bits -> exactly 8 codewords
        assert len(encode(b"x" * 11)) == 8 * 2

    def test_parity_checks_even(self):
        """Test that every check and the overall parity are even."""
        codewords = encode_codewords(b"Hello, World!")
        positions = np.arange(16)

        for k in range(4):
            covered = codewords[:, (positions >> k) & 1 == 1]
            assert np.all(covered.sum(axis=1) % 2 == 0)

        assert np.all(codewords.sum(axis=1) % 2 == 0)

    def test_encode_is_pure(self):
        message = b"repeatable"
        assert encode(message) == encode(message)

    def test_encode_accepts_bytearray(self):
        assert encode(bytearray(b"A")) == encode(b"A")

    def test_encode_invalid_input_type(self):
        """Test that non-bytes input raises error."""
        with pytest.raises(EncodingError, match="must be bytes"):
            encode("not bytes")


class TestDecode:
    """Test SECDED decoding."""

    @pytest.mark.parametrize("message", [
        b"",
        b"A",
        b"abc",
        b"Hello, World!",
        "héllo wörld ✓".encode("utf-8"),
        bytes(range(256)),
        b"\x00" * 7,
    ])
    def test_roundtrip(self, message):
        """Test decode(encode(m)) == m with a zero error mask."""
        assert decode(encode(message), length=len(message)) == message

    @pytest.mark.parametrize("code", [EH8_4, EH16_11, EH32_26, EH64_57])
    def test_roundtrip_all_codes(self, code):
        rng = np.random.default_rng(7)
        message = rng.integers(0, 256, size=97, dtype=np.uint8).tobytes()
        assert decode(encode(message, code), code, length=len(message)) == message

    def test_inferred_length_drops_partial_byte(self):
        """Test the length rule when the caller does not pass one."""
        # 1 codeword = 11 payload bits -> 1 byte
        assert decode(encode(b"A")) == b"A"
        # 3 codewords = 33 payload bits -> 4 bytes, last one is padding
        decoded = decode(encode(b"abc"))
        assert len(decoded) == 4
        assert decoded == b"abc\x00"

    def test_empty_stream(self):
        """Test that zero codewords decode to empty bytes, not an error."""
        assert decode(b"") == b""

    def test_single_bit_correction_every_position(self):
        """Test that each of the 16 single flips in 'A' is corrected."""
        encoded = encode(b"A")
        for pos in range(16):
            assert decode(flip(encoded, pos), length=1) == b"A"

    def test_single_bit_correction_every_stream_bit(self):
        """Test single flips anywhere in a multi-codeword stream."""
        message = b"Hello, World!"
        encoded = encode(message)
        for pos in range(len(encoded) * 8):
            assert decode(flip(encoded, pos), length=len(message)) == message

    def test_one_error_per_codeword_corrected(self):
        """Test that codewords are corrected independently."""
        message = b"independent"
        encoded = encode(message)
        positions = [16 * i + (i % 16) for i in range(len(encoded) // 2)]
        assert decode(flip(encoded, *positions), length=len(message)) == message

    def test_double_bit_detection_all_pairs(self):
        """Test that all 120 position pairs in one codeword are detected."""
        encoded = encode(b"A")
        pairs = list(combinations(range(16), 2))
        assert len(pairs) == 120

        for p, q in pairs:
            with pytest.raises(UncorrectableCodewordError):
                decode(flip(encoded, p, q), length=1)

    def test_double_error_fails_whole_message(self):
        """Test that one bad codeword aborts the decode with its index."""
        message = b"Hello, World!"
        encoded = encode(message)

        with pytest.raises(UncorrectableCodewordError) as excinfo:
            decode(flip(encoded, 16 + 3, 16 + 9), length=len(message))

        assert excinfo.value.codeword_index == 1
        assert excinfo.value.num_uncorrectable == 1

    def test_overall_parity_error_only(self):
        """Test an error confined to the overall parity bit."""
        report = decode_with_report(flip(encode(b"A"), 0), length=1)
        assert report.ok
        assert report.data == b"A"
        assert report.parity_only == 1
        assert report.corrected == 0

    def test_report_counts(self):
        """Test per-codeword statistics."""
        message = b"report me"
        encoded = encode(message)
        corrupted = flip(encoded, 5, 16 + 0, 32 + 1, 32 + 2)

        report = decode_with_report(corrupted, length=len(message))

        assert report.codewords == len(encoded) // 2
        assert report.corrected == 1
        assert report.parity_only == 1
        assert report.uncorrectable == [2]
        assert report.data is None
        assert not report.ok

    def test_decode_misaligned(self):
        """Test that a partial codeword is a usage error."""
        with pytest.raises(CodewordAlignmentError, match="not a multiple"):
            decode(b"\x00\x00\x00")

    def test_misaligned_is_value_error(self):
        with pytest.raises(ValueError):
            decode(b"\x00")

    def test_decode_invalid_input_type(self):
        """Test that non-bytes input raises error."""
        with pytest.raises(DecodingError, match="must be bytes"):
            decode("not bytes")

    def test_length_exceeds_capacity(self):
        with pytest.raises(DecodingError, match="capacity"):
            decode(encode(b"A"), length=2)


class TestMetrics:
    """Test metrics computation functions."""

    def test_compute_ber_no_errors(self):
        data = b"No errors here"
        assert compute_ber(data, data) == 0.0

    def test_compute_ber_single_bit(self):
        assert compute_ber(b'\x00', b'\x01') == 1.0 / 8

    def test_compute_ber_all_bits(self):
        assert compute_ber(b'\x00\x00', b'\xff\xff') == 1.0

    def test_compute_ber_empty(self):
        assert compute_ber(b'', b'') == 0.0

    def test_compute_ber_length_mismatch(self):
        """Test that length mismatch raises error."""
        with pytest.raises(ValueError, match="Length mismatch"):
            compute_ber(b"short", b"longer data")

    def test_count_bit_errors(self):
        assert count_bit_errors(b'\x0f\x00', b'\x00\x01') == 5

    def test_compute_redundancy_overhead(self):
        """Test overhead of EH(16,11) over 11 message bytes."""
        overhead = compute_redundancy_overhead(11, len(encode(b"x" * 11)))
        assert abs(overhead - 45.45) < 0.01

    def test_compute_redundancy_overhead_invalid(self):
        with pytest.raises(ValueError, match="must be > 0"):
            compute_redundancy_overhead(0, 10)
