# file: src/module3_pipeline/simulator.py

"""
Channel Simulator

Main orchestrator for the encode → corrupt → decode round trip.

Pipeline:
    Message text
    → UTF-8 bytes
    → Hamming encode (Module 1)
    → XOR with the retained error mask (Module 2)
    → Hamming decode (Module 1)
    → UTF-8 text, or "cannot decode"

Recompute happens only when triggered: the message changed, or an explicit
randomize action replaced the error mask. The mask is never regenerated by a
recompute; on a length change it is resized (or cleared, per
pipeline.mask_policy).
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import numpy as np

from module1_hamming_codec import (
    Code,
    DecodeReport,
    TextDecodingError,
    UncorrectableCodewordError,
    decode_with_report,
    encode,
    get_code,
)
from module2_error_injection import (
    apply_mask,
    count_errors,
    generate_mask,
    parse_probability,
    resize_mask,
    validate_probability,
)

from .config import load_config, validate_config

logger = logging.getLogger(__name__)

FAILURE_UNCORRECTABLE = "uncorrectable"
FAILURE_INVALID_TEXT = "invalid_text"


@dataclass(frozen=True)
class PipelineResult:
    """
    Artifacts of one pipeline run, as handed to the display layer.

    Attributes:
        message: Input message bytes
        encoded: Encoded codeword stream
        mask: Error mask (same length as encoded)
        corrupted: encoded XOR mask
        decoded_text: Recovered text, or None if the message cannot be decoded
        failure_reason: None, FAILURE_UNCORRECTABLE or FAILURE_INVALID_TEXT
        report: Per-codeword decode statistics
    """

    message: bytes
    encoded: bytes
    mask: bytes
    corrupted: bytes
    decoded_text: Optional[str]
    failure_reason: Optional[str] = None
    report: Optional[DecodeReport] = None

    @property
    def decoded(self) -> bool:
        return self.decoded_text is not None

    @property
    def injected_errors(self) -> int:
        return count_errors(self.mask)


class ChannelSimulator:
    """
    Single-session Hamming channel simulator.

    Holds one message and one error mask. The mask is owned exclusively by
    the simulator; a lock serialises recompute and randomize so a background
    recompute cannot observe a half-replaced mask.
    """

    def __init__(
        self,
        code: Optional[Code] = None,
        config: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize the simulator.

        Args:
            code: Code descriptor. If None, taken from config['hamming']['code'].
            config: Configuration dictionary (from load_config). If None,
                    the packaged defaults are used.
        """
        self.config = validate_config(config) if config is not None else load_config()

        self.code = code if code is not None else get_code(self.config['hamming']['code'])
        self.mask_policy = self.config['pipeline']['mask_policy']
        self.text_encoding = self.config['pipeline']['text_encoding']
        self._rng = np.random.default_rng(self.config['channel']['seed'])

        self._lock = threading.Lock()
        self._message = b''
        self._mask = b''
        self._result = self._run()

    @property
    def message(self) -> bytes:
        return self._message

    @property
    def mask(self) -> bytes:
        return self._mask

    @property
    def result(self) -> PipelineResult:
        return self._result

    def set_message(self, message: Union[str, bytes]) -> PipelineResult:
        """Replace the input message and recompute."""
        if isinstance(message, str):
            message = message.encode(self.text_encoding)

        with self._lock:
            self._message = bytes(message)
            self._result = self._run()
            return self._result

    def randomize(
        self,
        probability: Union[None, str, float] = None,
        rng: Union[None, int, np.random.Generator] = None,
    ) -> PipelineResult:
        """
        Replace the error mask with a fresh random one and recompute.

        Args:
            probability: Per-bit flip probability, as a number or as the
                         raw user-entered string. If None, uses
                         config['channel']['error_probability'].
            rng: Seed or Generator for this draw. If None, the simulator's
                 own generator (seeded from config['channel']['seed']) is used.

        Raises:
            InvalidProbabilityError: If probability is not in [0, 1]; the
                                     mask is left unchanged
        """
        if probability is None:
            probability = self.config['channel']['error_probability']
        if isinstance(probability, str):
            probability = parse_probability(probability)
        else:
            probability = validate_probability(probability)

        with self._lock:
            length_bits = len(self._result.encoded) * 8
            self._mask = generate_mask(
                length_bits, probability, rng if rng is not None else self._rng
            )
            logger.info(
                "Randomized error mask: p=%s, %d of %d bits flipped",
                probability, count_errors(self._mask), length_bits,
            )
            self._result = self._run()
            return self._result

    def set_mask(self, mask: bytes) -> PipelineResult:
        """
        Replace the error mask with a caller-supplied one and recompute.

        A mask of the wrong length is resized like any other length change.
        """
        with self._lock:
            self._mask = bytes(mask)
            self._result = self._run()
            return self._result

    def clear_errors(self) -> PipelineResult:
        """Reset the error mask to all zeros and recompute."""
        with self._lock:
            self._mask = b'\x00' * len(self._mask)
            self._result = self._run()
            return self._result

    def recompute(self) -> PipelineResult:
        """Run the pipeline on the current message and mask."""
        with self._lock:
            self._result = self._run()
            return self._result

    def _run(self) -> PipelineResult:
        encoded = encode(self._message, self.code)

        if len(self._mask) != len(encoded):
            if self.mask_policy == 'clear':
                self._mask = b'\x00' * len(encoded)
            else:
                self._mask = resize_mask(self._mask, len(encoded))

        corrupted = apply_mask(encoded, self._mask)

        report = decode_with_report(corrupted, self.code, length=len(self._message))
        decoded_text = None
        failure_reason = None

        try:
            decoded_text = self._to_text(report)
        except UncorrectableCodewordError as e:
            failure_reason = FAILURE_UNCORRECTABLE
            logger.info("Cannot decode message: %s", e)
        except TextDecodingError as e:
            failure_reason = FAILURE_INVALID_TEXT
            logger.info("Cannot decode message: %s", e)

        return PipelineResult(
            message=self._message,
            encoded=encoded,
            mask=self._mask,
            corrupted=corrupted,
            decoded_text=decoded_text,
            failure_reason=failure_reason,
            report=report,
        )

    def _to_text(self, report: DecodeReport) -> str:
        if not report.ok:
            raise UncorrectableCodewordError(
                f"{len(report.uncorrectable)} of {report.codewords} codewords "
                f"uncorrectable (first: {report.uncorrectable[0]})",
                codeword_index=report.uncorrectable[0],
                num_uncorrectable=len(report.uncorrectable),
            )

        try:
            return report.data.decode(self.text_encoding)
        except UnicodeDecodeError as e:
            raise TextDecodingError(
                f"Recovered bytes are not valid {self.text_encoding}: {e}"
            ) from e
