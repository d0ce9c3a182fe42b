# file: src/module3_pipeline/rendering.py

"""
Text rendering of pipeline artifacts.

Byte streams are shown one byte per line as 8-digit binary (leading zeros
kept, most significant bit first), the same as printf's %08b.
"""

from typing import Optional

from .simulator import PipelineResult

UNABLE_TO_DECODE = "Unable to decode message."


def render_bits(data: bytes) -> str:
    """
    Render bytes as one %08b line per byte.

    Example:
        >>> render_bits(b"\x05\xff")
        '00000101\n11111111\n'
    """
    return "".join(f"{b:08b}\n" for b in data)


def render_result(result: PipelineResult, message_text: Optional[str] = None) -> str:
    """
    Render the five display panels: original, encoded, error, encoded with
    error, decoded.
    """
    if message_text is None:
        message_text = result.message.decode("utf-8", errors="replace")

    decoded = result.decoded_text if result.decoded else UNABLE_TO_DECODE

    panels = [
        ("Original", message_text + "\n" if message_text else ""),
        ("Encoded", render_bits(result.encoded)),
        ("Error", render_bits(result.mask)),
        ("Encoded with Error", render_bits(result.corrupted)),
        ("Decoded", decoded + "\n" if decoded else ""),
    ]
    return "\n".join(f"== {title} ==\n{body}" for title, body in panels)
