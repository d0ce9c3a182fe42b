# file: src/module3_pipeline/__init__.py

"""
Module 3: Channel Simulation Pipeline

Ties the codec (Module 1) and the error injector (Module 2) into one
session: message → encode → XOR error mask → decode → text or failure.

Public API:
    - ChannelSimulator(code=None, config=None)
    - PipelineResult
    - load_config(path=None) -> dict
    - render_bits(data: bytes) -> str
    - render_result(result) -> str
"""

from .config import ConfigError, load_config, validate_config
from .simulator import (
    ChannelSimulator,
    PipelineResult,
    FAILURE_UNCORRECTABLE,
    FAILURE_INVALID_TEXT,
)
from .rendering import render_bits, render_result, UNABLE_TO_DECODE

__version__ = "1.0.0"

__all__ = [
    "ChannelSimulator",
    "PipelineResult",
    "FAILURE_UNCORRECTABLE",
    "FAILURE_INVALID_TEXT",
    "ConfigError",
    "load_config",
    "validate_config",
    "render_bits",
    "render_result",
    "UNABLE_TO_DECODE",
]
