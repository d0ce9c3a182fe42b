# file: src/module3_pipeline/cli.py

"""
Command-line front end for the channel simulator.

Runs one encode → corrupt → decode pass and prints the display panels.
"""

import argparse
import logging
import sys
from typing import List, Optional

from module1_hamming_codec import CODES, HammingError, compute_ber, get_code
from module2_error_injection import InvalidProbabilityError

from .config import ConfigError, load_config, validate_seed
from .rendering import render_result
from .simulator import ChannelSimulator

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, level: str = "WARNING"):
    """Configure logging for the command-line run."""
    resolved = logging.DEBUG if verbose else getattr(logging, str(level).upper(), logging.WARNING)
    logging.basicConfig(
        level=resolved,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hamming-sim',
        description='Encode text with an extended Hamming code, inject random bit errors and decode it again',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Clean round trip
  hamming-sim "Hello"

  # 2% bit-error channel, reproducible
  hamming-sim "Hello" -p 0.02 --seed 7

  # Read the message from stdin
  echo "Hello" | hamming-sim -p 0.05
        """
    )

    parser.add_argument(
        'text',
        nargs='?',
        default=None,
        help='Message to transmit (default: read from stdin)'
    )

    parser.add_argument(
        '-p', '--probability',
        type=str,
        default=None,
        help='Per-bit error probability in [0, 1]; triggers one randomize action'
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Random seed for the error mask'
    )

    parser.add_argument(
        '--code',
        choices=sorted(CODES),
        default=None,
        help='Hamming code variant (default: from config, eh16_11)'
    )

    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to YAML configuration file'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point.

    Returns:
        0 if the message was decoded, 1 if it could not be decoded,
        2 on invalid input or configuration
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        parser.error(str(e))

    setup_logging(args.verbose or config['system']['verbose'], config['system']['log_level'])

    if args.seed is not None:
        try:
            config['channel']['seed'] = validate_seed(args.seed)
        except ConfigError as e:
            parser.error(str(e))

    text = args.text if args.text is not None else sys.stdin.read().rstrip("\n")

    try:
        code = get_code(args.code) if args.code else None
        simulator = ChannelSimulator(code=code, config=config)
        simulator.set_message(text)

        if args.probability is not None:
            result = simulator.randomize(args.probability)
        else:
            result = simulator.result
    except InvalidProbabilityError as e:
        parser.error(str(e))
    except HammingError as e:
        logger.error("Simulation failed: %s", e)
        return 2

    print(render_result(result, message_text=text))

    ber = compute_ber(result.encoded, result.corrupted)
    print(
        f"{simulator.code}: {len(result.encoded) // simulator.code.codeword_bytes} codewords, "
        f"{result.injected_errors} bits flipped (BER {ber:.4f}), "
        f"{result.report.corrected} corrected, "
        f"{len(result.report.uncorrectable)} uncorrectable"
    )

    return 0 if result.decoded else 1


if __name__ == '__main__':
    sys.exit(main())
