"""
Command-Line Interface (CLI) setup for the Size Encoder.

The tool is interactive, so the arguments only adjust where files are read and
written, how the bitrate budget is split, and how much is logged.
"""
import argparse
from typing import List, Optional

from .config.common import DEFAULT_INPUT_DIR, DEFAULT_LOG_LEVEL, DEFAULT_OUTPUT_DIR


def get_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parses command-line arguments for the Size Encoder.

    Args:
        argv: Argument list to parse. Defaults to `sys.argv[1:]`.

    Returns:
        argparse.Namespace: The parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description="Interactively re-encode a video from the input folder to a target size."
    )
    parser.add_argument(
        "--input-dir", type=str, default=DEFAULT_INPUT_DIR,
        help=f"Folder listing the files to choose from (default: {DEFAULT_INPUT_DIR})."
    )
    parser.add_argument(
        "--output-dir", type=str, default=DEFAULT_OUTPUT_DIR,
        help=f"Existing folder receiving the encoded files (default: {DEFAULT_OUTPUT_DIR})."
    )
    parser.add_argument(
        "--audio-reserve-kbps", type=int, default=0,
        help="Bitrate subtracted from the budget for the audio stream. 0 gives the whole budget to video."
    )
    parser.add_argument(
        "--log-level", type=str, default=DEFAULT_LOG_LEVEL, choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set the logging level."
    )
    parser.add_argument(
        "--debug", dest="debug_mode", action="store_true", help="Shortcut for --log-level DEBUG."
    )

    args = parser.parse_args(argv)

    if args.audio_reserve_kbps < 0:
        parser.error(f"--audio-reserve-kbps cannot be negative, got {args.audio_reserve_kbps}.")

    return args
