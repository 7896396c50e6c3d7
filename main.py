"""
Main entry point for the Size Encoder application.

Sets up logging, parses the command-line arguments, checks that FFmpeg can be
run, and hands control to the interactive session until the input folder is
empty or the user closes the input.
"""

import sys

from loguru import logger

from size_encoder.cli import get_args
from size_encoder.config.common import LOGGER_FORMAT
from size_encoder.pipeline import InteractiveSession
from size_encoder.utils.ffmpeg_utils import verify_ffmpeg


# Configure the logger for initial setup.
# The level is replaced below once the arguments are known.
logger.remove()
logger.add(sys.stderr, level="INFO", format=LOGGER_FORMAT)


def main() -> int:
    """
    Runs the application and returns the process exit status.

    Recoverable problems (bad input, unreadable media, FFmpeg errors) are handled
    inside the session. Anything that escapes it, such as an unreadable input
    folder, is logged with its traceback and ends the program with status 1.
    """
    args = get_args()

    effective_log_level = "DEBUG" if args.debug_mode else args.log_level
    logger.remove()
    logger.add(sys.stderr, level=effective_log_level, format=LOGGER_FORMAT)
    logger.debug(f"Parsed arguments: {args}")

    if not verify_ffmpeg():
        return 1

    session = InteractiveSession(
        input_dir=args.input_dir,
        output_dir=args.output_dir,
        audio_reserve_kbps=args.audio_reserve_kbps,
    )
    try:
        session.run()
    except KeyboardInterrupt:
        logger.info("Interrupted by user.")
        return 130
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1

    logger.debug(f"Session ended after {session.cycles} cycle(s).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
