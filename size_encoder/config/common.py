"""
Common configuration settings used throughout the application.

This module holds the globally shared constants of the Size Encoder: the logger
format, the default input and output folders, the status spinner settings and
the amount of FFmpeg stderr kept for error reports. It also loads the optional
user-specific `config.user.yaml` file, which lets the user point the
application at a specific FFmpeg installation without modifying the source.
"""
from pathlib import Path

import yaml
from loguru import logger

# --- User-Defined Path Configuration ---
# This block loads user-specific paths from a 'config.user.yaml' file located
# at the project root. Example:
#
#   paths:
#     ffmpeg_dir: "C:/tools/ffmpeg/bin"

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
USER_CONFIG_PATH = PROJECT_ROOT / "config.user.yaml"

# The directory containing the FFmpeg and ffprobe executables. If not provided
# or None, the executables are looked up on the system's PATH.
MODULE_PATH: Path | None = None


def load_user_config(config_path: Path = USER_CONFIG_PATH) -> Path | None:
    """
    Reads the `paths.ffmpeg_dir` entry from the user YAML configuration.

    A missing file is normal and only logged at debug level. A file that exists
    but cannot be parsed is reported as a warning and otherwise ignored, so a
    broken config never prevents the tool from starting.

    Args:
        config_path: Location of the YAML file.

    Returns:
        The configured FFmpeg directory, or None when none is configured.
    """
    if not config_path.is_file():
        logger.debug(f"User config '{config_path}' not found. Relying on system PATH for executables.")
        return None
    try:
        with config_path.open("r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not load or parse '{config_path}': {e}")
        return None

    if not isinstance(user_config, dict):
        return None
    paths_config = user_config.get("paths") or {}
    if not isinstance(paths_config, dict):
        logger.warning(f"Ignoring 'paths' in '{config_path}': expected a mapping, got {type(paths_config).__name__}.")
        return None
    ffmpeg_dir_str = paths_config.get("ffmpeg_dir")
    if ffmpeg_dir_str is None:
        return None
    if not isinstance(ffmpeg_dir_str, str) or not ffmpeg_dir_str:
        logger.warning(f"Ignoring 'paths.ffmpeg_dir' in '{config_path}': expected a non-empty string, got {ffmpeg_dir_str!r}.")
        return None
    return Path(ffmpeg_dir_str)


MODULE_PATH = load_user_config()


# --- Logging Configuration ---

# Format string for the Loguru logger.
LOGGER_FORMAT = (
    "<green>{time:MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)
DEFAULT_LOG_LEVEL = "INFO"


# --- Directory Settings ---

# Folder scanned for candidate files. Every regular file in it is offered.
DEFAULT_INPUT_DIR = "./input"

# Folder receiving the encoded files, `<output dir>/<original file name>`.
# It must already exist; the application does not create it.
DEFAULT_OUTPUT_DIR = "./output"


# --- Encoding Job Settings ---

# Status line shown while FFmpeg runs, redrawn every interval.
PROGRESS_LABEL = "Compressing"
PROGRESS_SPINNER = "simpleDots"
PROGRESS_INTERVAL_SECONDS = 0.5

# Number of trailing FFmpeg stderr lines kept in a failure message.
STDERR_TAIL_LINES = 5

# Kilobytes per megabyte and bits per byte, used by the bitrate planner.
KB_PER_MB = 1024
BITS_PER_BYTE = 8
