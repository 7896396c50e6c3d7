import math
from pathlib import Path
from pprint import pformat

import ffmpeg
from loguru import logger

from .exceptions import MediaFileException, NoDurationFoundException
from ..utils.ffmpeg_utils import get_ffprobe_cmd


def probe_media(path: str) -> dict:
    """
    Runs ffprobe on a file and returns its metadata as a nested dictionary.

    Raises:
        MediaFileException: If the file does not exist or ffprobe rejects it.
    """
    file_path = Path(path)
    if not file_path.is_file():
        logger.error(f"Probe skipped, file does not exist at {file_path}")
        raise MediaFileException(f"Media file not found: {path}")

    try:
        probe = ffmpeg.probe(str(file_path), cmd=get_ffprobe_cmd())
    except ffmpeg.Error as e:
        stderr = e.stderr.decode("utf-8", errors="replace").strip() if e.stderr else str(e)
        logger.error(f"ffmpeg.probe failed for {file_path}: {stderr}")
        raise MediaFileException(f"Failed to probe media file {path}: {stderr}") from e
    except OSError as e:
        logger.error(f"Could not run ffprobe for {file_path}: {e}")
        raise MediaFileException(f"Failed to probe media file {path}: {e}") from e

    logger.debug(f"Probe data for {file_path.name}:\n{pformat(probe)}")
    return probe


def probe_duration(path: str) -> float:
    """
    Returns the duration of a media file in seconds.

    The duration is read from the container-level `format.duration` field of
    the ffprobe output, which is a plain number of seconds or "N/A". A duration
    that is missing, unparseable or not strictly positive is rejected here, so
    the bitrate planner never divides by it.

    Args:
        path: Path of the media file to inspect.

    Returns:
        The duration in seconds, always > 0.

    Raises:
        MediaFileException: If the file cannot be opened or probed.
        NoDurationFoundException: If no usable duration is present.
    """
    probe = probe_media(path)
    raw_duration = (probe.get("format") or {}).get("duration")
    if raw_duration is None:
        raise NoDurationFoundException(f"No duration found in {path}.")

    try:
        duration = float(raw_duration)
    except (TypeError, ValueError) as e:
        raise NoDurationFoundException(f"Invalid duration '{raw_duration}' in {path}.") from e
    if not math.isfinite(duration) or duration <= 0:
        raise NoDurationFoundException(f"Invalid duration '{raw_duration}' in {path}.")

    logger.debug(f"Duration of {Path(path).name}: {duration:.3f}s")
    return duration
