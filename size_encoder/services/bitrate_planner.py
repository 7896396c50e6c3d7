"""
Turns a desired output size and a media duration into a video bitrate.

The estimate targets the video stream only: audio, container overhead and the
encoder's rate-control variance are not accounted for, so the output usually
ends up somewhat above the requested size. Callers that want a tighter result
can reserve part of the budget for audio with `audio_reserve_kbps`.
"""

import math

from loguru import logger

from ..config.common import BITS_PER_BYTE, KB_PER_MB
from ..domain.exceptions import InvalidDurationException, InvalidSizeException


def plan_bitrate_kbps(desired_size_mb: float, duration_seconds: float, audio_reserve_kbps: int = 0) -> int:
    """
    Computes the video bitrate needed to fit `desired_size_mb` into `duration_seconds`.

    bitrate = floor(desired_size_mb * 1024 * 8 / duration_seconds) - audio_reserve_kbps

    Args:
        desired_size_mb: Target size in megabytes, strictly positive.
        duration_seconds: Media duration in seconds, strictly positive.
        audio_reserve_kbps: Bitrate set aside for the audio stream. 0 keeps the
                            whole budget for video.

    Returns:
        The target video bitrate in kbit/s, always >= 1.

    Raises:
        InvalidSizeException: If the size is not positive and finite, or leaves
                              no video bitrate once the audio reserve is removed.
        InvalidDurationException: If the duration is not positive and finite.
    """
    if not math.isfinite(desired_size_mb) or desired_size_mb <= 0:
        raise InvalidSizeException(f"Desired size must be positive, got {desired_size_mb!r} MB.")
    if not math.isfinite(duration_seconds) or duration_seconds <= 0:
        raise InvalidDurationException(f"Duration must be positive, got {duration_seconds!r} s.")
    if audio_reserve_kbps < 0:
        raise ValueError(f"audio_reserve_kbps cannot be negative, got {audio_reserve_kbps}.")

    total_kbps = math.floor(desired_size_mb * KB_PER_MB * BITS_PER_BYTE / duration_seconds)
    bitrate = total_kbps - audio_reserve_kbps
    if bitrate <= 0:
        raise InvalidSizeException(
            f"{desired_size_mb} MB over {duration_seconds:.1f}s leaves no video bitrate "
            f"({total_kbps} kbit/s total, {audio_reserve_kbps} kbit/s reserved for audio)."
        )

    logger.debug(
        f"Planned {bitrate} kbit/s for {desired_size_mb} MB over {duration_seconds:.3f}s "
        f"(audio reserve {audio_reserve_kbps} kbit/s)"
    )
    return bitrate
