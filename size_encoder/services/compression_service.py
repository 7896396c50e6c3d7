"""
This module runs a single size-targeted compression job.

`compress` is the only entry point used by the session. It probes the input for
its duration, plans the video bitrate that fits the requested size, and drives
one FFmpeg process built with ffmpeg-python:

    ffmpeg -i <input> -b:v <bitrate>k -movflags faststart -preset <preset>
           <output> -hide_banner -nostdin -y

Every expected failure (probe, planning, missing output folder, FFmpeg error)
is returned as a failed `CompressionResult` instead of being raised, so the
caller only has to display the result and start over.
"""

import os
import shlex
from datetime import datetime
from typing import Optional

import ffmpeg
from loguru import logger
from rich.console import Console

from ..config.common import PROGRESS_INTERVAL_SECONDS, PROGRESS_LABEL, PROGRESS_SPINNER
from ..config.video import MOVFLAGS
from ..domain.exceptions import (
    EncodingException,
    InvalidDurationException,
    InvalidSizeException,
    MediaFileException,
)
from ..domain.media import probe_duration
from ..domain.models import CompressionRequest, CompressionResult
from ..utils.ffmpeg_utils import get_ffmpeg_cmd, stderr_tail
from ..utils.format_utils import format_timedelta, formatted_size
from .bitrate_planner import plan_bitrate_kbps


def build_encode_stream(input_path: str, output_path: str, bitrate_kbps: int, preset: str):
    """
    Builds the ffmpeg-python stream for one job.

    Args:
        input_path: Source file.
        output_path: Destination file. An existing file is overwritten.
        bitrate_kbps: Target video bitrate in kbit/s.
        preset: Encoder preset token, already validated.

    Returns:
        An ffmpeg-python output stream, ready for `run_async`.
    """
    return (
        ffmpeg.input(input_path)
        .output(
            output_path,
            video_bitrate=f"{bitrate_kbps}k",
            preset=preset,
            movflags=MOVFLAGS,
        )
        .global_args("-hide_banner", "-nostdin")
        .overwrite_output()
    )


def run_encode_job(stream) -> None:
    """
    Runs an FFmpeg job and waits for it to finish.

    FFmpeg's stderr is captured so it does not scribble over the status
    spinner, and is used to describe the failure if the job exits non-zero.

    Raises:
        EncodingException: If FFmpeg cannot be started or reports an error.
    """
    ffmpeg_cmd = get_ffmpeg_cmd()
    logger.debug(f"FFmpeg command: {shlex.join(stream.compile(cmd=ffmpeg_cmd))}")
    try:
        process = stream.run_async(cmd=ffmpeg_cmd, pipe_stderr=True)
    except OSError as e:
        raise EncodingException(f"Could not start FFmpeg ({ffmpeg_cmd}): {e}") from e

    _, stderr = process.communicate()
    if process.returncode != 0:
        details = stderr_tail(stderr) or f"FFmpeg exited with code {process.returncode}"
        logger.error(f"FFmpeg exited with code {process.returncode}:\n{details}")
        raise EncodingException(details)


def compress(
    request: CompressionRequest,
    console: Optional[Console] = None,
    audio_reserve_kbps: int = 0,
) -> CompressionResult:
    """
    Re-encodes `request.input_path` so that it lands near `request.desired_size_mb`.

    Steps:
    1. Probe the input duration. Failure ends the job before anything else runs.
    2. Plan the video bitrate from size and duration.
    3. Check that the output folder exists.
    4. Run FFmpeg under a `rich` status spinner, which is removed on every exit path.

    Args:
        request: The validated job description.
        console: Where the computed bitrate and the spinner are shown.
                 Defaults to a new `rich` console on stdout.
        audio_reserve_kbps: Part of the bitrate budget set aside for audio.

    Returns:
        A succeeded result naming the output file, or a failed result carrying
        the error text. The input file is never modified.
    """
    console = console or Console()
    logger.info(
        f"Compressing {request.input_path} -> {request.output_path} "
        f"({request.desired_size_mb} MB, preset {request.preset})"
    )

    try:
        duration = probe_duration(request.input_path)
        bitrate = plan_bitrate_kbps(request.desired_size_mb, duration, audio_reserve_kbps)
    except (MediaFileException, InvalidDurationException, InvalidSizeException) as e:
        logger.error(f"Cannot compress {request.input_path}: {e}")
        return CompressionResult.failed(str(e), f"Error: {e}")

    console.print(f"[black on green]   Computed bitrate: {bitrate} kbit/s [/]")

    output_dir = os.path.dirname(request.output_path) or "."
    if not os.path.isdir(output_dir):
        error = f"Output folder '{output_dir}' does not exist. Create it and try again."
        logger.error(error)
        return CompressionResult.failed(error, f"Error while compressing video: {error}", bitrate)

    stream = build_encode_stream(request.input_path, request.output_path, bitrate, request.preset)
    start = datetime.now()
    try:
        with console.status(
            PROGRESS_LABEL, spinner=PROGRESS_SPINNER, refresh_per_second=1 / PROGRESS_INTERVAL_SECONDS
        ):
            run_encode_job(stream)
    except EncodingException as e:
        return CompressionResult.failed(str(e), f"Error while compressing video: {e}", bitrate)

    elapsed = format_timedelta(datetime.now() - start)
    details = f"in {elapsed}"
    if os.path.isfile(request.output_path):
        details = f"{formatted_size(os.path.getsize(request.output_path))} {details}"
    logger.success(f"Compressed {request.input_path} -> {request.output_path} ({details})")
    return CompressionResult.succeeded(
        request.output_path,
        f"Video compressed successfully: {request.output_path} ({details})",
        bitrate,
    )
