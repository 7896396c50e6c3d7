"""
Helpers for locating and checking the external FFmpeg tools.

The executables are taken from the `ffmpeg_dir` configured in
`config.user.yaml` when it holds them, and from the system PATH otherwise.
"""

import subprocess
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from ..config import common


def _get_tool_cmd(tool_name: str, module_path: Optional[Path] = None) -> str:
    """
    Determines the command used to launch an FFmpeg tool.

    Args:
        tool_name: "ffmpeg" or "ffprobe".
        module_path: Directory to look in first. Defaults to the configured
                     `MODULE_PATH`.

    Returns:
        The absolute path of the executable in the configured directory, or the
        bare tool name so that the system PATH is used.
    """
    if module_path is None:
        module_path = common.MODULE_PATH
    exe_name = f"{tool_name}.exe" if sys.platform == "win32" else tool_name

    if module_path and module_path.is_dir():
        configured_path = module_path / exe_name
        if configured_path.is_file():
            return str(configured_path)
        logger.warning(f"`ffmpeg_dir` is configured, but '{exe_name}' was not found there. Falling back to system PATH.")
    return tool_name


def get_ffmpeg_cmd(module_path: Optional[Path] = None) -> str:
    return _get_tool_cmd("ffmpeg", module_path)


def get_ffprobe_cmd(module_path: Optional[Path] = None) -> str:
    return _get_tool_cmd("ffprobe", module_path)


def verify_ffmpeg() -> bool:
    """
    Verifies that FFmpeg can be executed.

    Runs `ffmpeg -version` and logs the first line of its output on success.
    Failures are logged with a hint on how to configure the executable path.

    Returns:
        True if FFmpeg ran successfully, False otherwise.
    """
    ffmpeg_cmd = get_ffmpeg_cmd()
    try:
        result = subprocess.run(
            [ffmpeg_cmd, "-version"],
            check=True,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except subprocess.CalledProcessError as e:
        logger.error(f"FFmpeg version command failed (return code {e.returncode}):\n{e.stderr}")
        return False
    except FileNotFoundError:
        logger.error(
            "FFmpeg command not found. Please ensure FFmpeg is installed and accessible.\n"
            "You can either add it to your system's PATH or specify its location in the 'config.user.yaml' file."
        )
        return False

    version_lines = result.stdout.splitlines()
    logger.debug(f"FFmpeg version check successful: {version_lines[0] if version_lines else '(no output)'}")
    return True


def stderr_tail(stderr: Optional[bytes], lines: int = common.STDERR_TAIL_LINES) -> str:
    """Decodes FFmpeg stderr output and keeps only its last few non-empty lines."""
    if not stderr:
        return ""
    text = stderr.decode("utf-8", errors="replace")
    kept = [line.strip() for line in text.splitlines() if line.strip()]
    return "\n".join(kept[-lines:])
