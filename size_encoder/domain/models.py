"""
Data records passed between the catalog, the session loop and the encoder.

All records are immutable and validated when they are created, so a request
that reaches the encoder is known to carry a positive size and a known preset.
"""

import math
from dataclasses import dataclass
from typing import Optional

from ..config.video import PRESETS
from .exceptions import InvalidPresetException, InvalidSizeException


def validate_size_mb(value: float) -> float:
    """
    Checks that a desired size is a strictly positive, finite number.

    Args:
        value: Desired output size in megabytes.

    Returns:
        The value as a float.

    Raises:
        InvalidSizeException: If the value is zero, negative, NaN or infinite.
    """
    size = float(value)
    if not math.isfinite(size) or size <= 0:
        raise InvalidSizeException(f"Desired size must be a positive number of megabytes, got {value!r}.")
    return size


def parse_size_mb(text: str) -> float:
    """Parses user input such as "10", "7.5" or "7,5" into a validated size in MB."""
    cleaned = text.strip().replace(",", ".")
    try:
        size = float(cleaned)
    except ValueError as e:
        raise InvalidSizeException(f"'{text.strip()}' is not a number.") from e
    return validate_size_mb(size)


def validate_preset(token: str) -> str:
    """
    Checks that a preset token is one of the ten recognised presets.

    The token is compared verbatim after stripping surrounding whitespace; it
    is never passed to FFmpeg unless it matches.

    Raises:
        InvalidPresetException: If the token is not a known preset.
    """
    preset = token.strip()
    if preset not in PRESETS:
        raise InvalidPresetException(f"No such preset: '{preset}'.")
    return preset


@dataclass(frozen=True)
class CatalogEntry:
    """One file offered to the user, with its 1-based index for this listing."""

    index: int
    file_name: str
    path: str

    def __post_init__(self):
        if self.index < 1:
            raise ValueError(f"Catalog index must be 1 or greater, got {self.index}.")


@dataclass(frozen=True)
class CompressionRequest:
    """
    A single, fully validated compression job.

    Attributes:
        input_path: File to read. It is never modified.
        output_path: File to write, `<output dir>/<original file name>`.
        desired_size_mb: Target size of the output in megabytes.
        preset: Encoder speed/quality preset, one of `PRESETS`.
    """

    input_path: str
    output_path: str
    desired_size_mb: float
    preset: str

    def __post_init__(self):
        object.__setattr__(self, "desired_size_mb", validate_size_mb(self.desired_size_mb))
        object.__setattr__(self, "preset", validate_preset(self.preset))


@dataclass(frozen=True)
class CompressionResult:
    """
    Outcome of one compression job, consumed by the session for display.

    Use `succeeded()` or `failed()` rather than the constructor.
    """

    success: bool
    message: str
    output_path: Optional[str] = None
    error: Optional[str] = None
    bitrate_kbps: Optional[int] = None

    @classmethod
    def succeeded(cls, output_path: str, message: str, bitrate_kbps: Optional[int] = None) -> "CompressionResult":
        return cls(success=True, message=message, output_path=output_path, bitrate_kbps=bitrate_kbps)

    @classmethod
    def failed(cls, error: str, message: str, bitrate_kbps: Optional[int] = None) -> "CompressionResult":
        return cls(success=False, message=message, error=error, bitrate_kbps=bitrate_kbps)
