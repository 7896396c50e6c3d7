"""
Defines custom exception types for the Size Encoder application.

Every failure the interactive session knows how to recover from has its own
exception type, so the session can print a precise message and restart the
cycle instead of matching on error strings. Anything that is not a
`SizeEncoderException` is treated as a host-level error and ends the program.

All custom exceptions inherit from the base `SizeEncoderException`.
"""


class SizeEncoderException(Exception):
    """Base class for all custom exceptions in the Size Encoder application."""

    pass


# --- User Input Exceptions ---
class InputValidationException(SizeEncoderException):
    """Base class for rejected interactive input."""

    pass


class InvalidSelectionException(InputValidationException):
    """
    Raised when the entered file index does not match any catalog entry.

    This covers non-numeric input as well as numbers outside `1..N`, and the
    case where the file was removed from the input folder after listing.
    """

    pass


class InvalidSizeException(InputValidationException):
    """
    Raised when the desired size is not a strictly positive, finite number.

    Also raised by the bitrate planner when the size leaves no positive video
    bitrate after the audio reserve is subtracted.
    """

    pass


class InvalidPresetException(InputValidationException):
    """Raised when the entered preset is not one of the ten known tokens."""

    pass


# --- MediaFile / Probe Specific Exceptions ---
class MediaFileException(SizeEncoderException):
    """
    Raised when a media file cannot be probed with ffprobe.

    The file may be missing, unreadable, or not a recognised container. The
    original `ffmpeg.Error` or `OSError` is chained as the cause.
    """

    pass


class NoDurationFoundException(MediaFileException):
    """
    Raised when the probe succeeds but yields no usable duration.

    A missing, unparseable, zero or negative duration makes the bitrate
    computation meaningless, so the file cannot be processed.
    """

    pass


# --- Planning Exceptions ---
class InvalidDurationException(SizeEncoderException):
    """Raised when the bitrate planner receives a non-positive or non-finite duration."""

    pass


# --- Encoding Specific Exceptions ---
class EncodingException(SizeEncoderException):
    """Raised when FFmpeg cannot be started or exits with a non-zero status."""

    pass
