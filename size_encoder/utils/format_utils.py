"""
Helper functions for formatting data into human-readable strings, used in the
catalog listing, the result messages and the log.
"""

from datetime import timedelta


def format_timedelta(td_object: timedelta) -> str:
    """
    Formats a timedelta object into a "HH:MM:SS" string.

    Args:
        td_object: The timedelta object to format.

    Returns:
        A string such as "02:01:01" for 7261 seconds.
    """
    total_seconds = int(td_object.total_seconds())
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02}:{minutes:02}:{seconds:02}"


def formatted_size(size_bytes: int) -> str:
    """
    Converts a size in bytes to a human-readable string (B, KB, MB, GB, TB).

    For example, 1536 becomes "1.50 KB" and 2097152 becomes "2 MB".
    """
    if size_bytes < 0:
        size_bytes = 0

    units = ["B", "KB", "MB", "GB", "TB", "PB"]
    factor = 1024.0

    if size_bytes == 0:
        return "0 B"

    for unit in units:
        if size_bytes < factor:
            if unit == "B":
                return f"{size_bytes} {unit}"
            # "2.00 MB" -> "2 MB"
            return f"{size_bytes:.2f} {unit}".replace(".00", "")
        size_bytes /= factor

    return f"{size_bytes:.2f} {units[-1]}".replace(".00", "")
