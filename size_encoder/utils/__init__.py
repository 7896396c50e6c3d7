"""
Utilities Package for the Size Encoder.

Modules:
    - ffmpeg_utils.py: Locates the FFmpeg/ffprobe executables and verifies
      FFmpeg at startup.
    - format_utils.py: Formats file sizes and elapsed times for display.
"""
