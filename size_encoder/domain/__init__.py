"""
Core domain models of the Size Encoder.

Modules:
    exceptions.py: The exception hierarchy used to tell recoverable input,
                   probe and encode failures apart from host-level errors.
    models.py: Immutable records (`CatalogEntry`, `CompressionRequest`,
               `CompressionResult`) and the validators that build them.
    media.py: `probe_duration`, which wraps ffprobe (via ffmpeg-python) to
              obtain the duration of a media file.
"""
