"""
Size Encoder: re-encode a single video so that it lands close to a requested size.

The package is split the same way as the rest of the project's layers:

    config/    static settings, preset vocabulary and the optional user YAML file
    domain/    exceptions, data records and the ffprobe-backed media prober
    services/  bitrate planning, file catalog and the FFmpeg job
    pipeline/  the interactive session loop that ties everything together
    utils/     helpers for locating FFmpeg and formatting sizes/durations
"""
