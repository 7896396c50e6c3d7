"""
Configuration Package for the Size Encoder.

Static settings live here so they can be adjusted without touching the
application logic:
- `common.py`: logging format, default input/output folders, status spinner
  settings and the optional `config.user.yaml` with the FFmpeg location.
- `video.py`: the ten x264 presets, their descriptions and display colours,
  and the fixed output flags.
"""
