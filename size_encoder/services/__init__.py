"""
Services of the Size Encoder.

    bitrate_planner.py: size + duration -> video bitrate.
    file_catalog.py: numbered listing of the input folder.
    compression_service.py: probe, plan and run one FFmpeg job.
"""
from .bitrate_planner import plan_bitrate_kbps
from .compression_service import compress
from .file_catalog import list_input_files

__all__ = ["plan_bitrate_kbps", "compress", "list_input_files"]
