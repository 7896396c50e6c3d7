"""
Configuration settings related to video encoding.

Defines the preset vocabulary accepted by the encoder, the text and colour used
to present each preset to the user, and the fixed output options applied to
every job.
"""

# --- Preset Vocabulary ---
# The ten x264/x265 speed/quality presets, ordered from fastest (lowest
# compression efficiency) to slowest (highest). The user must type one of these
# tokens verbatim; anything else is rejected before FFmpeg is started.
PRESETS = (
    "ultrafast",
    "superfast",
    "veryfast",
    "faster",
    "fast",
    "medium",
    "slow",
    "slower",
    "veryslow",
    "placebo",
)

PRESET_DESCRIPTIONS = {
    "ultrafast": "Very fast encoding",
    "superfast": "Fast encoding",
    "veryfast": "Very fast, with slightly better quality",
    "faster": "Moderately fast encoding",
    "fast": "Good quality with fast encoding (recommended)",
    "medium": "Standard quality (default)",
    "slow": "Slower encoding, but better quality",
    "slower": "Slow encoding with excellent quality",
    "veryslow": "Very slow encoding with maximum quality",
    "placebo": "Maximum quality at the maximum cost in time",
}

# 256-colour palette indices, green for the fast end through orange to pink.
PRESET_COLORS = (34, 70, 106, 142, 178, 214, 215, 216, 217, 181)

# --- Output Options ---
# Moves the moov atom to the front of the file for progressive playback.
MOVFLAGS = "faststart"
