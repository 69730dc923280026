# sfxgen/core/constants.py
"""Fixed synthesis and container parameters."""

SAMPLE_RATE = 44100
NUM_CHANNELS = 1
SAMPLE_WIDTH_BYTES = 2  # 16-bit PCM
PCM_MAX = 32767

# Mixer
SILENCE_PREFIX_SECONDS = 0.035
FADE_OUT_SECONDS = 0.01
NORMALIZE_CEILING = 0.9

# Envelope
ENVELOPE_FLOOR = 0.01
ATTACK_MIN_CYCLES = 4
ATTACK_MIN_SECONDS = 0.025
ATTACK_MAX_SECONDS = 0.06
