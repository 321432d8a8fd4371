#
# Audio constants for the click tone.
# Kept separate so tweaking the beep is easy.
# --------------------------------------------------------

# Requested output format: 48 kHz stereo
SAMPLE_RATE = 48000
CHANNELS = 2

# pyglet drivers play signed 16-bit PCM; tones are synthesized as float32
# and quantized on submission
SAMPLE_SIZE_BITS = 16

# A5, short enough to feel like a click
TONE_FREQUENCY_HZ = 880.0
TONE_DURATION_S = 0.12

# peak level as a fraction of full scale
TONE_AMPLITUDE = 0.25
