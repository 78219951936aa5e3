"""Signal generation: sine tones, envelope, sequencing and raw PCM output."""
