# audio/sequence.py
import logging
import numpy as np

from audio.tone import make_note
from notes.model import Score

log = logging.getLogger(__name__)

def compose_sequence(score: Score, sample_rate: int, bpm: int) -> np.ndarray:
    """Render every note in order and join them back to back (no gaps, no cross-fade)."""
    parts = [make_note(n, sample_rate, bpm) for n in score]
    if not parts:
        return np.zeros(0, dtype=np.float64)
    wave = np.concatenate(parts)
    log.debug("Composed %d notes -> %d samples (%.3f s @ %d Hz)",
              len(parts), len(wave), len(wave) / sample_rate, sample_rate)
    return wave
