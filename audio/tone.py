# audio/tone.py
import math
import numpy as np

from audio.envelope import apply_envelope
from notes.model import NoteEvent
from notes.pitch import semitone_to_hz

def sine_wave(hz: float, sample_rate: int, duration: float, volume: float) -> np.ndarray:
    if duration <= 0:
        return np.zeros(0, dtype=np.float64)
    n = int(sample_rate * duration)
    if n <= 0:
        return np.zeros(0, dtype=np.float64)
    step = hz * 2.0 * math.pi / sample_rate
    return np.sin(np.arange(n, dtype=np.float64) * step) * volume

def generate_tone(hz: float, sample_rate: int, duration: float, volume: float) -> np.ndarray:
    """Enveloped sine tone, int(sample_rate * duration) samples long."""
    return apply_envelope(sine_wave(hz, sample_rate, duration, volume))

def make_note(note: NoteEvent, sample_rate: int, bpm: int) -> np.ndarray:
    hz = semitone_to_hz(note.semitone)
    return generate_tone(hz, sample_rate, note.seconds(bpm), note.volume)
