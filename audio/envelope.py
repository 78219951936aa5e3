# audio/envelope.py
import numpy as np

ENVELOPE_SAMPLES = 1000  # raw samples, independent of sample rate

def apply_envelope(wave) -> np.ndarray:
    """
    Linear fade-in over the first ENVELOPE_SAMPLES samples and fade-out over
    the last ENVELOPE_SAMPLES. On short buffers both ramps overlap and their
    gains simply multiply.
    """
    wave = np.asarray(wave, dtype=np.float64)
    n = len(wave)
    if n == 0:
        return np.zeros(0, dtype=np.float64)
    i = np.arange(n, dtype=np.float64)  # only 0..n-1, so n - i >= 1
    attack = np.minimum(1.0, i / ENVELOPE_SAMPLES)
    decay = np.minimum(1.0, (n - i) / ENVELOPE_SAMPLES)
    return wave * attack * decay
