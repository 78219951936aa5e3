# audio/pcm.py
import logging
import numpy as np

log = logging.getLogger(__name__)

# mono, 8-byte little-endian IEEE-754, no header
PCM_DTYPE = np.dtype("<f8")

def save_pcm(wave, path: str):
    data = np.asarray(wave, dtype=np.float64).astype(PCM_DTYPE, copy=False)
    with open(path, "wb") as f:
        f.write(data.tobytes())
    log.info("Wrote %d samples (%d bytes) to %s", len(data), data.nbytes, path)

def load_pcm(path: str) -> np.ndarray:
    with open(path, "rb") as f:
        raw = f.read()
    if len(raw) % PCM_DTYPE.itemsize:
        raise ValueError(f"{path}: size {len(raw)} is not a multiple of {PCM_DTYPE.itemsize}")
    return np.frombuffer(raw, dtype=PCM_DTYPE).astype(np.float64)
