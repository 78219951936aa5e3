# notes/pitch.py
from typing import Dict

REFERENCE_HZ = 440.0

# pitch class -> semitone offset, sharps only
NOTE_SEMITONES: Dict[str, int] = {
    "C": 0,
    "C#": 1,
    "D": 2,
    "D#": 3,
    "E": 4,
    "F": 5,
    "F#": 6,
    "G": 7,
    "G#": 8,
    "A": 9,
    "A#": 10,
    "B": 11,
}

class InvalidNoteName(ValueError):
    def __init__(self, name):
        super().__init__(f"Invalid note: {name!r}")
        self.name = name

def name_to_semitone(name: str) -> int:
    try:
        return NOTE_SEMITONES[name]
    except (KeyError, TypeError):
        raise InvalidNoteName(name) from None

def semitone_to_hz(semitone: int) -> float:
    return REFERENCE_HZ * 2.0 ** (semitone / 12.0)
