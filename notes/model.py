# notes/model.py
from dataclasses import dataclass
from typing import Sequence

@dataclass(frozen=True)
class NoteEvent:
    semitone: int   # offset from the 440 Hz reference
    beats: float
    volume: float

    def seconds(self, bpm: int) -> float:
        return (60.0 / bpm) * self.beats

Score = Sequence[NoteEvent]
