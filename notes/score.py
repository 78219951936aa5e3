# ========================= notes/score.py =========================
import json
from typing import Iterable, List, Tuple

from notes.model import NoteEvent
from notes.pitch import name_to_semitone

# (note name, beats); "Never Gonna Give You Up", opening phrases
DEFAULT_MELODY: List[Tuple[str, float]] = [
    ("D", 0.5), ("E", 0.5), ("G", 0.5), ("E", 0.5),
    ("B", 1.0), ("B", 1.0), ("A", 1.0),
    ("D", 0.5), ("E", 0.5), ("G", 0.5), ("E", 0.5),
    ("A", 1.0), ("A", 1.0), ("G", 1.0),

    ("D", 0.5), ("E", 0.5), ("G", 0.5), ("E", 0.5),
    ("B", 1.0), ("A", 1.0), ("F#", 1.0),
    ("D", 0.5), ("D", 0.5), ("A", 1.0), ("G", 1.0),
]

def build_score(pairs: Iterable[Tuple[str, float]], volume: float) -> List[NoteEvent]:
    """Resolve (name, beats) pairs into note events. The first bad name aborts the whole score."""
    return [NoteEvent(name_to_semitone(name), float(beats), volume) for name, beats in pairs]

def serialize_score(pairs: Iterable[Tuple[str, float]]) -> list:
    """以 {"note", "beats"} 物件輸出，便於人看與儲存 JSON。"""
    return [{"note": name, "beats": beats} for name, beats in pairs]

def deserialize_score(obj) -> List[Tuple[str, float]]:
    if not isinstance(obj, list):
        raise ValueError("Score JSON must be a list of {note, beats} objects")
    out: List[Tuple[str, float]] = []
    for idx, item in enumerate(obj):
        try:
            name, beats = item["note"], item["beats"]
        except (TypeError, KeyError):
            raise ValueError(f"Score entry #{idx} must have 'note' and 'beats': {item!r}") from None
        if not isinstance(name, str):
            raise ValueError(f"Score entry #{idx}: note must be a string, got {name!r}")
        if isinstance(beats, bool) or not isinstance(beats, (int, float)):
            raise ValueError(f"Score entry #{idx}: beats must be a number, got {beats!r}")
        out.append((name, float(beats)))
    return out

def load_score_json(path: str) -> List[Tuple[str, float]]:
    with open(path, "r", encoding="utf-8") as f:
        return deserialize_score(json.load(f))

def save_score_json(pairs: Iterable[Tuple[str, float]], path: str):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(serialize_score(pairs), f, ensure_ascii=False, indent=2)
