# midi/parser.py
import logging
import mido
from typing import Dict, List, Tuple
from notes.model import NoteEvent

log = logging.getLogger(__name__)

MIDDLE_C = 60  # MIDI pitch that maps to semitone offset 0 ("C")

def _read_spans(mid: mido.MidiFile) -> List[Tuple[int, int, int]]:
    """(start_tick, end_tick, pitch) for every note in the file."""
    tick = 0
    active: Dict[Tuple[int, int], int] = {}
    spans: List[Tuple[int, int, int]] = []
    for msg in mido.merge_tracks(mid.tracks):
        tick += msg.time
        if msg.is_meta:
            continue  # tempo comes from the run config
        if msg.type == 'note_on' and msg.velocity > 0:
            active[(msg.channel, msg.note)] = tick
        elif msg.type == 'note_off' or (msg.type == 'note_on' and msg.velocity == 0):
            st = active.pop((msg.channel, msg.note), None)
            if st is not None:
                spans.append((st, tick, msg.note))
    # close dangling
    for (_, p), st in active.items():
        spans.append((st, tick, p))
    return spans

def parse_midi_to_score(path: str, volume: float) -> List[NoteEvent]:
    """
    Reduce a MIDI file to a monophonic score:
    - notes starting on the same tick keep only the highest pitch
    - a new onset cuts the sounding note short
    - rests are dropped, notes are joined back to back
    """
    try:
        mid = mido.MidiFile(path)
    except EOFError:
        raise ValueError(f"{path}: truncated MIDI file") from None
    tpb = mid.ticks_per_beat

    top: Dict[int, Tuple[int, int]] = {}  # start -> (end, pitch)
    for st, end, p in _read_spans(mid):
        if st not in top or p > top[st][1]:
            top[st] = (end, p)

    starts = sorted(top)
    score: List[NoteEvent] = []
    for k, st in enumerate(starts):
        end, p = top[st]
        if k + 1 < len(starts):
            end = min(end, starts[k + 1])
        if end <= st:
            continue
        score.append(NoteEvent(semitone=p - MIDDLE_C, beats=(end - st) / tpb, volume=volume))
    log.info("Loaded %d notes from %s (ticks_per_beat=%d)", len(score), path, tpb)
    return score
