import json

import pytest

from notes.model import NoteEvent
from notes.pitch import InvalidNoteName
from notes.score import (DEFAULT_MELODY, build_score, deserialize_score,
                         load_score_json, save_score_json, serialize_score)

def test_default_melody_builds():
    score = build_score(DEFAULT_MELODY, volume=0.4)
    assert len(score) == 25
    assert [n.semitone for n in score[:4]] == [2, 4, 7, 4]
    assert score[20] == NoteEvent(6, 1.0, 0.4)  # F#
    assert all(n.volume == 0.4 for n in score)

def test_note_events_are_immutable():
    n = NoteEvent(0, 1.0, 0.4)
    with pytest.raises(AttributeError):
        n.beats = 2.0

def test_note_seconds():
    assert NoteEvent(0, 1.0, 1.0).seconds(120) == 0.5
    assert NoteEvent(0, 0.5, 1.0).seconds(60) == 0.5

def test_bad_name_aborts_whole_score():
    with pytest.raises(InvalidNoteName):
        build_score([("C", 1), ("Db", 1), ("E", 1)], volume=1.0)

def test_json_round_trip(tmp_path):
    path = tmp_path / "score.json"
    save_score_json(DEFAULT_MELODY, str(path))
    assert json.loads(path.read_text(encoding="utf-8"))[0] == {"note": "D", "beats": 0.5}
    assert load_score_json(str(path)) == DEFAULT_MELODY

def test_serialize_shape():
    assert serialize_score([("F#", 2)]) == [{"note": "F#", "beats": 2}]

def test_deserialize_converts_beats_to_float():
    assert deserialize_score([{"note": "G", "beats": 1}]) == [("G", 1.0)]

@pytest.mark.parametrize("obj", [
    {"note": "C", "beats": 1},
    [["C", 1]],
    [{"note": "C"}],
    [{"beats": 1}],
    [{"note": 3, "beats": 1}],
    [{"note": "C", "beats": "1"}],
    [{"note": "C", "beats": True}],
])
def test_deserialize_rejects_malformed(obj):
    with pytest.raises(ValueError):
        deserialize_score(obj)

def test_load_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(ValueError):
        load_score_json(str(path))
