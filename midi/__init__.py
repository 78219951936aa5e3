"""MIDI file import."""
