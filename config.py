"""
Global Project Settings
"""
from pathlib import Path

# the enclosing folder of the repository
REPO_ROOT = Path(__file__).parent

# the chord table is written next to the builder, at the repository root
OUTPUT_DIR = REPO_ROOT

# the serialized chord table
CHORDS_JSON_PATH = OUTPUT_DIR / "chords.json"

# MIDI note number of C0
C0_MIDI_NUMBER = 12

# every root position voicing starts in this octave, C3 -> 48
BASE_OCTAVE = 3
