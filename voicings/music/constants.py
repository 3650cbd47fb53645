from config import BASE_OCTAVE, C0_MIDI_NUMBER

# chromatic ordering, sharps only
NOTE_NAMES = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

# C3 -> 48
BASE_MIDI_NOTE = C0_MIDI_NUMBER + BASE_OCTAVE * 12

NOTE_NAME_TO_MIDI_NOTE = {
    note_name: BASE_MIDI_NOTE + i for i, note_name in enumerate(NOTE_NAMES)
}

# semitones above the root, the order here is the order of the chord table
CHORD_FORMULAS = {
    # triads
    # 1 3 5
    "maj": (0, 4, 7),
    # 1 b3 5
    "m": (0, 3, 7),
    # 1 b3 b5
    "dim": (0, 3, 6),
    # 1 3 #5
    "aug": (0, 4, 8),
    # suspended / power chords
    # 1 2 5
    "sus2": (0, 2, 7),
    # 1 4 5
    "sus4": (0, 5, 7),
    # 1 5
    "5": (0, 7),
    # sevenths
    # 1 3 5 7
    "maj7": (0, 4, 7, 11),
    # 1 b3 5 b7
    "m7": (0, 3, 7, 10),
    # 1 3 5 b7
    "7": (0, 4, 7, 10),
    # 1 b3 b5 bb7
    "dim7": (0, 3, 6, 9),
    # 1 b3 b5 b7
    "m7b5": (0, 3, 6, 10),
    # sixths
    # 1 3 5 6
    "6": (0, 4, 7, 9),
    # 1 b3 5 6
    "m6": (0, 3, 7, 9),
    # ninths
    # 1 3 5 b7 9
    "9": (0, 4, 7, 10, 14),
    # 1 3 5 7 9
    "maj9": (0, 4, 7, 11, 14),
    # 1 b3 5 b7 9
    "m9": (0, 3, 7, 10, 14),
    # 1 3 b5
    "flat5": (0, 4, 6),
}

# C D E F G A B C
IONIAN_INTERVALS = (0, 2, 4, 5, 7, 9, 11)

# C D Eb F G Ab Bb C
AEOLIAN_INTERVALS = (
    # 1
    IONIAN_INTERVALS[0],
    # 2
    IONIAN_INTERVALS[1],
    # b3
    IONIAN_INTERVALS[2] - 1,
    # 4
    IONIAN_INTERVALS[3],
    # 5
    IONIAN_INTERVALS[4],
    # b6
    IONIAN_INTERVALS[5] - 1,
    # b7
    IONIAN_INTERVALS[6] - 1,
)

# chord quality and roman numeral built on each scale degree
DIATONIC_CHORDS = {
    "Major": {
        "intervals": IONIAN_INTERVALS,
        "chord_types": ("maj", "m", "m", "maj", "maj", "m", "dim"),
        "degrees": ("I", "ii", "iii", "IV", "V", "vi", "vii°"),
    },
    "Minor": {
        "intervals": AEOLIAN_INTERVALS,
        "chord_types": ("m", "dim", "maj", "m", "m", "maj", "maj"),
        "degrees": ("i", "ii°", "III", "iv", "v", "VI", "VII"),
    },
}

# [0, 127] are the valid MIDI note values
MIN_MIDI_NOTE = 0
MAX_MIDI_NOTE = 127
