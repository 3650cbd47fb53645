from typing import Iterable, List, Tuple
from voicings.music.constants import (
    CHORD_FORMULAS,
    MAX_MIDI_NOTE,
    MIN_MIDI_NOTE,
    NOTE_NAME_TO_MIDI_NOTE,
)

NoteName = str
ChordType = str
MIDINote = int
Formula = Tuple[int, ...]
Voicing = Tuple[MIDINote, ...]


class InvalidMusicDefinition(Exception):
    pass


def get_pitch(note_name: NoteName) -> MIDINote:
    """MIDI note value of the note name in the base octave, e.g. C -> 48."""
    try:
        return NOTE_NAME_TO_MIDI_NOTE[note_name]
    except KeyError:
        raise InvalidMusicDefinition(f"Unknown note name. Got: {note_name!r}")


def get_formula(chord_type: ChordType) -> Formula:
    try:
        return CHORD_FORMULAS[chord_type]
    except KeyError:
        raise InvalidMusicDefinition(f"Unknown chord type. Got: {chord_type!r}")


def get_root_position(root_midi_note: MIDINote, formula: Iterable[int]) -> Voicing:
    # keeps the formula order, which is not necessarily ascending
    return tuple(root_midi_note + interval for interval in formula)


def get_inversions(root_position_notes: Iterable[MIDINote]) -> Tuple[Voicing, ...]:
    """Every inversion of a voicing, starting with the root position.

    The lowest note of the working voicing (in its unsorted order) is moved up an
    octave after each step. Each inversion is reported in ascending order, but the
    rotation always continues from the unsorted working voicing.

    Args:
        root_position_notes: The MIDI notes of the chord in formula order.

    Returns: One ascending voicing per note in the chord. Empty if there are no notes.
    """
    current_notes: List[MIDINote] = list(root_position_notes)
    inversions = []
    for _ in range(len(current_notes)):
        inversions.append(tuple(sorted(current_notes)))
        first_note = current_notes.pop(0)
        current_notes.append(first_note + 12)
    return tuple(inversions)


def shift_octave(notes: Iterable[MIDINote], num_octaves: int) -> Voicing:
    shifted = tuple(n + num_octaves * 12 for n in notes)
    for n in shifted:
        if not (MIN_MIDI_NOTE <= n <= MAX_MIDI_NOTE):
            raise InvalidMusicDefinition(f"Invalid MIDI note value. Got: {n}")
    return shifted
