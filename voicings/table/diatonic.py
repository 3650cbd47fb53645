from dataclasses import dataclass
from typing import Dict, List, Tuple

from config import BASE_OCTAVE
from voicings.music.constants import DIATONIC_CHORDS, NOTE_NAMES
from voicings.music.transforms import (
    ChordType,
    InvalidMusicDefinition,
    NoteName,
    Voicing,
    shift_octave,
)
from voicings.table.chords import ChordTable


@dataclass(frozen=True)
class DiatonicChord:
    root_note: NoteName
    chord_type: ChordType
    degree: str

    @property
    def name(self) -> str:
        """e.g. 'Dm', 'Bdim'. Major triads are written with the bare root."""
        suffix = "" if self.chord_type == "maj" else self.chord_type
        return f"{self.root_note}{suffix}"


ScaleMap = Dict[str, Tuple[DiatonicChord, ...]]


def get_scale_map() -> ScaleMap:
    """The seven diatonic chords of every major and natural minor key.

    Keys look like 'C Major', 'F# Minor'.
    """
    scales = {}
    for i, tonic in enumerate(NOTE_NAMES):
        for tonality, definition in DIATONIC_CHORDS.items():
            scales[f"{tonic} {tonality}"] = tuple(
                DiatonicChord(
                    root_note=NOTE_NAMES[(i + interval) % 12],
                    chord_type=chord_type,
                    degree=degree,
                )
                for interval, chord_type, degree in zip(
                    definition["intervals"],
                    definition["chord_types"],
                    definition["degrees"],
                )
            )
    return scales


def get_chord_voicing(
    table: ChordTable,
    root_note: NoteName,
    chord_type: ChordType,
    inversion: int = 0,
    octave: int = BASE_OCTAVE,
) -> Voicing:
    """Pick one inversion of a chord from the table and move it to another octave.

    The inversion index wraps around, so inversion 3 of a triad is its root position.
    """
    variations = table.get(root_note)
    if variations is None:
        raise InvalidMusicDefinition(f"Root note is not in the table. Got: {root_note!r}")
    entry = variations.get(chord_type)
    if entry is None:
        raise InvalidMusicDefinition(
            f"Chord type is not in the table. Got: {root_note}{chord_type}"
        )
    if not entry.inversions:
        return ()

    notes = entry.inversions[inversion % len(entry.inversions)]
    return shift_octave(notes, octave - BASE_OCTAVE)


def get_diatonic_voicings(
    table: ChordTable,
    scale_name: str,
    inversion: int = 0,
    octave: int = BASE_OCTAVE,
    scale_map: ScaleMap = None,
) -> List[Tuple[str, str, Voicing]]:
    scale_map = scale_map if scale_map is not None else get_scale_map()
    if scale_name not in scale_map:
        raise InvalidMusicDefinition(f"Unknown scale. Got: {scale_name!r}")

    return [
        (
            chord.degree,
            chord.name,
            get_chord_voicing(table, chord.root_note, chord.chord_type, inversion, octave),
        )
        for chord in scale_map[scale_name]
    ]
