import sys
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, Mapping, Tuple

import pandas as pd

from config import CHORDS_JSON_PATH
from voicings.music.constants import CHORD_FORMULAS, NOTE_NAMES, NOTE_NAME_TO_MIDI_NOTE
from voicings.music.transforms import (
    ChordType,
    Formula,
    NoteName,
    Voicing,
    get_inversions,
    get_root_position,
)
from voicings.table.checksum import compute_checksum
from voicings.table.table_writer import ChordTableWriter, TableRowDescription


@dataclass(frozen=True)
class ChordEntry:
    """One chord quality built on one root note."""

    root: Voicing
    inversions: Tuple[Voicing, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "root": list(self.root),
            "inversions": [list(inversion) for inversion in self.inversions],
        }


ChordTable = Mapping[NoteName, Mapping[ChordType, ChordEntry]]


def get_chord_entry(root_midi_note: int, formula: Formula) -> ChordEntry:
    root_position_notes = get_root_position(root_midi_note, formula)
    return ChordEntry(
        root=root_position_notes,
        inversions=get_inversions(root_position_notes),
    )


def get_chord_table(
    note_names: Iterable[NoteName] = NOTE_NAMES,
    chord_formulas: Mapping[ChordType, Formula] = CHORD_FORMULAS,
) -> ChordTable:
    """Build every chord quality on every root note.

    Roots and chord types keep the order they are given in. A note name that has no
    MIDI note value is left out of the table.

    Returns: A read-only mapping of root note name -> chord type -> ChordEntry.
    """
    all_chords = {}
    for root_note_name in note_names:
        root_midi_note = NOTE_NAME_TO_MIDI_NOTE.get(root_note_name)
        if root_midi_note is None:
            continue

        root_variations = {
            chord_type: get_chord_entry(root_midi_note, formula)
            for chord_type, formula in chord_formulas.items()
        }
        all_chords[root_note_name] = MappingProxyType(root_variations)

    return MappingProxyType(all_chords)


def chord_table_to_dict(table: ChordTable) -> Dict[str, Dict[str, Dict[str, Any]]]:
    return {
        root_note_name: {
            chord_type: entry.to_dict() for chord_type, entry in variations.items()
        }
        for root_note_name, variations in table.items()
    }


def get_row_iterator(table: ChordTable) -> Iterator[TableRowDescription]:
    idx = 0
    for root_note_name, variations in table.items():
        for chord_type, entry in variations.items():
            for inversion, notes in enumerate(entry.inversions):
                yield (
                    idx,
                    {
                        "root_note_name": root_note_name,
                        "chord_type": chord_type,
                        "inversion": inversion,
                        "root_note_is_accidental": root_note_name.endswith("#"),
                        "root_note_midi_value": entry.root[0],
                        "num_notes": len(notes),
                        "midi_notes": " ".join(str(n) for n in notes),
                    },
                )
                idx += 1


def get_chord_table_as_dataframe(table: ChordTable) -> pd.DataFrame:
    rows = [{"row_id": row_id, **row} for row_id, row in get_row_iterator(table)]
    df = pd.json_normalize(rows)
    if df.empty:
        return df
    return df.sort_values(by=["row_id"]).reset_index(drop=True)


def main() -> int:
    table = get_chord_table()
    table_writer = ChordTableWriter(CHORDS_JSON_PATH)
    try:
        output_path = table_writer.write(chord_table_to_dict(table))
    except OSError as e:
        print(
            f"Could not write the chord table to {CHORDS_JSON_PATH.absolute()}: {e}",
            file=sys.stderr,
        )
        return 1

    print(f"Chord data generated for {len(table)} root notes.")
    print(f"File saved to: {output_path}")
    print(f"sha256: {compute_checksum(output_path)}")
    return 0


if __name__ == "__main__":
    """Writes chords.json to the repository root.

    12 root notes x 18 chord types, 792 inversions in total.
    """
    sys.exit(main())
