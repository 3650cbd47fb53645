import argparse
import warnings
from pathlib import Path
from typing import List, Optional

from mido import MidiFile

from config import BASE_OCTAVE
from voicings.music.midi import (
    create_midi_file,
    create_midi_track,
    get_progression_midi,
    write_progression,
)
from voicings.table.chords import ChordTable, get_chord_table
from voicings.table.diatonic import get_diatonic_voicings
from util import use_770_permissions


def render_scale_midi(
    table: ChordTable,
    scale_name: str,
    output_path: Path,
    inversion: int = 0,
    octave: int = BASE_OCTAVE,
    bpm: int = 120,
    play_duration_in_beats: float = 2,
) -> MidiFile:
    """Write the seven diatonic chords of a key, one after another, to a MIDI file."""
    diatonic_voicings = get_diatonic_voicings(table, scale_name, inversion, octave)
    progression = get_progression_midi(
        [notes for _, _, notes in diatonic_voicings],
        play_duration_in_beats=play_duration_in_beats,
    )

    midi_file = create_midi_file()
    midi_track = create_midi_track(
        bpm=bpm,
        time_signature=(4, 4),
        track_name=scale_name,
    )
    write_progression(progression, midi_track)
    midi_file.tracks.append(midi_track)

    if output_path.exists():
        warnings.warn(f"Overwriting existing MIDI file: {output_path}", UserWarning)
    midi_file.save(output_path)
    return midi_file


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser()
    parser.add_argument("--scale", type=str, default="C Major")
    parser.add_argument("--inversion", type=int, default=0)
    parser.add_argument("--octave", type=int, default=BASE_OCTAVE)
    parser.add_argument("--bpm", type=int, default=120)
    parser.add_argument("--output", type=str, required=True)
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = get_parser().parse_args(argv)
    output_path = Path(args.output)

    with use_770_permissions():
        render_scale_midi(
            get_chord_table(),
            args.scale,
            output_path,
            inversion=args.inversion,
            octave=args.octave,
            bpm=args.bpm,
        )

    print(f"{args.scale} (inversion {args.inversion}, octave {args.octave}) saved to: {output_path.absolute()}")


if __name__ == "__main__":
    """Render the diatonic chords of a key, e.g.

    python -m voicings.table.render --scale "A Minor" --inversion 1 --output a_minor.mid
    """
    main()
