from typing import Tuple, List, Sequence

from mido import Message, MidiFile, MidiTrack, MetaMessage, bpm2tempo

from voicings.music.constants import MAX_MIDI_NOTE, MIN_MIDI_NOTE
from voicings.music.transforms import InvalidMusicDefinition, Voicing

# (start beat, end beat, MIDI notes)
TimedVoicing = Tuple[float, float, Voicing]


def create_midi_file(
    ticks_per_beat: int = 480,
) -> MidiFile:
    return MidiFile(ticks_per_beat=ticks_per_beat)


def create_midi_track(
    bpm: int,
    time_signature: Tuple[int, int],
    track_name: str = "Piano",
    program: int = 0,
    channel: int = 0,
) -> MidiTrack:
    track = MidiTrack()
    track.append(MetaMessage("track_name", name=track_name, time=0))
    track.append(
        MetaMessage(
            "time_signature",
            numerator=time_signature[0],
            denominator=time_signature[1],
            clocks_per_click=24,
            notated_32nd_notes_per_beat=8,
            time=0,
        )
    )

    # in microseconds per quarter note, this is fixed to 4/4 on purpose
    midi_tempo = bpm2tempo(bpm, time_signature=(4, 4))
    track.append(MetaMessage("set_tempo", tempo=midi_tempo, time=0))

    track.append(Message("program_change", program=program, time=0, channel=channel))

    return track


def get_progression_midi(
    voicings: Sequence[Voicing],
    play_duration_in_beats: float = 2,
) -> List[TimedVoicing]:
    progression = []
    prev_beat = 0
    for notes in voicings:
        progression.append((prev_beat, prev_beat + play_duration_in_beats, notes))
        prev_beat += play_duration_in_beats
    return progression


def write_progression(
    progression: List[TimedVoicing],
    midi_track: MidiTrack,
    ticks_per_beat: int = 480,
    channel: int = 0,
    velocity: int = 100,
) -> None:
    prev_chord = None
    for chord in progression:
        start_beat, end_beat, midi_notes = chord

        # a gap between two chords is written as a silent note
        prev_end_beat = prev_chord[1] if prev_chord else 0
        if prev_end_beat < start_beat:
            x = int((start_beat - prev_end_beat) * ticks_per_beat)
            midi_track.append(
                Message("note_on", note=64, velocity=0, time=0, channel=channel)
            )
            midi_track.append(
                Message("note_off", note=64, velocity=0, time=x, channel=channel)
            )

        for n in midi_notes:
            if not (MIN_MIDI_NOTE <= n <= MAX_MIDI_NOTE):
                raise InvalidMusicDefinition(f"Invalid MIDI note value. Got: {n}")

            midi_track.append(
                Message("note_on", note=n, velocity=velocity, time=0, channel=channel)
            )

        # only the first note off carries the duration of the chord
        for i, n in enumerate(midi_notes):
            t = int((end_beat - start_beat) * ticks_per_beat) if i == 0 else 0
            midi_track.append(
                Message("note_off", note=n, velocity=0, time=t, channel=channel)
            )

        prev_chord = chord
