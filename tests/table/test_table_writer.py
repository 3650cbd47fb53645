import json
import tempfile
from pathlib import Path

import pytest
import pandas as pd

from voicings.music.constants import NOTE_NAMES
from voicings.table.chords import chord_table_to_dict, get_chord_table_as_dataframe
from voicings.table.table_writer import ChordTableWriter


def test_table_writer(chord_table) -> None:
    data = chord_table_to_dict(chord_table)
    with tempfile.TemporaryDirectory() as tmp_dir:
        output_path = Path(tmp_dir) / "chords.json"
        table_writer = ChordTableWriter(output_path)

        written_path = table_writer.write(data)
        assert written_path == output_path.absolute()
        assert written_path.is_absolute()

        text = output_path.read_text(encoding="utf-8")
        assert text.startswith('{\n  "C": {\n    "maj": {\n      "root": [\n        48,')
        assert not text.endswith("\n")

        # keys keep the order of the table, they are not sorted
        loaded = table_writer.read()
        assert loaded == data
        assert list(loaded.keys()) == list(NOTE_NAMES)
        assert list(loaded["C"].keys())[:3] == ["maj", "m", "dim"]

        # no temporary files are left behind
        assert [p.name for p in Path(tmp_dir).iterdir()] == ["chords.json"]


def test_table_writer_replaces_existing_file() -> None:
    with tempfile.TemporaryDirectory() as tmp_dir:
        output_path = Path(tmp_dir) / "chords.json"
        output_path.write_text("stale")

        table_writer = ChordTableWriter(output_path, write_with_770_permissions=False)
        table_writer.write({"C": {"5": {"root": [48, 55], "inversions": [[48, 55], [55, 60]]}}})
        assert table_writer.read() == {
            "C": {"5": {"root": [48, 55], "inversions": [[48, 55], [55, 60]]}}
        }


def test_table_writer_path_type_exception() -> None:
    with pytest.raises(ValueError) as exc:
        ChordTableWriter("./chords.json")
    assert str(exc.value) == (
        "output_path must be a Path object. It was given as type: <class 'str'>"
    )


def test_table_writer_missing_directory() -> None:
    with tempfile.TemporaryDirectory() as tmp_dir:
        tmp_path = Path(tmp_dir)
        table_writer = ChordTableWriter(tmp_path / "missing" / "chords.json")

        with pytest.raises(OSError):
            table_writer.write({"C": {}})

        assert len(list(tmp_path.rglob("*"))) == 0


def test_table_writer_unserializable_data() -> None:
    with tempfile.TemporaryDirectory() as tmp_dir:
        tmp_path = Path(tmp_dir)
        output_path = tmp_path / "chords.json"
        output_path.write_text("{}")
        table_writer = ChordTableWriter(output_path)

        with pytest.raises(TypeError):
            table_writer.write({"C": {"maj": object()}})

        # the previous table is untouched
        assert json.loads(output_path.read_text()) == {}
        assert len(list(tmp_path.rglob("*"))) == 1


def test_table_writer_csv(chord_table) -> None:
    df = get_chord_table_as_dataframe(chord_table)
    with tempfile.TemporaryDirectory() as tmp_dir:
        table_writer = ChordTableWriter(Path(tmp_dir) / "chords.json")
        csv_path = table_writer.write_csv(df, Path(tmp_dir) / "chords.csv")

        loaded = pd.read_csv(csv_path)
        assert loaded.shape == df.shape
        assert loaded.columns.to_list() == df.columns.to_list()
        assert loaded["midi_notes"].to_list() == df["midi_notes"].to_list()
