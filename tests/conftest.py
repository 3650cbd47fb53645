import pytest

from voicings.table.chords import ChordTable, get_chord_table


@pytest.fixture(scope="session")
def chord_table() -> ChordTable:
    return get_chord_table()
