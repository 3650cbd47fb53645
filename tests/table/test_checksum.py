import tempfile
from pathlib import Path

import pytest

from voicings.table.checksum import compute_checksum


def test_compute_checksum() -> None:
    checksum = compute_checksum(b"abc123")
    assert (
        checksum == "6ca13d52ca70c883e0f0bb101e425a89e8624de51db2d2392593af6a84118090"
    )

    with pytest.raises(ValueError) as exc:
        compute_checksum(b"abc123", algorithm="x")
    assert str(exc.value) == "Unknown algorithm"


def test_compute_checksum_for_dict() -> None:
    # key order does not matter for dictionaries
    a = compute_checksum({"C": {"root": [48, 52, 55]}, "D": {"root": [50, 54, 57]}})
    b = compute_checksum({"D": {"root": [50, 54, 57]}, "C": {"root": [48, 52, 55]}})
    assert a == b
    assert a != compute_checksum({"C": {"root": [48, 51, 55]}})


def test_compute_checksum_for_path() -> None:
    with tempfile.TemporaryDirectory() as tmp_dir:
        tmp_path = Path(tmp_dir)
        text_file = tmp_path / "test.txt"
        text_file.write_text("hello world")

        checksum = compute_checksum(text_file)
        assert (
            checksum
            == "b94d27b9934d3e08a52e52d7da7dabfac484efe37a5380ee9088f7ace2efcde9"
        )
        # small chunks give the same result
        assert compute_checksum(text_file, chunk_size=3) == checksum
        assert compute_checksum(text_file.read_bytes()) == checksum

        with pytest.raises(FileNotFoundError):
            compute_checksum(tmp_path / "missing.txt")
