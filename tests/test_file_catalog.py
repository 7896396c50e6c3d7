import os

import pytest

from size_encoder.services.file_catalog import find_entry, list_input_files


def test_empty_directory_yields_no_entries(tmp_path):
    assert list_input_files(str(tmp_path)) == []


def test_indices_are_one_to_n_in_listing_order(tmp_path):
    for name in ("b.mkv", "a.mp4", "notes.txt", "c.avi"):
        (tmp_path / name).write_bytes(b"x")

    entries = list_input_files(str(tmp_path))

    assert [e.index for e in entries] == [1, 2, 3, 4]
    assert [e.file_name for e in entries] == [n for n in os.listdir(tmp_path)]
    for entry in entries:
        assert entry.path == os.path.join(str(tmp_path), entry.file_name)


def test_subdirectories_are_not_offered(tmp_path):
    (tmp_path / "clip.mp4").write_bytes(b"x")
    (tmp_path / "nested").mkdir()

    entries = list_input_files(str(tmp_path))

    assert [e.file_name for e in entries] == ["clip.mp4"]
    assert entries[0].index == 1


def test_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        list_input_files(str(tmp_path / "missing"))


def test_find_entry(tmp_path):
    (tmp_path / "clip.mp4").write_bytes(b"x")
    entries = list_input_files(str(tmp_path))

    assert find_entry(entries, 1).file_name == "clip.mp4"
    assert find_entry(entries, 0) is None
    assert find_entry(entries, 2) is None
