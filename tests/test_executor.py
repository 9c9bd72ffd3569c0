import os

from mediarenamer.executor import execute_mappings, sort_files_first
from mediarenamer.models import RenameMapping, ReportStatus


def test_files_are_renamed_before_their_directory(memory_fs, media_root):
    show = memory_fs.add_dir(media_root, "Some.Show.2010")
    episode = memory_fs.add_file(show, "Pilot.WEBRip.mkv")
    new_show = os.path.join(media_root, "Some Show (2010)")
    mappings = [
        RenameMapping(show, new_show),
        RenameMapping(episode, os.path.join(show, "Pilot.mkv")),
    ]

    entries = execute_mappings(mappings, fs=memory_fs)

    assert [e.original_path for e in entries] == [episode, show]
    assert all(e.status is ReportStatus.SUCCESS for e in entries)
    assert memory_fs.is_file(os.path.join(new_show, "Pilot.mkv"))
    assert not memory_fs.is_dir(show)


def test_sort_is_stable_within_groups(memory_fs, media_root):
    dir_a = memory_fs.add_dir(media_root, "a")
    file_b = memory_fs.add_file(media_root, "b")
    dir_c = memory_fs.add_dir(media_root, "c")
    file_d = memory_fs.add_file(media_root, "d")
    missing = os.path.join(media_root, "gone")
    mappings = [RenameMapping(p, p + "x") for p in (dir_a, file_b, dir_c, missing, file_d)]

    ordered = sort_files_first(mappings, memory_fs)

    assert [m.original_path for m in ordered] == [file_b, missing, file_d, dir_a, dir_c]


def test_missing_source_fails_and_execution_continues(memory_fs, media_root):
    missing = os.path.join(media_root, "Gone.2001.mkv")
    present = memory_fs.add_file(media_root, "Heat.1995.mkv")
    target = os.path.join(media_root, "Heat (1995).mkv")

    entries = execute_mappings(
        [RenameMapping(missing, os.path.join(media_root, "Gone (2001).mkv")),
         RenameMapping(present, target)],
        fs=memory_fs,
    )

    assert entries[0].status is ReportStatus.FAILED
    assert entries[0].error_message == f"Path not found: {missing}"
    assert entries[1].status is ReportStatus.SUCCESS
    assert entries[1].error_message == ""
    assert memory_fs.is_file(target)


def test_move_error_message_is_captured(memory_fs, media_root):
    source = memory_fs.add_file(media_root, "Heat.1995.mkv")
    target = memory_fs.add_file(media_root, "Heat (1995).mkv")

    [entry] = execute_mappings([RenameMapping(source, target)], fs=memory_fs)

    assert entry.status is ReportStatus.FAILED
    assert entry.error_message == f"Destination already exists: {target}"
    assert entry.new_path == target
    assert memory_fs.is_file(source)


def test_local_rename(tmp_path):
    (tmp_path / "Heat.1995.mkv").write_text("data")
    folder = tmp_path / "Heat.1995"
    folder.mkdir()
    (folder / "Heat.1995.en.srt").write_text("subs")
    mappings = [
        RenameMapping(str(folder), str(tmp_path / "Heat (1995)")),
        RenameMapping(str(folder / "Heat.1995.en.srt"), str(folder / "Heat (1995).en.srt")),
        RenameMapping(str(tmp_path / "Heat.1995.mkv"), str(tmp_path / "Heat (1995).mkv")),
    ]

    entries = execute_mappings(mappings)

    assert all(e.success for e in entries)
    assert (tmp_path / "Heat (1995).mkv").read_text() == "data"
    assert (tmp_path / "Heat (1995)" / "Heat (1995).en.srt").read_text() == "subs"
