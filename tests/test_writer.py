"""Tests for sk_gen.writer."""

from __future__ import annotations

from pathlib import Path

import pytest

from sk_gen.errors import IOFailure
from sk_gen.writer import ScriptFileWriter


def test_new_file_is_staged_then_committed(tmp_path: Path) -> None:
    writer = ScriptFileWriter()
    target = tmp_path / "Object" / "Entity" / "jump().sk"

    assert writer.write_if_changed(target, "() Boolean\n")
    assert not target.exists()
    assert (tmp_path / "Object" / "Entity" / "jump().sk.tmp").read_text() == "() Boolean\n"

    assert writer.commit() == 1
    assert target.read_text() == "() Boolean\n"
    assert not (tmp_path / "Object" / "Entity" / "jump().sk.tmp").exists()
    assert writer.pending == {}


def test_unchanged_file_is_not_staged(tmp_path: Path) -> None:
    target = tmp_path / "walk().sk"
    target.write_bytes(b"() Real\n")
    before = target.stat().st_mtime_ns

    writer = ScriptFileWriter()
    assert not writer.write_if_changed(target, "() Real\n")
    assert not (tmp_path / "walk().sk.tmp").exists()

    assert writer.commit() == 0
    assert target.read_bytes() == b"() Real\n"
    assert target.stat().st_mtime_ns == before


def test_second_identical_write_after_commit_is_a_no_op(tmp_path: Path) -> None:
    writer = ScriptFileWriter()
    target = tmp_path / "run().sk"

    assert writer.write_if_changed(target, "v1")
    writer.commit()
    assert not writer.write_if_changed(target, "v1")
    assert writer.pending == {}


def test_changed_file_keeps_original_until_commit(tmp_path: Path) -> None:
    target = tmp_path / "run().sk"
    target.write_text("old")

    writer = ScriptFileWriter()
    assert writer.write_if_changed(target, "new")
    assert target.read_text() == "old"

    writer.commit()
    assert target.read_text() == "new"


def test_restaging_replaces_stale_temp_file(tmp_path: Path) -> None:
    target = tmp_path / "run().sk"
    temp = tmp_path / "run().sk.tmp"
    temp.write_text("left over from a crashed run")

    writer = ScriptFileWriter()
    assert writer.write_if_changed(target, "first")
    assert temp.read_text() == "first"
    assert writer.write_if_changed(target, "second")
    assert temp.read_text() == "second"
    assert not writer.write_if_changed(target, "second")

    writer.commit()
    assert target.read_text() == "second"


def test_reverting_to_disk_content_unstages(tmp_path: Path) -> None:
    target = tmp_path / "run().sk"
    target.write_text("same")

    writer = ScriptFileWriter()
    assert writer.write_if_changed(target, "different")
    assert not writer.write_if_changed(target, "same")
    assert not (tmp_path / "run().sk.tmp").exists()
    assert writer.commit() == 0
    assert target.read_text() == "same"


def test_empty_content_creates_empty_file(tmp_path: Path) -> None:
    writer = ScriptFileWriter()
    target = tmp_path / "empty().sk"
    assert writer.write_if_changed(target, "")
    writer.commit()
    assert target.read_bytes() == b""


def test_custom_temp_suffix(tmp_path: Path) -> None:
    writer = ScriptFileWriter(temp_suffix=".staged")
    target = tmp_path / "run().sk"
    writer.write_if_changed(target, "x")
    assert writer.pending == {target: tmp_path / "run().sk.staged"}


def test_staging_failure_raises_io_failure(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    writer = ScriptFileWriter()
    with pytest.raises(IOFailure) as excinfo:
        writer.write_if_changed(blocker / "run().sk", "x")
    assert "run().sk" in excinfo.value.path


def test_commit_failure_raises_io_failure(tmp_path: Path) -> None:
    writer = ScriptFileWriter()
    target = tmp_path / "run().sk"
    writer.write_if_changed(target, "x")
    (tmp_path / "run().sk.tmp").unlink()

    with pytest.raises(IOFailure):
        writer.commit()
