"""Tests for infrastructure/adapters/files.py."""

from pathlib import Path

from wiregen.infrastructure.adapters.files import atomic_write_text


class TestAtomicWriteText:
    """Tests for atomic_write_text()."""

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b" / "out.py"

        atomic_write_text(target, "x = 1\n")

        assert target.read_text(encoding="utf-8") == "x = 1\n"

    def test_replaces_existing_content(self, tmp_path: Path) -> None:
        target = tmp_path / "out.py"
        target.write_text("old\n", encoding="utf-8")

        atomic_write_text(target, "new\n")

        assert target.read_text(encoding="utf-8") == "new\n"

    def test_no_temp_files_left(self, tmp_path: Path) -> None:
        atomic_write_text(tmp_path / "out.py", "x\n")

        assert [p.name for p in tmp_path.iterdir()] == ["out.py"]

    def test_newlines_not_translated(self, tmp_path: Path) -> None:
        target = tmp_path / "out.py"

        atomic_write_text(target, "a\nb\n")

        assert target.read_bytes() == b"a\nb\n"
