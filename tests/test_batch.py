"""
Tests for recursive add/delete.
"""

import pytest

from fileheader.batch import add_headers_recursively, delete_headers_recursively
from fileheader.exceptions import HeaderIOError, TraversalError, UnrecognizedExtension


def _rel(paths, root):
    return sorted(p.relative_to(root).as_posix() for p in paths)


def _is_rs(p):
    return p.suffix == ".rs"


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "no_header.rs").write_text("// no header\n")
    (tmp_path / "with_header.rs").write_text("some license etc etc etc\n// has a header\n")
    # fails the path predicate
    (tmp_path / "ignored.txt").write_text("// no header\n")
    return tmp_path


class TestAddHeadersRecursively:
    def test_adds_where_needed(self, tree, header):
        assert _rel(add_headers_recursively(tree, _is_rs, header), tree) == ["no_header.rs"]
        assert (tree / "no_header.rs").read_text() == (
            "// some license etc etc etc\n\n// no header\n"
        )
        assert (tree / "ignored.txt").read_text() == "// no header\n"

    def test_second_run_changes_nothing(self, tree, header):
        add_headers_recursively(tree, _is_rs, header)
        assert add_headers_recursively(tree, _is_rs, header) == []

    def test_nested(self, tmp_path, header):
        (tmp_path / "a" / "b").mkdir(parents=True)
        (tmp_path / "a" / "b" / "x.py").write_text("x = 1\n")
        (tmp_path / "a" / "y.go").write_text("package y\n")
        assert _rel(add_headers_recursively(tmp_path, lambda p: True, header), tmp_path) == [
            "a/b/x.py",
            "a/y.go",
        ]

    def test_unknown_extension_aborts(self, tree, header):
        with pytest.raises(UnrecognizedExtension):
            add_headers_recursively(tree, lambda p: True, header)

    def test_failure_keeps_earlier_changes_and_stops(self, tmp_path, header):
        for name in ("a.py", "b.py", "c.py", "d.py", "e.py"):
            (tmp_path / name).write_text("x = 1\n")
        (tmp_path / "notes.zzz").write_text("hello\n")
        visited = []

        def recording(p):
            visited.append(p)
            return True

        with pytest.raises(UnrecognizedExtension) as exc_info:
            add_headers_recursively(tmp_path, recording, header)
        assert exc_info.value.path == visited[-1]
        assert visited[-1].name == "notes.zzz"
        # no rollback of files changed before the failure
        for p in visited[:-1]:
            assert p.read_text() == "# some license etc etc etc\n\nx = 1\n"
        # nothing after the failing path is attempted
        for p in tmp_path.glob("*.py"):
            if p not in visited:
                assert p.read_text() == "x = 1\n"

    def test_binary_file_aborts(self, tmp_path, header):
        (tmp_path / "blob.rs").write_bytes(b"\xff" * 10)
        with pytest.raises(HeaderIOError):
            add_headers_recursively(tmp_path, _is_rs, header)

    def test_missing_root(self, tmp_path, header):
        with pytest.raises(TraversalError):
            add_headers_recursively(tmp_path / "missing", _is_rs, header)


class TestDeleteHeadersRecursively:
    def test_round_trip(self, tree, header):
        original = {p: p.read_bytes() for p in tree.iterdir()}
        add_headers_recursively(tree, _is_rs, header)
        removed = delete_headers_recursively(tree, _is_rs, header)
        assert _rel(removed, tree) == ["no_header.rs"]
        assert {p: p.read_bytes() for p in tree.iterdir()} == original

    def test_header_not_in_generated_form_is_left(self, tree, header):
        # with_header.rs has the pattern but not the wrapped block
        assert delete_headers_recursively(tree, _is_rs, header) == []
        assert (tree / "with_header.rs").read_text().startswith("some license")

    def test_unknown_extension_aborts(self, tmp_path, header):
        (tmp_path / "a.zzz").write_text("some license\n")
        with pytest.raises(UnrecognizedExtension):
            delete_headers_recursively(tmp_path, lambda p: True, header)
