"""
Tests for comment wrapping, delimiter lookup and magic first lines.
"""

import pytest

from fileheader.composer import header_delimiters, split_magic_line, wrap_header
from fileheader.constants import MAGIC_FIRST_LINES
from fileheader.types import DelimiterSet


# ─── wrap_header ────────────────────────────────────────────────────


class TestWrapHeader:
    def test_block_comment(self):
        assert wrap_header("L1\nL2", header_delimiters("x.c")) == "/*\n * L1\n * L2\n */\n"

    def test_line_comment(self):
        assert wrap_header("L1\nL2", header_delimiters("x.py")) == "# L1\n# L2\n"

    def test_blank_line_is_trimmed(self):
        delim = DelimiterSet("/*", " * ", "*/")
        assert wrap_header("a\n\nb", delim) == "/*\n * a\n *\n * b\n*/\n"

    def test_trailing_whitespace_and_tabs_are_trimmed(self):
        delim = DelimiterSet("", "// ", "")
        assert wrap_header("a  \t\n", delim) == "// a\n//\n"

    def test_markup(self):
        assert wrap_header("lic", header_delimiters("x.xml")) == "<!--\n lic\n-->\n"

    def test_ocaml(self):
        assert wrap_header("lic", header_delimiters("x.ml")) == "(**\n   lic\n*)\n"

    def test_leading_whitespace_kept(self):
        delim = DelimiterSet("", "# ", "")
        assert wrap_header("    indented", delim) == "#     indented\n"


# ─── header_delimiters ──────────────────────────────────────────────


class TestHeaderDelimiters:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("a.c", ("/*", " * ", " */")),
            ("a.kts", ("/*", " * ", " */")),
            ("a.ts", ("/**", " * ", " */")),
            ("a.scss", ("/**", " * ", " */")),
            ("a.rs", ("", "// ", "")),
            ("a.php", ("", "// ", "")),
            ("a.sv", ("", "// ", "")),
            ("a.py", ("", "# ", "")),
            ("BUILD.build", ("", "# ", "")),
            ("a.tf", ("", "# ", "")),
            ("a.el", ("", ";; ", "")),
            ("a.erl", ("", "% ", "")),
            ("a.sql", ("", "-- ", "")),
            ("a.wxs", ("<!--", " ", "-->")),
            ("a.mly", ("(**", "   ", "*)")),
            ("Dockerfile", ("", "# ", "")),
            ("dir/sub/Dockerfile", ("", "# ", "")),
        ],
    )
    def test_known_syntaxes(self, name, expected):
        d = header_delimiters(name)
        assert (d.first_line, d.content_line_prefix, d.last_line) == expected

    def test_unknown_extension(self):
        assert header_delimiters("a.zzz") is None

    def test_no_extension(self):
        assert header_delimiters("Makefile") is None

    def test_extension_is_case_sensitive(self):
        assert header_delimiters("a.PY") is None

    def test_filename_only_matches_exactly(self):
        assert header_delimiters("dockerfile") is None

    def test_extension_wins_over_filename(self):
        assert header_delimiters("Dockerfile.c").first_line == "/*"


# ─── split_magic_line ───────────────────────────────────────────────


class TestSplitMagicLine:
    def test_shebang(self):
        assert split_magic_line("#!/bin/sh\necho hi\n") == ("#!/bin/sh\n", "echo hi\n")

    def test_xml_declaration(self):
        magic, rest = split_magic_line('<?xml version="1.0"?>\n<root />\n')
        assert magic == '<?xml version="1.0"?>\n'
        assert rest == "<root />\n"

    @pytest.mark.parametrize("marker", MAGIC_FIRST_LINES)
    def test_every_marker(self, marker):
        assert split_magic_line(f"{marker} x\nbody") == (f"{marker} x\n", "body")

    def test_marker_anywhere_in_first_line(self):
        assert split_magic_line("  #!weird\nbody")[0] == "  #!weird\n"

    def test_marker_on_second_line_ignored(self):
        assert split_magic_line("plain\n#!/bin/sh\n") == ("", "plain\n#!/bin/sh\n")

    def test_single_line_without_newline(self):
        assert split_magic_line("#!/bin/sh") == ("", "#!/bin/sh")

    def test_doctype_is_case_sensitive(self):
        assert split_magic_line("<!DOCTYPE html>\n") == ("", "<!DOCTYPE html>\n")
