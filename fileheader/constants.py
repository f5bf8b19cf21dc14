"""Constants for the header composer."""

from fileheader.types import DelimiterSet

_C_BLOCK = DelimiterSet("/*", " * ", " */")
_JS_DOC = DelimiterSet("/**", " * ", " */")
_SLASHES = DelimiterSet("", "// ", "")
_HASH = DelimiterSet("", "# ", "")
_LISP = DelimiterSet("", ";; ", "")
_ERLANG = DelimiterSet("", "% ", "")
_DASHES = DelimiterSet("", "-- ", "")
_MARKUP = DelimiterSet("<!--", " ", "-->")
_OCAML = DelimiterSet("(**", "   ", "*)")

_BY_SYNTAX = {
    _C_BLOCK: ("c", "h", "gv", "java", "scala", "kt", "kts"),
    _JS_DOC: ("js", "mjs", "cjs", "jsx", "tsx", "css", "scss", "sass", "ts"),
    _SLASHES: (
        "cc", "cpp", "cs", "go", "hcl", "hh", "hpp", "m", "mm", "proto",
        "rs", "swift", "dart", "groovy", "v", "sv", "php",
    ),
    _HASH: (
        "py", "sh", "yaml", "yml", "dockerfile", "rb", "gemfile", "tcl",
        "tf", "bzl", "pl", "pp", "build",
    ),
    _LISP: ("el", "lisp"),
    _ERLANG: ("erl",),
    _DASHES: ("hs", "lua", "sql", "sdl"),
    _MARKUP: ("html", "xml", "vue", "wxi", "wxl", "wxs"),
    _OCAML: ("ml", "mli", "mll", "mly"),
}

# Extension (without the dot, case-sensitive) -> delimiters
DELIMITERS_BY_EXTENSION: dict[str, DelimiterSet] = {
    ext: delim for delim, exts in _BY_SYNTAX.items() for ext in exts
}

# Whole file names, consulted only when the extension is not known
DELIMITERS_BY_FILENAME: dict[str, DelimiterSet] = {
    "Dockerfile": _HASH,
}

# First lines that must stay first; the header goes right after them
MAGIC_FIRST_LINES = (
    "#!",                        # shell script
    "<?xml",                     # XML declaration
    "<!doctype",                 # HTML doctype
    "# encoding:",               # Ruby encoding
    "# frozen_string_literal:",  # Ruby interpreter instruction
    "<?php",                     # PHP opening tag
    "# escape",                  # Dockerfile parser directive
    "# syntax",                  # Dockerfile parser directive
)
