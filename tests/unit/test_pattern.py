import re

import pytest
from textglob import NonUtf8PathError, PatternCompileError
from textglob._pattern import compile_wildcard, decode_text, has_wildcards, translate


# ---------------------------------------------------------------------------
# has_wildcards
# ---------------------------------------------------------------------------

def test_has_wildcards_asterisk():
    assert has_wildcards("book*.mpc")


def test_has_wildcards_question_mark():
    assert has_wildcards("book?.mpc")


def test_has_wildcards_both():
    assert has_wildcards("book?_*.mpc")


def test_has_wildcards_none():
    assert not has_wildcards("book01.mpc")


def test_has_wildcards_brackets_are_not_wildcards():
    assert not has_wildcards("book[01].mpc")


def test_has_wildcards_accepts_bytes():
    assert has_wildcards(b"book*.mpc")


def test_has_wildcards_non_utf8_bytes_raises():
    with pytest.raises(NonUtf8PathError):
        has_wildcards(b"book\xff*.mpc")


# ---------------------------------------------------------------------------
# decode_text
# ---------------------------------------------------------------------------

def test_decode_text_passes_str_through():
    assert decode_text("caf\u00e9.txt") == "caf\u00e9.txt"


def test_decode_text_decodes_utf8_bytes():
    assert decode_text("caf\u00e9.txt".encode("utf-8")) == "caf\u00e9.txt"


def test_decode_text_rejects_surrogate_escaped_str():
    with pytest.raises(NonUtf8PathError) as excinfo:
        decode_text("bad\udcff.txt")
    assert excinfo.value.path == "bad\udcff.txt"


def test_decode_text_accepts_pathlike(tmp_path):
    assert decode_text(tmp_path) == str(tmp_path)


def test_non_utf8_error_is_oserror():
    with pytest.raises(OSError):
        decode_text(b"\xfe\xff")


# ---------------------------------------------------------------------------
# translate / compile_wildcard
# ---------------------------------------------------------------------------

def test_translate_is_anchored():
    assert translate("a*") == r"\Aa.*\Z"


def test_translate_escapes_dot():
    assert re.match(translate("a.txt"), "axtxt") is None


def test_star_matches_zero_or_more():
    matches = compile_wildcard("a*")
    assert matches("a")
    assert matches("ab")
    assert matches("abc")
    assert not matches("ba")


def test_question_mark_matches_exactly_one():
    matches = compile_wildcard("dummy?.fil")
    assert matches("dummy1.fil")
    assert not matches("dummy.fil")
    assert not matches("dummy12.fil")


def test_literal_dot_does_not_match_any_char():
    matches = compile_wildcard("a.t*")
    assert matches("a.txt")
    assert not matches("axtxt")


def test_regex_metacharacters_are_literal():
    matches = compile_wildcard("[ab]+(x)|y^$*")
    assert matches("[ab]+(x)|y^$")
    assert matches("[ab]+(x)|y^$tail")
    assert not matches("a")


def test_backslash_is_literal():
    assert compile_wildcard("a\\b*")("a\\bc")


def test_match_is_case_sensitive():
    matches = compile_wildcard("A*")
    assert matches("Abc")
    assert not matches("abc")


def test_star_spans_newlines():
    assert compile_wildcard("a*z")("a\nz")


def test_consecutive_stars():
    matches = compile_wildcard("**x")
    assert matches("x")
    assert matches("abcx")


def test_empty_pattern_matches_only_empty_name():
    matches = compile_wildcard("")
    assert matches("")
    assert not matches("a")


def test_compile_failure_raises_pattern_compile_error(monkeypatch):
    monkeypatch.setattr("textglob._pattern.translate", lambda pattern: "(")
    with pytest.raises(PatternCompileError) as excinfo:
        compile_wildcard("x*")
    assert excinfo.value.pattern == "x*"
    assert excinfo.value.message
