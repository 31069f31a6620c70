"""Tests for the pattern classifier."""

import logging

import pytest

from configgen.classifier import check_syntax, classify, compile_patterns, first_match
from configgen.errors import PatternMatchError

PATHS = [
    "/code/a.go",
    "/code/vendor/x.go",
    "/code/a_test.go",
    "/code/pkg/b_test.go",
    "/code/docs/guide/intro.md",
]


# --- Matching semantics ---


def test_empty_patterns_keep_everything():
    result = classify("/code", PATHS, [])
    assert list(result.kept) == PATHS
    assert result.matched == ()


def test_recursive_glob_matches_nested_files():
    result = classify("/code", PATHS, ["vendor/**"])
    assert list(result.matched) == ["/code/vendor/x.go"]


def test_single_star_stays_within_segment():
    result = classify("/code", PATHS, ["*_test.go"])
    assert list(result.matched) == ["/code/a_test.go"]
    assert "/code/pkg/b_test.go" in result.kept


def test_double_star_matches_zero_or_more_segments():
    result = classify("/code", PATHS, ["**/*_test.go"])
    assert list(result.matched) == ["/code/a_test.go", "/code/pkg/b_test.go"]

    result = classify("/code", ["/code/docs/a.md", "/code/docs/x/y/b.md"], ["docs/**/*.md"])
    assert list(result.matched) == ["/code/docs/a.md", "/code/docs/x/y/b.md"]


def test_question_mark_and_bracket_class():
    paths = ["/code/src/a.py", "/code/src/ab.py", "/code/b.py", "/code/c.py"]
    assert list(classify("/code", paths, ["src/?.py"]).matched) == ["/code/src/a.py"]
    assert list(classify("/code", paths, ["[ab].py"]).matched) == ["/code/b.py"]


def test_leading_slash_does_not_escape_mount():
    result = classify("/code", PATHS, ["/vendor/**"])
    assert list(result.matched) == ["/code/vendor/x.go"]


# --- Partition invariants ---


def test_partition_is_complete_and_disjoint():
    result = classify("/code", PATHS, ["vendor/**", "**/*.md"])
    assert set(result.kept) | set(result.matched) == set(PATHS)
    assert not set(result.kept) & set(result.matched)
    assert len(result.kept) + len(result.matched) == len(PATHS)


def test_outputs_preserve_input_order():
    paths = list(reversed(PATHS))
    result = classify("/code", paths, ["**/*_test.go", "vendor/**"])
    assert list(result.matched) == [p for p in paths if p in result.matched]
    assert list(result.kept) == [p for p in paths if p in result.kept]


def test_path_matched_once_by_overlapping_patterns():
    result = classify("/code", PATHS, ["**/*.go", "vendor/**"])
    assert list(result.matched).count("/code/vendor/x.go") == 1


def test_first_match_wins():
    compiled = compile_patterns("/code", ["**/*.go", "vendor/**"])
    match = first_match("/code/vendor/x.go", compiled)
    assert match.pattern == "**/*.go"
    assert first_match("/code/docs/guide/intro.md", compiled) is None


# --- Segment boundaries ---

NESTED = ["/code/a.go", "/code/vendor/x.go", "/code/vendor/sub/y.go"]


def test_bare_star_matches_top_level_files_only():
    result = classify("/code", NESTED, ["*"])
    assert list(result.matched) == ["/code/a.go"]


def test_dir_star_does_not_descend():
    result = classify("/code", NESTED, ["vendor/*"])
    assert list(result.matched) == ["/code/vendor/x.go"]
    assert "/code/vendor/sub/y.go" in result.kept


def test_bare_directory_does_not_cover_its_files():
    result = classify("/code", NESTED, ["vendor"])
    assert result.matched == ()


def test_empty_pattern_matches_no_files():
    result = classify("/code", NESTED, [""])
    assert list(result.kept) == NESTED


def test_star_matches_dotfiles():
    result = classify("/code", ["/code/.deepsource.toml", "/code/.github/ci.yml"], ["*", ".github/**"])
    assert list(result.matched) == ["/code/.deepsource.toml", "/code/.github/ci.yml"]


def test_brace_alternatives():
    paths = ["/code/a.go", "/code/a.py", "/code/a.rs"]
    assert list(classify("/code", paths, ["*.{go,py}"]).matched) == ["/code/a.go", "/code/a.py"]


# --- Invalid patterns ---


def test_unclosed_bracket_keeps_path():
    result = classify("/code", ["/code/a[.go", "/code/a.go"], ["a[.go"])
    assert list(result.kept) == ["/code/a[.go", "/code/a.go"]


def test_trailing_escape_keeps_path():
    result = classify("/code", ["/code/a.go"], ["foo\\"])
    assert list(result.kept) == ["/code/a.go"]


def test_invalid_pattern_is_skipped_and_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="configgen.classifier"):
        result = classify("/code", PATHS, ["vendor/[", "vendor/**"])

    assert list(result.matched) == ["/code/vendor/x.go"]
    assert "/code/a.go" in result.kept
    assert "vendor/[" in caplog.text


def test_compile_patterns_keeps_invalid_entries_in_place():
    compiled = compile_patterns("/code", ["a[.go", "*.go", "{x,y"])
    assert [c.pattern for c in compiled] == ["a[.go", "*.go", "{x,y"]
    assert [c.valid for c in compiled] == [False, True, False]
    assert compiled[1].glob == "/code/*.go"
    assert not compiled[0].matches("/code/a[.go")


def test_check_syntax():
    check_syntax("/code/[ab].go")
    check_syntax("/code/[]].go")
    check_syntax("/code/\\[literal")
    check_syntax("/code/*.{go,py}")
    for bad in ["/code/[ab", "/code/x\\", "/code/{a,b", "/code/a}"]:
        with pytest.raises(PatternMatchError):
            check_syntax(bad)
