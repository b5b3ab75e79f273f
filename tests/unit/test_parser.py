# tests/unit/test_parser.py
import pytest
from review_diff.diff.parser import (
    parse_diff_lines,
    added_line_numbers,
    commentable_line_numbers,
)
from review_diff.models.diff import DiffLine, DiffLineType


pytestmark = pytest.mark.unit


PURE_ADDITION = "@@ -1,3 +1,4 @@\n import Foundation\n+import SwiftUI\n \n func main() {"

TWO_HUNKS = "\n".join([
    "@@ -1,3 +1,4 @@",
    " line 1",
    "+line 2",
    " line 3",
    "@@ -10,2 +11,3 @@",
    " line 10",
    "+line 11",
    " line 12",
])


@pytest.mark.parametrize("raw", [None, ""])
def test_parse_empty_input(raw):
    assert parse_diff_lines(raw) == []


def test_parse_pure_addition():
    lines = parse_diff_lines(PURE_ADDITION)

    assert [line.type for line in lines] == [
        DiffLineType.HUNK_HEADER,
        DiffLineType.CONTEXT,
        DiffLineType.ADDED,
        DiffLineType.CONTEXT,
        DiffLineType.CONTEXT,
    ]
    assert [(line.old_line_number, line.new_line_number) for line in lines] == [
        (None, None),
        (1, 1),
        (None, 2),
        (2, 3),
        (3, 4),
    ]
    assert lines[0].content == "@@ -1,3 +1,4 @@"
    assert lines[2].content == "import SwiftUI"
    assert lines[3].content == ""


def test_parse_removed_line():
    lines = parse_diff_lines("@@ -4,2 +4,1 @@\n keep\n-drop me")

    removed = lines[-1]
    assert removed == DiffLine(old_line_number=5, content="drop me", type=DiffLineType.REMOVED)


def test_hunk_header_resets_counters():
    lines = parse_diff_lines("@@ -7,2 +20,2 @@ def handler():\n-old\n+new")

    assert lines[0].content == "@@ -7,2 +20,2 @@ def handler():"
    assert lines[1].old_line_number == 7
    assert lines[2].new_line_number == 20


def test_hunk_header_without_counts():
    lines = parse_diff_lines("@@ -3 +5 @@\n-a\n+b")

    assert lines[1].old_line_number == 3
    assert lines[2].new_line_number == 5


def test_two_hunks_number_independently():
    lines = parse_diff_lines(TWO_HUNKS)

    context = [(l.content, l.old_line_number, l.new_line_number)
               for l in lines if l.type == DiffLineType.CONTEXT]
    assert context == [
        ("line 1", 1, 1),
        ("line 3", 2, 3),
        ("line 10", 10, 11),
        ("line 12", 11, 13),
    ]
    assert added_line_numbers(lines) == [2, 12]


def test_file_headers_are_dropped():
    raw = "\n".join([
        "diff --git a/x.py b/x.py",
        "index 83db48f..bf269f4 100644",
        "--- a/x.py",
        "+++ b/x.py",
    ])
    assert parse_diff_lines(raw) == []


def test_no_newline_marker_is_dropped():
    lines = parse_diff_lines("@@ -1 +1 @@\n-a\n\\ No newline at end of file\n+b")

    assert [line.type for line in lines] == [
        DiffLineType.HUNK_HEADER,
        DiffLineType.REMOVED,
        DiffLineType.ADDED,
    ]


def test_malformed_hunk_header_is_skipped():
    lines = parse_diff_lines("@@ -5,2 +7,2 @@\n x\n@@ garbage @@\n y")

    assert [l.content for l in lines] == ["@@ -5,2 +7,2 @@", "x", "y"]
    # counters carry on as if the bad header was not there
    assert (lines[2].old_line_number, lines[2].new_line_number) == (6, 8)


def test_unprefixed_lines_fall_back_to_context():
    lines = parse_diff_lines("new file mode 100644\n@@ -1 +1 @@\nplain text")

    assert lines[0].type == DiffLineType.CONTEXT
    assert lines[0].content == "new file mode 100644"
    assert (lines[0].old_line_number, lines[0].new_line_number) == (1, 1)
    assert lines[2].content == "plain text"
    assert (lines[2].old_line_number, lines[2].new_line_number) == (1, 1)


def test_trailing_newline_yields_blank_context_line():
    lines = parse_diff_lines("@@ -1 +1 @@\n x\n")

    assert lines[-1] == DiffLine(
        old_line_number=2,
        new_line_number=2,
        content="",
        type=DiffLineType.CONTEXT,
    )


def test_removed_line_that_looks_like_file_header_is_dropped():
    # "-- comment" removed renders as "--- comment"
    lines = parse_diff_lines("@@ -1,2 +1,1 @@\n--- comment\n keep")

    assert [l.content for l in lines] == ["@@ -1,2 +1,1 @@", "keep"]
    assert lines[1].old_line_number == 1


def test_hunk_header_never_has_line_numbers():
    for line in parse_diff_lines(TWO_HUNKS):
        if line.type == DiffLineType.HUNK_HEADER:
            assert line.old_line_number is None
            assert line.new_line_number is None


def test_commentable_line_numbers():
    lines = parse_diff_lines("@@ -1,3 +1,3 @@\n a\n-b\n+B\n c")

    assert commentable_line_numbers(lines) == [1, 2, 3]
    assert added_line_numbers(lines) == [2]
