# src/review_diff/diff/aligner.py
import logging
from collections import deque
from collections.abc import Iterable
from review_diff.models.change import FileChange, ReviewComment
from review_diff.models.diff import DiffLine, DiffLineType, RowPair
from .parser import parse_diff_lines


logger = logging.getLogger(__name__)


def _drain(removals: deque[DiffLine], additions: deque[DiffLine], rows: list[RowPair]) -> None:
    """Pair pending removals with pending additions by arrival order."""
    while removals or additions:
        left = removals.popleft() if removals else None
        right = additions.popleft() if additions else None
        rows.append(RowPair(left=left, right=right))


def align_diff_lines(lines: Iterable[DiffLine]) -> list[RowPair]:
    """Group runs of removed/added lines into side-by-side rows.

    Context lines and hunk headers are mirrored to both columns. The k-th
    removal of a run shares a row with the k-th addition; the shorter run
    leaves the remaining cells empty.
    """
    rows: list[RowPair] = []
    removals: deque[DiffLine] = deque()
    additions: deque[DiffLine] = deque()

    for line in lines:
        if line.type == DiffLineType.REMOVED:
            removals.append(line)
        elif line.type == DiffLineType.ADDED:
            additions.append(line)
        else:
            _drain(removals, additions, rows)
            rows.append(RowPair(left=line, right=line))

    _drain(removals, additions, rows)
    return rows


def split_diff(raw_diff: str | None) -> list[RowPair]:
    """Parse and align the unified diff of a single file."""
    return align_diff_lines(parse_diff_lines(raw_diff))


def split_file_change(change: FileChange | None) -> list[RowPair]:
    if change is None or change.diff_content is None:
        return []
    rows = split_diff(change.diff_content)
    logger.debug(f"{change.file_path}: {len(rows)} side-by-side rows")
    return rows


def rows_for_comment(rows: Iterable[RowPair], comment: ReviewComment) -> list[int]:
    """Indices of rows whose new-file side falls inside the comment's line range."""
    return [
        index
        for index, row in enumerate(rows)
        if row.right is not None
        and row.right.new_line_number is not None
        and comment.covers(row.right.new_line_number)
    ]
