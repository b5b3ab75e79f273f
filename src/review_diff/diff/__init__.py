from .parser import parse_diff_lines, added_line_numbers, commentable_line_numbers
from .aligner import align_diff_lines, split_diff, split_file_change, rows_for_comment
from .patch import split_patch

__all__ = [
    "parse_diff_lines",
    "added_line_numbers",
    "commentable_line_numbers",
    "align_diff_lines",
    "split_diff",
    "split_file_change",
    "rows_for_comment",
    "split_patch",
]
