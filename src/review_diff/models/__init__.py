from .diff import DiffLine, DiffLineType, RowPair
from .change import FileChange, GitStatus, ReviewComment

__all__ = [
    "DiffLine",
    "DiffLineType",
    "RowPair",
    "FileChange",
    "GitStatus",
    "ReviewComment",
]
