# src/review_diff/diff/parser.py
import re
import logging
from collections import Counter
from collections.abc import Iterable
from review_diff.models.diff import DiffLine, DiffLineType


logger = logging.getLogger(__name__)

HUNK_HEADER_RE = re.compile(r"^@@\s+-(\d+)(?:,\d+)?\s+\+(\d+)(?:,\d+)?\s+@@")

# Lines that belong to the file header or carry no content of their own
SKIPPED_PREFIXES = ("diff --git", "index ", "+++", "---", "\\")


def parse_diff_lines(raw_diff: str | None) -> list[DiffLine]:
    """Classify every line of a single-file unified diff.

    Never raises: lines that match nothing else are treated as context.
    Old/new counters start at 1 and are reset by each hunk header.
    """
    if not raw_diff:
        return []

    old_line = 1
    new_line = 1
    parsed: list[DiffLine] = []

    for line in raw_diff.split("\n"):
        if line.startswith("@@"):
            match = HUNK_HEADER_RE.match(line)
            if not match:
                logger.debug(f"Skipping malformed hunk header: {line!r}")
                continue
            old_line = int(match.group(1))
            new_line = int(match.group(2))
            parsed.append(DiffLine(content=line, type=DiffLineType.HUNK_HEADER))
        elif line.startswith("+") and not line.startswith("+++"):
            parsed.append(DiffLine(
                new_line_number=new_line,
                content=line[1:],
                type=DiffLineType.ADDED,
            ))
            new_line += 1
        elif line.startswith("-") and not line.startswith("---"):
            parsed.append(DiffLine(
                old_line_number=old_line,
                content=line[1:],
                type=DiffLineType.REMOVED,
            ))
            old_line += 1
        elif line.startswith(SKIPPED_PREFIXES):
            continue
        else:
            parsed.append(DiffLine(
                old_line_number=old_line,
                new_line_number=new_line,
                content=line[1:] if line.startswith(" ") else line,
                type=DiffLineType.CONTEXT,
            ))
            old_line += 1
            new_line += 1

    counts = Counter(line.type.value for line in parsed)
    logger.debug(f"Parsed {len(parsed)} diff lines: {dict(counts)}")
    return parsed


def added_line_numbers(lines: Iterable[DiffLine]) -> list[int]:
    """New-file line numbers of added lines, in diff order."""
    return [
        line.new_line_number
        for line in lines
        if line.type == DiffLineType.ADDED and line.new_line_number is not None
    ]


def commentable_line_numbers(lines: Iterable[DiffLine]) -> list[int]:
    """New-file line numbers a review comment can be anchored to."""
    anchored = (DiffLineType.ADDED, DiffLineType.CONTEXT)
    return [
        line.new_line_number
        for line in lines
        if line.type in anchored and line.new_line_number is not None
    ]
