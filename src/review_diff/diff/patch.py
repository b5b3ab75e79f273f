# src/review_diff/diff/patch.py
import logging
from unidiff import PatchSet, PatchedFile
from unidiff.errors import UnidiffParseError
from review_diff.errors import PatchSplitError
from review_diff.models.change import FileChange, GitStatus


logger = logging.getLogger(__name__)


def _file_status(patched_file: PatchedFile) -> GitStatus:
    if patched_file.is_added_file:
        return GitStatus.ADDED
    if patched_file.is_removed_file:
        return GitStatus.DELETED
    if patched_file.is_rename:
        return GitStatus.RENAMED
    return GitStatus.MODIFIED


def _hunks_text(patched_file: PatchedFile) -> str | None:
    """Hunks of one file without its header, as the single-file parser expects."""
    if len(patched_file) == 0:
        return None
    text = "".join(str(hunk) for hunk in patched_file)
    # Drop the final terminator so it does not read as an extra blank context line
    if text.endswith("\n"):
        text = text[:-1]
    return text


def split_patch(diff_text: str) -> list[FileChange]:
    """Split a multi-file unified diff into one FileChange per file."""
    if not diff_text.strip():
        return []

    try:
        patch = PatchSet(diff_text)
    except UnidiffParseError as e:
        raise PatchSplitError(f"Failed to parse diff content: {e}") from e

    changes = []
    for patched_file in patch:
        changes.append(FileChange(
            file_path=patched_file.path,
            status=_file_status(patched_file),
            diff_content=_hunks_text(patched_file),
        ))

    logger.info(f"Split patch into {len(changes)} file(s)")
    return changes
