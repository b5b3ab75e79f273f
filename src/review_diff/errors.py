class DiffError(Exception):
    """Base class for errors raised by review_diff."""


class PatchSplitError(DiffError):
    """Raised when a multi-file patch cannot be split into per-file diffs.

    Attributes:
        message: Explanation of the error
        line: The offending patch line (if known)
    """

    def __init__(self, message: str, line: str | None = None):
        self.message = message
        self.line = line

        full_message = message
        if line is not None:
            full_message = f"{message} (line: {line!r})"
        super().__init__(full_message)
