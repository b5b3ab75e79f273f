from enum import Enum
from pydantic import BaseModel, ConfigDict, model_validator


class DiffLineType(str, Enum):
    ADDED = "added"
    REMOVED = "removed"
    CONTEXT = "context"
    HUNK_HEADER = "hunk_header"


class DiffLine(BaseModel):
    """One classified line of a single-file unified diff."""
    model_config = ConfigDict(frozen=True)

    old_line_number: int | None = None
    new_line_number: int | None = None
    content: str
    type: DiffLineType


class RowPair(BaseModel):
    """One row of the side-by-side view: old side on the left, new side on the right."""
    model_config = ConfigDict(frozen=True)

    left: DiffLine | None = None
    right: DiffLine | None = None

    @model_validator(mode="after")
    def check_sides(self):
        if self.left is None and self.right is None:
            raise ValueError("RowPair needs at least one side")
        return self

    @property
    def is_mirrored(self) -> bool:
        return (
            self.left is not None
            and self.left == self.right
            and self.left.type in (DiffLineType.CONTEXT, DiffLineType.HUNK_HEADER)
        )

    @property
    def is_change(self) -> bool:
        changed = (DiffLineType.ADDED, DiffLineType.REMOVED)
        return any(side is not None and side.type in changed for side in (self.left, self.right))
