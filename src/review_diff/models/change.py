from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, model_validator


class GitStatus(str, Enum):
    ADDED = "A"
    MODIFIED = "M"
    DELETED = "D"
    RENAMED = "R"
    COPIED = "C"
    UNMERGED = "U"
    UNKNOWN = "?"

    @classmethod
    def from_code(cls, code: str) -> "GitStatus":
        """Map a git name-status code such as ``M`` or ``R100`` to a status."""
        try:
            return cls(code.strip()[:1].upper())
        except ValueError:
            return cls.UNKNOWN


class FileChange(BaseModel):
    model_config = ConfigDict(frozen=True)

    file_path: str
    status: GitStatus
    diff_content: str | None = None


class ReviewComment(BaseModel):
    """Comment anchored to a line range of the NEW file."""
    model_config = ConfigDict(frozen=True)

    file_path: str
    start_line: int = Field(ge=1)
    end_line: int | None = None
    text: str

    @model_validator(mode="after")
    def check_range(self):
        if self.end_line is not None and self.end_line < self.start_line:
            raise ValueError("end_line must not precede start_line")
        return self

    def covers(self, line: int) -> bool:
        last = self.end_line if self.end_line is not None else self.start_line
        return self.start_line <= line <= last
