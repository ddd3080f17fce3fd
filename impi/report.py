"""
Run report models (serialized by the CLI in JSON mode).
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, computed_field

from .model import Violation


class ViolationModel(BaseModel):
    line: int
    path: str
    message: str

    @classmethod
    def from_violation(cls, v: Violation) -> ViolationModel:
        return cls(line=v.line, path=v.path, message=v.message)


class FileReport(BaseModel):
    path: str
    ok: bool
    violations: List[ViolationModel] = Field(default_factory=list)
    error: Optional[str] = None

    def lines(self) -> List[str]:
        """Text output: one `path:message` line per finding."""
        if self.error is not None:
            return [f"{self.path}:{self.error}"]
        return [f"{self.path}:{v.message}" for v in self.violations]


class RunReport(BaseModel):
    files: List[FileReport] = Field(default_factory=list)

    @computed_field
    @property
    def checked(self) -> int:
        return len(self.files)

    @computed_field
    @property
    def failed(self) -> int:
        return sum(1 for f in self.files if not f.ok)


__all__ = ["ViolationModel", "FileReport", "RunReport"]
