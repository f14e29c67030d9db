from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from mkfile.core.errors import MkfileError


@dataclass(frozen=True)
class BraceGroup:
    prefix: str
    items_text: str
    suffix: str


@dataclass(frozen=True)
class CreationResult:
    path: str
    succeeded: bool
    error_detail: Optional[str] = None

    absolute_path: Optional[str] = None
    error: Optional[MkfileError] = None
    # Collaborator (clipboard/notification) failures; never affect `succeeded`.
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def failed(cls, path: str, error: MkfileError) -> "CreationResult":
        return cls(path=path, succeeded=False, error_detail=error.message, error=error)


@dataclass(frozen=True)
class BatchOutcome:
    success_count: int
    total_count: int

    @property
    def ok(self) -> bool:
        return self.success_count == self.total_count

    def summary(self) -> str:
        return f"{self.success_count}/{self.total_count} file(s) created successfully"
