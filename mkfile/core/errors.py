from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MkfileError(Exception):
    """Base error envelope. Prefer returning/recording these rather than raising raw exceptions."""

    code: str
    message: str
    path: Optional[str] = None
    detail: Optional[str] = None

    def __str__(self) -> str:
        loc = self.path if self.path else "<mkfile>"
        return f"{loc}: {self.code}: {self.message}"


class DirectoryCreationError(MkfileError):
    pass


class FileCreationError(MkfileError):
    pass


class NotificationError(MkfileError):
    pass


class ClipboardError(MkfileError):
    pass
