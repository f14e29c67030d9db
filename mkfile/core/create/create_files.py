from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Optional

from mkfile.core.clipboard.clipboard import ClipboardSink, NoOpClipboard
from mkfile.core.errors import DirectoryCreationError, FileCreationError
from mkfile.core.expand.brace import expand_token
from mkfile.core.model import BatchOutcome, CreationResult
from mkfile.core.notify.gntp_notifier import CREATE_EVENT, NotificationSink, NullNotifier


ResultCallback = Callable[[CreationResult], None]


def _absolute_path(p: Path, fallback: str) -> str:
    # Some virtual filesystems refuse to canonicalize; keep what the user typed.
    try:
        return str(p.resolve(strict=True))
    except (OSError, RuntimeError):
        return fallback


def create_empty_file(filepath: str) -> CreationResult:
    """Create (or truncate) `filepath` as an empty file, creating parent directories.

    OS errors are returned as a failed CreationResult. ValueError is treated the
    same way: it is what the OS layer raises for e.g. an embedded NUL byte.
    """
    p = Path(filepath)

    parent = p.parent
    if str(parent) not in (".", ""):
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except (OSError, ValueError) as e:
            return CreationResult.failed(
                filepath,
                DirectoryCreationError(
                    code="E_MKDIR",
                    message=f'Error creating directory for "{filepath}": {e}',
                    path=filepath,
                    detail=repr(e),
                ),
            )

    try:
        # Path() drops a trailing separator; open the string so "dir/" fails as a directory.
        with open(filepath, "wb"):
            pass
    except (OSError, ValueError) as e:
        return CreationResult.failed(
            filepath,
            FileCreationError(
                code="E_CREATE",
                message=f'Error creating file "{filepath}": {e}',
                path=filepath,
                detail=repr(e),
            ),
        )

    return CreationResult(path=filepath, succeeded=True, absolute_path=_absolute_path(p, filepath))


def expand_all(tokens: Iterable[str]) -> list[str]:
    paths: list[str] = []
    for token in tokens:
        paths.extend(expand_token(token))
    return paths


class BatchCreator:
    """Create every expanded path in order and tally the outcome.

    Failures never stop the batch. Clipboard and notification run only after a
    successful creation; their errors are attached as warnings.
    """

    def __init__(
        self,
        *,
        app_name: str = "mkfile",
        notifier: Optional[NotificationSink] = None,
        clipboard: Optional[ClipboardSink] = None,
        on_result: Optional[ResultCallback] = None,
    ) -> None:
        self.app_name = app_name
        self.notifier: NotificationSink = notifier or NullNotifier()
        self.clipboard: ClipboardSink = clipboard or NoOpClipboard()
        self.on_result = on_result

    def create(self, filepath: str) -> CreationResult:
        result = create_empty_file(filepath)
        if not result.succeeded:
            return result

        warnings: list[str] = []
        clip_err = self.clipboard.copy(result.absolute_path or filepath)
        if clip_err is not None:
            warnings.append(str(clip_err))

        note_err = self.notifier.notify(
            CREATE_EVENT, self.app_name, f'File created: "{Path(filepath).name or filepath}"'
        )
        if note_err is not None:
            warnings.append(str(note_err))

        if not warnings:
            return result
        return CreationResult(
            path=result.path,
            succeeded=True,
            absolute_path=result.absolute_path,
            warnings=tuple(warnings),
        )

    def create_all(self, tokens: Iterable[str]) -> tuple[list[CreationResult], BatchOutcome]:
        # Expand once: the total and the creation pass must agree.
        paths = expand_all(tokens)

        results: list[CreationResult] = []
        for filepath in paths:
            result = self.create(filepath)
            results.append(result)
            if self.on_result is not None:
                self.on_result(result)

        outcome = BatchOutcome(
            success_count=sum(1 for r in results if r.succeeded),
            total_count=len(paths),
        )
        return results, outcome
