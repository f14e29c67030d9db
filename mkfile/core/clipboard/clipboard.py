from __future__ import annotations

import os
import subprocess
import sys
from typing import Optional, Protocol

from mkfile.core.errors import ClipboardError


class ClipboardSink(Protocol):
    def copy(self, text: str) -> Optional[ClipboardError]: ...


class NoOpClipboard:
    name = "noop"

    def copy(self, text: str) -> Optional[ClipboardError]:
        return None


class CommandClipboard:
    """Pipe text into a platform clipboard command."""

    name = "command"
    command: tuple[str, ...] = ()

    def __init__(self, timeout_s: float = 5.0) -> None:
        self.timeout_s = timeout_s

    def copy(self, text: str) -> Optional[ClipboardError]:
        # xclip forks to own the selection; its child must not inherit our pipes.
        try:
            subprocess.run(
                list(self.command),
                input=os.fsencode(text),
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=self.timeout_s,
                check=True,
            )
        except (OSError, ValueError, subprocess.SubprocessError) as e:
            return ClipboardError(
                code="E_CLIPBOARD",
                message=f"{self.name} clipboard copy failed: {e}",
                path=text,
                detail=repr(e),
            )
        return None


class WindowsClipboard(CommandClipboard):
    name = "windows"
    command = ("clip",)


class MacOSClipboard(CommandClipboard):
    name = "macos"
    command = ("pbcopy",)


class LinuxClipboard(CommandClipboard):
    name = "linux"
    command = ("xclip", "-selection", "clipboard")


def select_clipboard(platform: str | None = None, enabled: bool = True) -> ClipboardSink:
    if not enabled:
        return NoOpClipboard()

    plat = platform or sys.platform
    if plat.startswith("win"):
        return WindowsClipboard()
    if plat == "darwin":
        return MacOSClipboard()
    if plat.startswith("linux"):
        return LinuxClipboard()
    return NoOpClipboard()
