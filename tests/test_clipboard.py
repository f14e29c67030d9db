import subprocess

import pytest

from mkfile.core.clipboard import clipboard
from mkfile.core.clipboard.clipboard import (
    LinuxClipboard,
    MacOSClipboard,
    NoOpClipboard,
    WindowsClipboard,
    select_clipboard,
)
from mkfile.core.errors import ClipboardError


@pytest.mark.parametrize(
    "platform,kind",
    [
        ("win32", WindowsClipboard),
        ("darwin", MacOSClipboard),
        ("linux", LinuxClipboard),
        ("freebsd13", NoOpClipboard),
    ],
)
def test_select_clipboard_by_platform(platform, kind):
    assert isinstance(select_clipboard(platform), kind)


def test_select_clipboard_disabled():
    assert isinstance(select_clipboard("linux", enabled=False), NoOpClipboard)


def test_command_clipboard_pipes_text(monkeypatch):
    calls = []

    def fake_run(args, **kwargs):
        calls.append((args, kwargs["input"]))
        return subprocess.CompletedProcess(args, 0)

    monkeypatch.setattr(clipboard.subprocess, "run", fake_run)
    assert LinuxClipboard().copy("/tmp/a.txt") is None
    assert calls == [(["xclip", "-selection", "clipboard"], b"/tmp/a.txt")]


def test_command_clipboard_missing_binary_returns_error(monkeypatch):
    def fake_run(args, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", args[0])

    monkeypatch.setattr(clipboard.subprocess, "run", fake_run)
    err = MacOSClipboard().copy("/tmp/a.txt")
    assert isinstance(err, ClipboardError)
    assert err.code == "E_CLIPBOARD"


def test_command_clipboard_nonzero_exit_returns_error(monkeypatch):
    def fake_run(args, **kwargs):
        raise subprocess.CalledProcessError(1, args)

    monkeypatch.setattr(clipboard.subprocess, "run", fake_run)
    assert isinstance(WindowsClipboard().copy("x"), ClipboardError)


def test_command_clipboard_undecodable_text_uses_fs_encoding(monkeypatch):
    calls = []

    def fake_run(args, **kwargs):
        calls.append(kwargs["input"])
        return subprocess.CompletedProcess(args, 0)

    monkeypatch.setattr(clipboard.subprocess, "run", fake_run)
    assert LinuxClipboard().copy("/tmp/\udcff.txt") is None
    assert calls == [b"/tmp/\xff.txt"]
