from pathlib import Path

import pytest

from mkfile.core.io.load_config import ConfigError, Settings, load_and_merge, load_config_file
from mkfile.core.notify.gntp_notifier import DEFAULT_PORT


def test_defaults_without_any_config(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("MKFILE_CONFIG", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    s = load_and_merge(None)
    assert s == Settings()
    assert s.gntp_port == DEFAULT_PORT == 23053


def test_load_full_config(tmp_path: Path):
    p = tmp_path / "config.yaml"
    p.write_text(
        "debug: true\n"
        "clipboard: false\n"
        "gntp:\n"
        "  enabled: true\n"
        "  host: growl.local\n"
        "  port: 23054\n"
        "  password: secret\n"
        "  icon: /tmp/icon.png\n",
        encoding="utf-8",
    )
    s = load_and_merge(str(p))
    assert s.debug is True
    assert s.clipboard is False
    assert s.gntp_host == "growl.local"
    assert s.gntp_port == 23054
    assert s.gntp_password == "secret"
    assert s.gntp_icon == "/tmp/icon.png"


def test_env_var_is_used(tmp_path: Path, monkeypatch):
    p = tmp_path / "env.yaml"
    p.write_text("clipboard: false\n", encoding="utf-8")
    monkeypatch.setenv("MKFILE_CONFIG", str(p))
    assert load_and_merge(None).clipboard is False


def test_overrides_win_and_none_is_ignored(tmp_path: Path):
    p = tmp_path / "c.yaml"
    p.write_text("debug: false\ngntp:\n  enabled: true\n", encoding="utf-8")
    s = load_and_merge(str(p), debug=True, gntp_enabled=None)
    assert s.debug is True
    assert s.gntp_enabled is True


def test_empty_file_means_defaults(tmp_path: Path):
    p = tmp_path / "empty.yaml"
    p.write_text("", encoding="utf-8")
    assert load_config_file(p) == {}


def test_missing_explicit_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_and_merge(str(tmp_path / "missing.yaml"))


@pytest.mark.parametrize(
    "text",
    [
        "- a\n- b\n",
        "colour: blue\n",
        "debug: yes please\n",
        "gntp: 3\n",
        "gntp:\n  port: true\n",
        "gntp:\n  port: 70000\n",
        "gntp:\n  host: '  '\n",
        "gntp:\n  volume: 11\n",
        "gntp: [unclosed\n",
    ],
)
def test_invalid_config(tmp_path: Path, text: str):
    p = tmp_path / "bad.yaml"
    p.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config_file(p)
